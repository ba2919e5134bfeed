"""
Errors raised by the reservation engine.

Each error carries the HTTP status the API layer answers with, so services stay
free of any transport concerns while views can map them in one place.
"""


class BookingError(Exception):
    status_code = 400
    default_message = "Booking request could not be processed."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(BookingError):
    status_code = 404
    default_message = "Not found."


class CarNotFound(NotFound):
    default_message = "Car not found"


class BookingNotFound(NotFound):
    default_message = "Booking not found"


class Unauthorized(BookingError):
    status_code = 403
    default_message = "Not authorized"


class InvalidDateRange(BookingError):
    default_message = "Invalid date range"


class Unavailable(BookingError):
    default_message = "Car is not available for booking"


class CarUnavailable(Unavailable):
    pass


class InvalidState(BookingError):
    default_message = "Booking cannot be cancelled"


class ServerError(BookingError):
    status_code = 500
    default_message = "Server error"
