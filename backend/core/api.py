from rest_framework.response import Response

from core.exceptions import BookingError


class BookingErrorMixin:
    """Translate reservation errors raised inside a view into JSON responses."""

    def handle_exception(self, exc):
        if isinstance(exc, BookingError):
            return Response({"message": exc.message}, status=exc.status_code)
        return super().handle_exception(exc)
