"""
Booking lifecycle: reserve a car, record the payment outcome, or cancel.

The customer is always passed in explicitly; the API layer resolves it from the
request credentials. Car availability is only touched through
cars.services.inventory.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from django.db import DatabaseError, transaction

from bookings.models import Booking
from cars.services.inventory import acquire, calculate_total_days, release
from core.exceptions import (
    BookingNotFound,
    InvalidDateRange,
    InvalidState,
    ServerError,
    Unauthorized,
)

logger = logging.getLogger(__name__)


def _get_customer_booking(booking_id, customer) -> Booking:
    try:
        booking = Booking.objects.get(pk=booking_id)
    except Booking.DoesNotExist:
        raise BookingNotFound()
    if booking.customer_id != customer.pk:
        raise Unauthorized()
    return booking


def _total_price_limit() -> Decimal:
    field = Booking._meta.get_field("total_price")
    return Decimal(10) ** (field.max_digits - field.decimal_places)


def _release_after_failure(car_id) -> None:
    try:
        release(car_id)
    except DatabaseError:
        logger.exception("Could not release car %s after a failed booking.", car_id)


def create_booking(*, car_id, customer, start_date: date, end_date: date) -> Booking:
    """
    Reserve ``car_id`` for ``customer`` and record a Pending booking.

    The day count and price are computed once here and never recomputed, even
    if the owner later changes the car's daily price.
    """
    total_days = calculate_total_days(start_date, end_date)
    if total_days <= 0:
        raise InvalidDateRange()

    car = acquire(car_id)
    total_price = total_days * car.price_per_day
    if total_price >= _total_price_limit():
        _release_after_failure(car.pk)
        raise InvalidDateRange("Booking period is too long")

    try:
        booking = Booking.objects.create(
            car=car,
            customer=customer,
            start_date=start_date,
            end_date=end_date,
            total_days=total_days,
            total_price=total_price,
            status=Booking.PENDING,
        )
    except DatabaseError as exc:
        logger.exception("Failed to record booking for car %s.", car.pk)
        _release_after_failure(car.pk)
        raise ServerError() from exc

    logger.info(
        "Booking %s created for car %s by customer %s (%s days, %s).",
        booking.pk,
        car.pk,
        customer.pk,
        total_days,
        total_price,
    )
    return booking


def process_payment(*, booking_id, customer, success: bool) -> Booking:
    """
    Record the outcome of a (simulated) payment.

    Any status is overwritten; repeated calls are accepted. A failed payment
    gives the car back.
    """
    booking = _get_customer_booking(booking_id, customer)
    booking.status = Booking.PAID if success else Booking.FAILED

    try:
        with transaction.atomic():
            booking.save(update_fields=["status"])
            if not success and booking.car_id is not None:
                release(booking.car_id)
    except DatabaseError as exc:
        logger.exception("Failed to record payment for booking %s.", booking.pk)
        raise ServerError() from exc

    logger.info("Booking %s marked %s.", booking.pk, booking.status)
    return booking


def cancel_booking(*, booking_id, customer) -> Booking:
    """Cancel a Pending booking and give its car back."""
    booking = _get_customer_booking(booking_id, customer)
    if booking.status != Booking.PENDING:
        raise InvalidState()

    try:
        with transaction.atomic():
            # A payment recorded after the read above wins.
            updated = Booking.objects.filter(
                pk=booking.pk,
                status=Booking.PENDING,
            ).update(status=Booking.CANCELLED)
            if not updated:
                raise InvalidState()
            if booking.car_id is not None:
                release(booking.car_id)
    except DatabaseError as exc:
        logger.exception("Failed to cancel booking %s.", booking.pk)
        raise ServerError() from exc

    booking.status = Booking.CANCELLED
    logger.info("Booking %s cancelled.", booking.pk)
    return booking
