from datetime import date
from decimal import Decimal

import pytest
from django.db import DatabaseError

from accounts.models import User
from bookings.models import Booking
from bookings.services import engine
from cars.models import Car
from core.exceptions import (
    BookingNotFound,
    CarNotFound,
    CarUnavailable,
    InvalidDateRange,
    InvalidState,
    ServerError,
    Unauthorized,
)


@pytest.fixture
def owner(db):
    return User.objects.create_user(
        username="owner@example.com",
        email="owner@example.com",
        password="password123",
        role=User.OWNER,
    )


@pytest.fixture
def customer(db):
    return User.objects.create_user(
        username="casey@example.com",
        email="casey@example.com",
        password="password123",
        role=User.CUSTOMER,
    )


@pytest.fixture
def other_customer(db):
    return User.objects.create_user(
        username="drew@example.com",
        email="drew@example.com",
        password="password123",
        role=User.CUSTOMER,
    )


@pytest.fixture
def car(owner):
    return Car.objects.create(
        owner=owner,
        name="Toyota RAV4",
        type=Car.SUV,
        price_per_day=Decimal("50.00"),
    )


def _book(car, customer, start=date(2024, 1, 1), end=date(2024, 1, 4)):
    return engine.create_booking(car_id=car.id, customer=customer, start_date=start, end_date=end)


@pytest.mark.django_db
def test_create_booking_reserves_car_and_prices_it(car, customer):
    booking = _book(car, customer)

    assert booking.status == Booking.PENDING
    assert booking.total_days == 3
    assert booking.total_price == Decimal("150.00")
    assert booking.customer == customer
    car.refresh_from_db()
    assert car.is_available is False
    assert Booking.objects.filter(car=car, status=Booking.PENDING).count() == 1


@pytest.mark.django_db
def test_price_is_frozen_at_creation(car, customer):
    booking = _book(car, customer)

    car.price_per_day = Decimal("80.00")
    car.save(update_fields=["price_per_day"])

    booking.refresh_from_db()
    assert booking.total_price == Decimal("150.00")
    assert booking.total_days == 3


@pytest.mark.django_db
def test_second_booking_for_reserved_car_is_rejected(car, customer, other_customer):
    _book(car, customer)

    with pytest.raises(CarUnavailable):
        _book(car, other_customer, start=date(2024, 2, 1), end=date(2024, 2, 3))

    assert Booking.objects.filter(car=car).count() == 1


@pytest.mark.django_db
@pytest.mark.parametrize("end", [date(2024, 1, 1), date(2023, 12, 31)])
def test_invalid_date_range_creates_nothing(car, customer, end):
    with pytest.raises(InvalidDateRange):
        _book(car, customer, start=date(2024, 1, 1), end=end)

    assert not Booking.objects.exists()
    car.refresh_from_db()
    assert car.is_available is True


@pytest.mark.django_db
def test_booking_missing_car(customer):
    with pytest.raises(CarNotFound):
        engine.create_booking(
            car_id=424242,
            customer=customer,
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 2),
        )


@pytest.mark.django_db
def test_failed_insert_releases_car(monkeypatch, car, customer, caplog):
    def broken_create(**kwargs):
        raise DatabaseError("disk full")

    monkeypatch.setattr(Booking.objects, "create", broken_create)

    with pytest.raises(ServerError):
        _book(car, customer)

    car.refresh_from_db()
    assert car.is_available is True
    assert not Booking.objects.exists()
    assert "Failed to record booking" in caplog.text


@pytest.mark.django_db
def test_successful_payment_keeps_car_reserved(car, customer):
    booking = _book(car, customer)

    paid = engine.process_payment(booking_id=booking.id, customer=customer, success=True)

    assert paid.status == Booking.PAID
    booking.refresh_from_db()
    assert booking.status == Booking.PAID
    car.refresh_from_db()
    assert car.is_available is False


@pytest.mark.django_db
def test_failed_payment_releases_car(car, customer):
    booking = _book(car, customer)

    failed = engine.process_payment(booking_id=booking.id, customer=customer, success=False)

    assert failed.status == Booking.FAILED
    car.refresh_from_db()
    assert car.is_available is True


@pytest.mark.django_db
def test_payment_can_be_recorded_again(car, customer):
    booking = _book(car, customer)
    engine.process_payment(booking_id=booking.id, customer=customer, success=True)

    again = engine.process_payment(booking_id=booking.id, customer=customer, success=False)

    assert again.status == Booking.FAILED
    car.refresh_from_db()
    assert car.is_available is True


@pytest.mark.django_db
def test_payment_on_missing_booking(customer):
    with pytest.raises(BookingNotFound):
        engine.process_payment(booking_id=31337, customer=customer, success=True)


@pytest.mark.django_db
def test_other_customer_cannot_pay_or_cancel(car, customer, other_customer):
    booking = _book(car, customer)

    with pytest.raises(Unauthorized):
        engine.process_payment(booking_id=booking.id, customer=other_customer, success=False)
    with pytest.raises(Unauthorized):
        engine.cancel_booking(booking_id=booking.id, customer=other_customer)

    booking.refresh_from_db()
    car.refresh_from_db()
    assert booking.status == Booking.PENDING
    assert car.is_available is False


@pytest.mark.django_db
def test_cancel_pending_booking_releases_car(car, customer):
    booking = _book(car, customer)

    cancelled = engine.cancel_booking(booking_id=booking.id, customer=customer)

    assert cancelled.status == Booking.CANCELLED
    booking.refresh_from_db()
    assert booking.status == Booking.CANCELLED
    car.refresh_from_db()
    assert car.is_available is True


@pytest.mark.django_db
def test_cancel_paid_booking_is_rejected(car, customer):
    booking = _book(car, customer)
    engine.process_payment(booking_id=booking.id, customer=customer, success=True)

    with pytest.raises(InvalidState):
        engine.cancel_booking(booking_id=booking.id, customer=customer)

    booking.refresh_from_db()
    car.refresh_from_db()
    assert booking.status == Booking.PAID
    assert car.is_available is False


@pytest.mark.django_db
@pytest.mark.parametrize("status", [Booking.FAILED, Booking.CANCELLED])
def test_cancel_is_only_allowed_from_pending(car, customer, status):
    booking = _book(car, customer)
    Booking.objects.filter(pk=booking.pk).update(status=status)

    with pytest.raises(InvalidState):
        engine.cancel_booking(booking_id=booking.id, customer=customer)


@pytest.mark.django_db
def test_cancel_loses_to_concurrent_payment(monkeypatch, car, customer):
    booking = _book(car, customer)
    stale = Booking.objects.get(pk=booking.pk)
    engine.process_payment(booking_id=booking.id, customer=customer, success=True)

    # The cancel request read the booking while it was still pending.
    monkeypatch.setattr(engine, "_get_customer_booking", lambda booking_id, customer: stale)

    with pytest.raises(InvalidState):
        engine.cancel_booking(booking_id=booking.id, customer=customer)

    booking.refresh_from_db()
    car.refresh_from_db()
    assert booking.status == Booking.PAID
    assert car.is_available is False


@pytest.mark.django_db
def test_payment_tolerates_deleted_car(car, customer):
    booking = _book(car, customer)
    car.delete()

    failed = engine.process_payment(booking_id=booking.id, customer=customer, success=False)

    assert failed.status == Booking.FAILED
    booking.refresh_from_db()
    assert booking.car is None


@pytest.mark.django_db
def test_rebooking_after_cancel(car, customer, other_customer):
    first = _book(car, customer)
    engine.cancel_booking(booking_id=first.id, customer=customer)

    second = _book(car, other_customer)

    assert second.status == Booking.PENDING
    assert Booking.objects.filter(car=car, status__in=[Booking.PENDING, Booking.PAID]).count() == 1


@pytest.mark.django_db
def test_total_price_too_large_to_store_is_rejected(car, customer):
    car.price_per_day = Decimal("50000.00")
    car.save(update_fields=["price_per_day"])

    with pytest.raises(InvalidDateRange):
        _book(car, customer, start=date(2024, 1, 1), end=date(9999, 12, 31))

    assert not Booking.objects.exists()
    car.refresh_from_db()
    assert car.is_available is True
