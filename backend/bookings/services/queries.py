from django.db.models import QuerySet

from bookings.models import Booking


def list_by_customer(customer) -> QuerySet:
    """Bookings made by ``customer``, with each car and its owner loaded."""
    return (
        Booking.objects.filter(customer=customer)
        .select_related("car", "car__owner")
        .order_by("id")
    )


def list_by_owner(owner) -> QuerySet:
    """Bookings on any car listed by ``owner``, with car and customer loaded."""
    return (
        Booking.objects.filter(car__owner=owner)
        .select_related("car", "customer")
        .order_by("id")
    )
