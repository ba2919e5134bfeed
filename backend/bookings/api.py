from rest_framework import generics, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsCustomerRole, IsOwnerRole
from bookings.serializers import (
    BookingCreateSerializer,
    BookingSerializer,
    CustomerBookingSerializer,
    OwnerBookingSerializer,
    PaymentSerializer,
)
from bookings.services import engine, queries
from core.api import BookingErrorMixin


class BookingCreateView(BookingErrorMixin, APIView):
    """Reserve a car for the caller and open a Pending booking."""

    permission_classes = [permissions.IsAuthenticated, IsCustomerRole]

    def post(self, request):
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = engine.create_booking(customer=request.user, **serializer.validated_data)
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)


class BookingPaymentView(BookingErrorMixin, APIView):
    """Record a simulated payment result for one of the caller's bookings."""

    permission_classes = [permissions.IsAuthenticated, IsCustomerRole]

    def put(self, request, booking_id):
        serializer = PaymentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = engine.process_payment(
            booking_id=booking_id,
            customer=request.user,
            success=serializer.validated_data["success"],
        )
        return Response(BookingSerializer(booking).data)


class BookingCancelView(BookingErrorMixin, APIView):
    """Cancel one of the caller's Pending bookings."""

    permission_classes = [permissions.IsAuthenticated, IsCustomerRole]

    def put(self, request, booking_id):
        booking = engine.cancel_booking(booking_id=booking_id, customer=request.user)
        return Response(BookingSerializer(booking).data)


class CustomerBookingListView(generics.ListAPIView):
    """The caller's bookings with each car and its owner."""

    serializer_class = CustomerBookingSerializer
    permission_classes = [permissions.IsAuthenticated, IsCustomerRole]

    def get_queryset(self):
        return queries.list_by_customer(self.request.user)


class OwnerBookingListView(generics.ListAPIView):
    """Bookings on the caller's cars with the customer attached."""

    serializer_class = OwnerBookingSerializer
    permission_classes = [permissions.IsAuthenticated, IsOwnerRole]

    def get_queryset(self):
        return queries.list_by_owner(self.request.user)
