from rest_framework import serializers

from accounts.serializers import UserSummarySerializer
from bookings.models import Booking
from cars.serializers import CarSummarySerializer, CarWithOwnerSummarySerializer


class BookingCreateSerializer(serializers.Serializer):
    carId = serializers.IntegerField(source="car_id")
    startDate = serializers.DateField(source="start_date")
    endDate = serializers.DateField(source="end_date")


class PaymentSerializer(serializers.Serializer):
    paymentSuccess = serializers.BooleanField(source="success")


class BookingSerializer(serializers.ModelSerializer):
    car = serializers.PrimaryKeyRelatedField(read_only=True)
    customer = serializers.PrimaryKeyRelatedField(read_only=True)
    startDate = serializers.DateField(source="start_date", read_only=True)
    endDate = serializers.DateField(source="end_date", read_only=True)
    totalDays = serializers.IntegerField(source="total_days", read_only=True)
    totalPrice = serializers.DecimalField(
        source="total_price",
        max_digits=12,
        decimal_places=2,
        read_only=True,
    )
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "car",
            "customer",
            "startDate",
            "endDate",
            "totalDays",
            "totalPrice",
            "status",
            "createdAt",
        ]
        read_only_fields = fields


class CustomerBookingSerializer(BookingSerializer):
    car = CarWithOwnerSummarySerializer(read_only=True)


class OwnerBookingSerializer(BookingSerializer):
    car = CarSummarySerializer(read_only=True)
    customer = UserSummarySerializer(read_only=True)
