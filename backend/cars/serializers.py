from decimal import Decimal

from rest_framework import serializers

from accounts.serializers import UserSummarySerializer
from cars.models import Car


class CarSerializer(serializers.ModelSerializer):
    owner = UserSummarySerializer(read_only=True)
    pricePerDay = serializers.DecimalField(
        source="price_per_day",
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0.01"),
    )
    isAvailable = serializers.BooleanField(source="is_available", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Car
        fields = [
            "id",
            "owner",
            "name",
            "type",
            "pricePerDay",
            "description",
            "image",
            "isAvailable",
            "createdAt",
        ]
        read_only_fields = ["id"]


class CarSummarySerializer(serializers.ModelSerializer):
    """Car display fields embedded in booking listings."""

    pricePerDay = serializers.DecimalField(
        source="price_per_day",
        max_digits=10,
        decimal_places=2,
        read_only=True,
    )

    class Meta:
        model = Car
        fields = ["id", "name", "type", "pricePerDay", "image"]
        read_only_fields = fields


class CarWithOwnerSummarySerializer(CarSummarySerializer):
    owner = serializers.SerializerMethodField()

    class Meta(CarSummarySerializer.Meta):
        fields = CarSummarySerializer.Meta.fields + ["owner"]
        read_only_fields = fields

    def get_owner(self, obj: Car):
        return {"id": obj.owner_id, "name": obj.owner.name}
