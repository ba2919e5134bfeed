from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class Car(models.Model):
    """A rentable vehicle listed by an owner."""

    SUV = "SUV"
    SEDAN = "Sedan"
    HATCHBACK = "Hatchback"
    CONVERTIBLE = "Convertible"
    TRUCK = "Truck"
    VAN = "Van"
    TYPES = [
        (SUV, "SUV"),
        (SEDAN, "Sedan"),
        (HATCHBACK, "Hatchback"),
        (CONVERTIBLE, "Convertible"),
        (TRUCK, "Truck"),
        (VAN, "Van"),
    ]

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="cars",
    )
    name = models.CharField(max_length=200)
    type = models.CharField(max_length=20, choices=TYPES)
    price_per_day = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    description = models.TextField(blank=True)
    image = models.URLField(max_length=500, blank=True)
    # Flipped only through cars.services.inventory.
    is_available = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return f"{self.name} ({self.type})"
