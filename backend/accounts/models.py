from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Account for both car owners and customers; the role decides which routes apply."""

    OWNER = "owner"
    CUSTOMER = "customer"
    ROLES = [
        (OWNER, "Owner"),
        (CUSTOMER, "Customer"),
    ]

    display_name = models.CharField(max_length=120, blank=True)
    role = models.CharField(max_length=20, choices=ROLES, default=CUSTOMER)

    @property
    def name(self) -> str:
        return self.display_name or f"{self.first_name} {self.last_name}".strip() or self.email

    @property
    def is_owner(self) -> bool:
        return self.role == self.OWNER

    @property
    def is_customer(self) -> bool:
        return self.role == self.CUSTOMER
