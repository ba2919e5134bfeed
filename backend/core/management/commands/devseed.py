from decimal import Decimal

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from accounts.models import User
from cars.models import Car


SEED_PASSWORD = "CarRental123!"
SUPERUSER_EMAIL = "admin@carrental.test"
SUPERUSER_PASSWORD = "AdminCarRental123!"

SEED_CARS = [
    ("owner@carrental.test", "Toyota RAV4", Car.SUV, "65.00", "Roomy hybrid SUV with roof rails."),
    ("owner@carrental.test", "Honda Civic", Car.SEDAN, "42.50", "Economical city sedan."),
    ("owner@carrental.test", "Mazda MX-5", Car.CONVERTIBLE, "89.00", "Two seats, soft top, summer only."),
    ("fleet@carrental.test", "Ford Transit", Car.VAN, "110.00", "12-seat passenger van."),
    ("fleet@carrental.test", "VW Golf", Car.HATCHBACK, "39.00", ""),
]


class Command(BaseCommand):
    help = "Populate the local development database with sample owners, customers and cars."

    def handle(self, *args, **options):
        if not settings.DEBUG:
            raise CommandError("Refusing to seed data while DEBUG is False.")

        with transaction.atomic():
            self.stdout.write(self.style.MIGRATE_HEADING("Creating users"))
            owners = {
                "owner@carrental.test": self._ensure_user(
                    email="owner@carrental.test",
                    first_name="Olivia",
                    last_name="Owner",
                    role=User.OWNER,
                ),
                "fleet@carrental.test": self._ensure_user(
                    email="fleet@carrental.test",
                    first_name="Felix",
                    last_name="Fleet",
                    role=User.OWNER,
                ),
            }
            self._ensure_user(
                email="customer@carrental.test",
                first_name="Casey",
                last_name="Customer",
                role=User.CUSTOMER,
            )

            self.stdout.write(self.style.MIGRATE_HEADING("Ensuring admin superuser"))
            self._ensure_superuser()

            self.stdout.write(self.style.MIGRATE_HEADING("Creating cars"))
            for owner_email, name, car_type, price, description in SEED_CARS:
                car, created = Car.objects.get_or_create(
                    owner=owners[owner_email],
                    name=name,
                    defaults={
                        "type": car_type,
                        "price_per_day": Decimal(price),
                        "description": description,
                    },
                )
                verb = "Created" if created else "Kept"
                self.stdout.write(f"  {verb} {car}")

        self.stdout.write(self.style.SUCCESS(f"Seed complete. Password for all seed users: {SEED_PASSWORD}"))

    def _ensure_user(self, *, email, first_name, last_name, role):
        user, created = User.objects.get_or_create(
            username=email,
            defaults={
                "email": email,
                "first_name": first_name,
                "last_name": last_name,
                "display_name": f"{first_name} {last_name}",
                "role": role,
            },
        )
        if created:
            user.set_password(SEED_PASSWORD)
            user.save(update_fields=["password"])
        return user

    def _ensure_superuser(self):
        if User.objects.filter(username=SUPERUSER_EMAIL).exists():
            return
        User.objects.create_superuser(
            username=SUPERUSER_EMAIL,
            email=SUPERUSER_EMAIL,
            password=SUPERUSER_PASSWORD,
            role=User.OWNER,
        )
