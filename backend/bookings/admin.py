from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ("id", "car", "customer", "start_date", "end_date", "total_price", "status", "created_at")
    list_filter = ("status",)
    search_fields = ("car__name", "customer__email")
    # Status changes go through the booking engine so the car flag stays consistent.
    readonly_fields = ("car", "customer", "total_days", "total_price", "status", "created_at")
