from django.contrib import admin

from .models import Car


@admin.register(Car)
class CarAdmin(admin.ModelAdmin):
    list_display = ("name", "type", "owner", "price_per_day", "is_available", "created_at")
    list_filter = ("type", "is_available")
    search_fields = ("name", "owner__email")
    readonly_fields = ("is_available",)
