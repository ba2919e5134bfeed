from django.contrib import admin
from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from accounts.api import LoginView, MeView
from bookings.api import (
    BookingCancelView,
    BookingCreateView,
    BookingPaymentView,
    CustomerBookingListView,
    OwnerBookingListView,
)
from cars.api import CarDetailView, CarListCreateView, OwnerCarListView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/auth/login", LoginView.as_view(), name="auth-login"),
    path("api/auth/refresh", TokenRefreshView.as_view(), name="auth-refresh"),
    path("api/auth/me", MeView.as_view(), name="auth-me"),
    path("api/cars", CarListCreateView.as_view(), name="car-list"),
    path("api/cars/owner", OwnerCarListView.as_view(), name="car-owner-list"),
    path("api/cars/<int:pk>", CarDetailView.as_view(), name="car-detail"),
    path("api/bookings", BookingCreateView.as_view(), name="booking-create"),
    path(
        "api/bookings/customer",
        CustomerBookingListView.as_view(),
        name="booking-customer-list",
    ),
    path(
        "api/bookings/owner",
        OwnerBookingListView.as_view(),
        name="booking-owner-list",
    ),
    path(
        "api/bookings/<int:booking_id>/pay",
        BookingPaymentView.as_view(),
        name="booking-pay",
    ),
    path(
        "api/bookings/<int:booking_id>/cancel",
        BookingCancelView.as_view(),
        name="booking-cancel",
    ),
]
