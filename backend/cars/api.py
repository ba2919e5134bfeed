from rest_framework import generics, permissions, status
from rest_framework.exceptions import PermissionDenied
from rest_framework.response import Response

from accounts.permissions import IsOwnerRole
from cars.filters import AvailableCarFilter
from cars.models import Car
from cars.serializers import CarSerializer


class CarListCreateView(generics.ListCreateAPIView):
    """Public listing of cars that can be booked; owners add new listings."""

    serializer_class = CarSerializer
    filterset_class = AvailableCarFilter

    def get_permissions(self):
        if self.request.method == "GET":
            return [permissions.AllowAny()]
        return [permissions.IsAuthenticated(), IsOwnerRole()]

    def get_queryset(self):
        return Car.objects.filter(is_available=True).select_related("owner")

    def perform_create(self, serializer):
        serializer.save(owner=self.request.user)


class OwnerCarListView(generics.ListAPIView):
    """Every car listed by the current owner, reserved or not."""

    serializer_class = CarSerializer
    permission_classes = [permissions.IsAuthenticated, IsOwnerRole]

    def get_queryset(self):
        return Car.objects.filter(owner=self.request.user).select_related("owner")


class CarDetailView(generics.RetrieveUpdateDestroyAPIView):
    """Anyone may read a car; only its owner may change or remove it."""

    serializer_class = CarSerializer
    queryset = Car.objects.select_related("owner")

    def get_permissions(self):
        if self.request.method == "GET":
            return [permissions.AllowAny()]
        return [permissions.IsAuthenticated(), IsOwnerRole()]

    def get_object(self):
        car = super().get_object()
        if self.request.method != "GET" and car.owner_id != self.request.user.id:
            raise PermissionDenied("Not authorized")
        return car

    def put(self, request, *args, **kwargs):
        # Owners send only the fields they change.
        return self.partial_update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        car = self.get_object()
        car.delete()
        return Response({"message": "Car removed"}, status=status.HTTP_200_OK)
