from rest_framework.permissions import BasePermission


class HasRole(BasePermission):
    """
    Allow access only to authenticated users for whom ``role_check`` holds.
    Authentication failures are left to the authentication classes (401).
    """

    role_check: str | None = None
    message = "Not authorized for this role."

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False
        return bool(getattr(request.user, self.role_check, False))


class IsOwnerRole(HasRole):
    role_check = "is_owner"
    message = "Not authorized as an owner."


class IsCustomerRole(HasRole):
    role_check = "is_customer"
    message = "Not authorized as a customer."
