from rest_framework import permissions
from .models import User
import logging

logger = logging.getLogger(__name__)


def _has_role(request, *roles):
    user = request.user
    return bool(user and user.is_authenticated and getattr(user, "role", None) in roles)


class IsStudent(permissions.BasePermission):
    message = "Access denied"

    def has_permission(self, request, view):
        return _has_role(request, User.Role.STUDENT)


class IsStaff(permissions.BasePermission):
    message = "Access denied"

    def has_permission(self, request, view):
        return _has_role(request, User.Role.STAFF)


class IsStudentOrStaff(permissions.BasePermission):
    """Any authenticated canteen identity, whichever role it carries."""

    message = "Access denied"

    def has_permission(self, request, view):
        return _has_role(request, User.Role.STUDENT, User.Role.STAFF)


class ReadOnlyForStudents(permissions.BasePermission):
    """
    Allow every authenticated user to read,
    but only staff to create/update/delete.
    """

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return _has_role(request, User.Role.STUDENT, User.Role.STAFF)
        return _has_role(request, User.Role.STAFF)
