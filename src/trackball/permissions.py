from rest_framework.permissions import SAFE_METHODS, BasePermission

from trackball.models import MaintenanceSettings


class NotUnderMaintenance(BasePermission):
    message = 'The platform is under maintenance, please try again later.'

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True

        if request.user and request.user.is_staff:
            return True

        return MaintenanceSettings.current() is None


class IsNotRestricted(BasePermission):
    message = 'Your account is restricted.'

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True

        user = request.user
        if not user or not user.is_authenticated:
            return False

        if user.is_banned:
            self.message = 'Your account has been banned.'
            return False

        if user.is_currently_locked:
            self.message = 'Your account is locked until %s.' % user.locked_until
            return False

        return True
