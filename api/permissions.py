import logging

from rest_framework.permissions import BasePermission

from users.models import User

from .exceptions import AuthorizationError

logger = logging.getLogger(__name__)


def require_role(principal, allowed_roles):
    role = getattr(principal, 'role', None)
    if role not in allowed_roles:
        logger.info('Role check failed: %s not in %s', role, list(allowed_roles))
        raise AuthorizationError()


class HasRole(BasePermission):
    allowed_roles = ()
    message = 'Access denied'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.role in self.allowed_roles)


class IsCustomer(HasRole):
    allowed_roles = (User.Role.CUSTOMER,)


class IsOwner(HasRole):
    allowed_roles = (User.Role.OWNER,)


class IsAdmin(HasRole):
    allowed_roles = (User.Role.ADMIN,)
