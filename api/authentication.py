import logging

from rest_framework.authentication import TokenAuthentication

from users.models import User

from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class BearerTokenAuthentication(TokenAuthentication):
    """
    Resolves ``Authorization: Bearer <key>`` into the calling user.

    The user is the principal handed to the services: ``user.id`` and
    ``user.role`` are all they look at.
    """
    keyword = 'Bearer'

    def authenticate_credentials(self, key):
        model = self.get_model()
        try:
            token = model.objects.select_related('user').get(key=key)
        except model.DoesNotExist:
            logger.info('Rejected unknown token %s...', key[:6])
            raise AuthenticationError('Invalid token')

        user = token.user
        if not user.is_active or user.status != User.Status.ACTIVE:
            logger.info('Rejected token of %s user %s', user.status, user.pk)
            raise AuthenticationError('Account is not active')

        return (user, token)


def verify(key):
    """Return the principal owning ``key`` or raise ``AuthenticationError``."""
    user, _ = BearerTokenAuthentication().authenticate_credentials(key)
    return user
