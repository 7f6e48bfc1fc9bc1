"""
Owner-account activation.

Owners register as ``pending``; an admin either activates them or declines
the registration, which deletes the account.
"""
import logging

from django.db import transaction

from api.exceptions import NotFoundError, ValidationError
from api.permissions import require_role
from notifications.dispatcher import dispatch
from notifications.notices import OwnerApprovedNotice, UserDeclinedNotice
from users.models import User

logger = logging.getLogger(__name__)


def _get_user(user_id):
    try:
        return User.objects.get(pk=user_id)
    except (User.DoesNotExist, ValueError, TypeError):
        raise NotFoundError('User not found')


def list_users(principal):
    require_role(principal, [User.Role.ADMIN])
    return User.objects.all()


@transaction.atomic
def approve_owner(principal, user_id):
    require_role(principal, [User.Role.ADMIN])
    user = _get_user(user_id)
    if user.role != User.Role.OWNER:
        raise ValidationError({'role': ['User is not an owner']})

    user.status = User.Status.ACTIVE
    user.save(update_fields=['status', 'updated_at'])
    logger.info('Owner %s approved by %s', user.pk, principal.pk)

    dispatch(OwnerApprovedNotice(to=user.email, user_name=user.name))
    return user


@transaction.atomic
def decline_user(principal, user_id):
    require_role(principal, [User.Role.ADMIN])
    user = _get_user(user_id)
    notice = UserDeclinedNotice(to=user.email, user_name=user.name)

    user_pk = user.pk
    user.delete()
    logger.info('User %s declined and deleted by %s', user_pk, principal.pk)

    dispatch(notice)
