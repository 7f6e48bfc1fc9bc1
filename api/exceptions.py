import logging

from rest_framework import exceptions, status
from rest_framework.response import Response

logger = logging.getLogger(__name__)


class ValidationError(exceptions.ValidationError):
    """Malformed or missing input; ``detail`` carries the field errors."""


class AuthenticationError(exceptions.AuthenticationFailed):
    default_detail = 'Invalid token'


class AuthorizationError(exceptions.PermissionDenied):
    default_detail = 'Access denied'


class NotFoundError(exceptions.NotFound):
    pass


class ConflictError(exceptions.APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'The resource is not in a state that allows this operation.'
    default_code = 'conflict'


class NotificationError(exceptions.APIException):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = 'Failed to send notification.'
    default_code = 'notification_failed'


class StorageError(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Failed to store file.'
    default_code = 'storage_failed'


def exception_handler(exc, context):
    # rest_framework.views loads the authentication classes, which import this module.
    from rest_framework.views import exception_handler as drf_exception_handler

    response = drf_exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception('Unhandled error in %s', view.__class__.__name__ if view else 'view')
        return Response({'message': 'Server error'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, exceptions.ValidationError):
        response.data = {'message': 'Validation failed', 'errors': response.data}
    elif isinstance(response.data, dict) and 'detail' in response.data:
        response.data = {'message': response.data['detail']}
    return response
