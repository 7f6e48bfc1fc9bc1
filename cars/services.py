"""
Car listing lifecycle.

Owners submit listings, which wait as ``pending`` until an admin approves or
rejects them. Pending and rejected listings can be edited by their owner,
which sends them back to ``pending``. Only admins delete listings.
"""
import logging
import os

from django.db import transaction
from rest_framework import serializers

from api.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from api.permissions import require_role
from notifications.dispatcher import dispatch
from notifications.notices import PERMANENT_REJECTION, CarStatusNotice
from users.models import User

from .models import Car, CarFeature
from .serializers import CarDraftSerializer

logger = logging.getLogger(__name__)

# Largest primary key a BigAutoField can hold.
MAX_CAR_ID = 2 ** 63 - 1


def _validate_draft(draft):
    serializer = CarDraftSerializer(data=draft)
    if not serializer.is_valid():
        raise ValidationError(serializer.errors)
    data = dict(serializer.validated_data)
    features = data.pop('features', [])
    return data, features


def _validate_image(image):
    try:
        return serializers.ImageField().run_validation(image)
    except serializers.ValidationError as exc:
        raise ValidationError({'image': exc.detail})


def _store_image(car, image):
    try:
        car.image.save(os.path.basename(image.name), image, save=False)
    except OSError as exc:
        logger.error('Could not store image %s: %s', image.name, exc)
        raise StorageError() from exc


def _discard_image(name):
    """Best-effort removal of a stored image; a missing blob is fine."""
    if not name:
        return
    field = Car._meta.get_field('image')
    try:
        field.storage.delete(name)
    except OSError as exc:
        logger.warning('Could not delete image %s: %s', name, exc)


def _set_features(car, features):
    car.features.all().delete()
    CarFeature.objects.bulk_create(
        CarFeature(car=car, name=name, position=position)
        for position, name in enumerate(features)
    )


def _get_car(car_id, for_update=False):
    qs = Car.objects.select_related('owner')
    if for_update:
        qs = qs.select_for_update()
    try:
        return qs.get(pk=car_id)
    except (Car.DoesNotExist, ValueError, TypeError):
        raise NotFoundError('Car not found')


def _notify_owner(car, status, **extra):
    dispatch(CarStatusNotice(
        to=car.owner.email,
        owner_name=car.owner.name,
        car_details=car.details,
        status=status,
        chauffeur=car.chauffeur,
        **extra
    ))


def submit_car(principal, draft, image):
    require_role(principal, [User.Role.OWNER])
    data, features = _validate_draft(draft)
    if image is None:
        raise ValidationError({'image': ['Image is required']})
    image = _validate_image(image)

    car = Car(
        owner=principal,
        status=Car.Status.PENDING,
        available=True,
        rating=0,
        **data
    )
    _store_image(car, image)
    try:
        with transaction.atomic():
            car.save()
            _set_features(car, features)
    except Exception:
        _discard_image(car.image.name)
        raise

    logger.info('Car %s submitted by owner %s', car.pk, principal.pk)
    return car


def list_approved_cars():
    return (Car.objects.filter(status=Car.Status.APPROVED)
            .select_related('owner').prefetch_related('features'))


def list_owned_cars(principal):
    require_role(principal, [User.Role.OWNER])
    return (Car.objects.filter(owner=principal)
            .select_related('owner').prefetch_related('features'))


def list_pending_cars(principal):
    require_role(principal, [User.Role.ADMIN])
    return (Car.objects.filter(status=Car.Status.PENDING)
            .select_related('owner').prefetch_related('features'))


@transaction.atomic
def approve_car(principal, car_id):
    require_role(principal, [User.Role.ADMIN])
    car = _get_car(car_id, for_update=True)

    car.status = Car.Status.APPROVED
    car.save(update_fields=['status', 'updated_at'])
    logger.info('Car %s approved by %s', car.pk, principal.pk)

    _notify_owner(car, 'approved')
    return car


@transaction.atomic
def reject_car(principal, car_id, reason=None, definitive=False):
    """
    Reject a listing. ``definitive`` only changes the default reason; the
    owner is told the car cannot be resubmitted but edits stay possible.
    """
    require_role(principal, [User.Role.ADMIN])
    car = _get_car(car_id, for_update=True)

    car.status = Car.Status.REJECTED
    car.rejection_reason = reason or (PERMANENT_REJECTION if definitive else None)
    car.save(update_fields=['status', 'rejection_reason', 'updated_at'])
    logger.info('Car %s rejected by %s (reason: %s)', car.pk, principal.pk, car.rejection_reason)

    _notify_owner(car, 'rejected', rejection_reason=car.rejection_reason)
    return car


def edit_car(principal, car_id, draft, image=None):
    require_role(principal, [User.Role.OWNER])
    with transaction.atomic():
        car = _get_car(car_id, for_update=True)
        if car.owner_id != principal.pk:
            logger.info('Owner %s tried to edit car %s of owner %s', principal.pk, car.pk, car.owner_id)
            raise AuthorizationError('Unauthorized to edit this car')
        if not car.is_editable:
            raise ConflictError('Only pending or rejected cars can be edited')

        data, features = _validate_draft(draft)
        if image is not None:
            image = _validate_image(image)

        for field, value in data.items():
            setattr(car, field, value)

        previous_image = None
        if image is not None:
            previous_image = car.image.name
            _store_image(car, image)

        car.status = Car.Status.PENDING
        car.rejection_reason = None
        car.save()
        _set_features(car, features)
        logger.info('Car %s resubmitted by owner %s', car.pk, principal.pk)

        _notify_owner(car, 'resubmitted')

    if previous_image and previous_image != car.image.name:
        _discard_image(previous_image)
    return car


def _parse_ids(ids):
    parsed, malformed = [], []
    for raw in ids:
        if isinstance(raw, bool):
            malformed.append(raw)
            continue
        try:
            value = int(str(raw).strip())
        except (TypeError, ValueError):
            malformed.append(raw)
            continue
        if not 0 < value <= MAX_CAR_ID:
            malformed.append(raw)
        else:
            parsed.append(value)
    if malformed:
        raise ValidationError({'ids': [f'Invalid car id: {raw!r}' for raw in malformed]})
    return parsed


def delete_cars_by_ids(principal, ids):
    require_role(principal, [User.Role.ADMIN])
    car_ids = _parse_ids(ids)

    with transaction.atomic():
        cars = list(Car.objects.select_for_update().filter(pk__in=car_ids))
        if not cars:
            raise NotFoundError('No cars found for the given ids')

        for car in cars:
            _discard_image(car.image.name)

        deleted_ids = [car.pk for car in cars]
        Car.objects.filter(pk__in=deleted_ids).delete()

    logger.info('Admin %s deleted cars %s', principal.pk, deleted_ids)
    return {'deletedCount': len(deleted_ids), 'deletedIds': deleted_ids}
