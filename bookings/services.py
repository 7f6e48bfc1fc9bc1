"""
Booking workflow.

A customer books an approved, available car; the car is locked until the
owner either confirms the booking (the car stays locked) or rejects it (the
car is released). Confirmed and cancelled bookings are final.
"""
import logging

from django.db import transaction
from django.utils import timezone

from api.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from api.permissions import require_role
from cars.models import Car
from notifications.dispatcher import dispatch
from notifications.notices import BookingStatusNotice
from users.models import User

from . import pricing
from .models import Booking
from .serializers import BookingRequestSerializer

logger = logging.getLogger(__name__)


def _with_relations(qs):
    return qs.select_related('user', 'car', 'owner')


def lock_car(car_id):
    """
    Take the availability lock on an approved car.

    A single conditional UPDATE: of two concurrent bookings of the same car
    only one sees its row updated. Returns whether the lock was taken.
    """
    updated = (Car.objects
               .filter(pk=car_id, available=True, status=Car.Status.APPROVED)
               .update(available=False, updated_at=timezone.now()))
    return updated == 1


def release_car(car_id):
    Car.objects.filter(pk=car_id).update(available=True, updated_at=timezone.now())


def create_booking(principal, request_data):
    require_role(principal, [User.Role.CUSTOMER])
    serializer = BookingRequestSerializer(data=request_data)
    if not serializer.is_valid():
        raise ValidationError(serializer.errors)
    data = serializer.validated_data

    with transaction.atomic():
        if not lock_car(data['car_id']):
            logger.info('Customer %s could not book car %s: not available', principal.pk, data['car_id'])
            raise ConflictError('Car not available')

        car = Car.objects.select_related('owner').get(pk=data['car_id'])
        quote = pricing.quote(car.price, data['start_date'], data['end_date'], data['additional_services'])

        booking = Booking.objects.create(
            user=principal,
            car=car,
            owner=car.owner,
            start_date=data['start_date'],
            end_date=data['end_date'],
            total_amount=quote.total_amount,
            status=Booking.Status.PENDING,
            pickup_location=data['pickup_location'],
            dropoff_location=data['dropoff_location'],
            additional_services=data['additional_services'],
            payment_method=data['payment_method'],
        )
        logger.info('Booking %s created by customer %s for car %s (%s days, total %s)',
                    booking.pk, principal.pk, car.pk, quote.days, quote.total_amount)

        dispatch(BookingStatusNotice(
            to=car.owner.email,
            user_name=car.owner.name,
            car_details=car.details,
            status=Booking.Status.PENDING,
            pickup_location=booking.pickup_location,
            start_date=booking.start_date,
        ))
    return booking


def list_bookings(principal):
    qs = _with_relations(Booking.objects.all())
    if principal.role == User.Role.ADMIN:
        return qs
    return qs.filter(user=principal)


def list_all_bookings(principal):
    require_role(principal, [User.Role.ADMIN])
    return _with_relations(Booking.objects.all())


def list_pending_owner_bookings(principal):
    require_role(principal, [User.Role.OWNER])
    return _with_relations(Booking.objects.filter(owner=principal, status=Booking.Status.PENDING))


def _get_owned_pending_booking(principal, booking_id):
    try:
        booking = _with_relations(Booking.objects.select_for_update()).get(pk=booking_id)
    except (Booking.DoesNotExist, ValueError, TypeError):
        raise NotFoundError('Booking not found')

    if principal.role != User.Role.OWNER or booking.owner_id != principal.pk:
        logger.info('User %s denied access to booking %s', principal.pk, booking.pk)
        raise AuthorizationError()
    if booking.status != Booking.Status.PENDING:
        raise ConflictError('Only pending bookings can be updated')
    return booking


def _notify_customer(booking, **extra):
    dispatch(BookingStatusNotice(
        to=booking.user.email,
        user_name=booking.user.name,
        car_details=booking.car.details,
        status=booking.status,
        pickup_location=booking.pickup_location,
        start_date=booking.start_date,
        **extra
    ))


@transaction.atomic
def approve_booking(principal, booking_id):
    booking = _get_owned_pending_booking(principal, booking_id)

    booking.status = Booking.Status.CONFIRMED
    booking.save(update_fields=['status', 'updated_at'])
    logger.info('Booking %s confirmed by owner %s', booking.pk, principal.pk)

    _notify_customer(booking)
    return booking


@transaction.atomic
def reject_booking(principal, booking_id, reason=None):
    booking = _get_owned_pending_booking(principal, booking_id)

    booking.status = Booking.Status.CANCELLED
    booking.rejection_reason = reason or ''
    booking.save(update_fields=['status', 'rejection_reason', 'updated_at'])
    release_car(booking.car_id)
    booking.car.available = True
    logger.info('Booking %s rejected by owner %s, car %s released', booking.pk, principal.pk, booking.car_id)

    _notify_customer(booking, rejection_reason=reason)
    return booking
