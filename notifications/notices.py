"""
Typed payloads for every mail the platform sends.

Each notice knows its recipient, subject and template; ``context()`` is
what the template is rendered with.
"""
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Optional

PERMANENT_REJECTION = 'Permanently rejected'


@dataclass(frozen=True)
class CarStatusNotice:
    to: str
    owner_name: str
    car_details: str
    status: str
    rejection_reason: Optional[str] = None
    chauffeur: bool = False

    template_name = 'notifications/car_status.html'

    @property
    def subject(self):
        if self.status == 'approved':
            return f'Your Car {self.car_details} Has Been Approved!'
        if self.status == 'rejected':
            return f'Update on Your Car {self.car_details}'
        if self.status == 'resubmitted':
            return f'Your Car {self.car_details} Has Been Resubmitted'
        raise ValueError(f'Invalid car status {self.status!r}')

    def context(self):
        return dict(asdict(self), definitive=self.rejection_reason == PERMANENT_REJECTION)


@dataclass(frozen=True)
class BookingStatusNotice:
    to: str
    user_name: str
    car_details: str
    status: str
    pickup_location: str
    start_date: datetime
    rejection_reason: Optional[str] = None

    template_name = 'notifications/booking_status.html'

    @property
    def subject(self):
        if self.status == 'pending':
            return f'New Booking Request for {self.car_details}'
        if self.status == 'confirmed':
            return f'Your Booking for {self.car_details} Has Been Confirmed!'
        if self.status == 'cancelled':
            return f'Update on Your Booking for {self.car_details}'
        raise ValueError(f'Invalid booking status {self.status!r}')

    def context(self):
        return asdict(self)


@dataclass(frozen=True)
class RegistrationPendingNotice:
    to: str
    user_name: str

    subject = 'Your Registration is Under Review'
    template_name = 'notifications/registration_pending.html'

    def context(self):
        return asdict(self)


@dataclass(frozen=True)
class OwnerApprovedNotice:
    to: str
    user_name: str

    subject = 'Your Owner Account Has Been Approved!'
    template_name = 'notifications/owner_approved.html'

    def context(self):
        return asdict(self)


@dataclass(frozen=True)
class UserDeclinedNotice:
    to: str
    user_name: str

    subject = 'Your Registration Has Been Declined'
    template_name = 'notifications/user_declined.html'

    def context(self):
        return asdict(self)
