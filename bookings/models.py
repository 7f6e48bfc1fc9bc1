from django.conf import settings
from django.db import models

from cars.models import Car


class Booking(models.Model):
    class Status(models.TextChoices):
        PENDING = 'pending', 'Pending Approval'
        CONFIRMED = 'confirmed', 'Confirmed'
        COMPLETED = 'completed', 'Completed'
        CANCELLED = 'cancelled', 'Cancelled'

    class PaymentMethod(models.TextChoices):
        CREDIT_CARD = 'credit-card', 'Credit Card'
        PAYPAL = 'paypal', 'PayPal'

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='bookings')
    car = models.ForeignKey(Car, on_delete=models.CASCADE, related_name='bookings')
    # Copied from car.owner when the booking is made; never revalidated.
    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='owner_bookings')
    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    total_amount = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING)
    pickup_location = models.CharField(max_length=255)
    dropoff_location = models.CharField(max_length=255)
    additional_services = models.JSONField(default=list, blank=True)
    payment_method = models.CharField(max_length=20, choices=PaymentMethod.choices)
    rejection_reason = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['owner', 'status'], name='booking_owner_status_idx'),
            models.Index(fields=['user'], name='booking_user_idx'),
        ]

    def __str__(self):
        return f"{self.user.email} - {self.car} ({self.start_date:%Y-%m-%d} to {self.end_date:%Y-%m-%d})"
