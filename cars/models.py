from django.conf import settings
from django.db import models


class Car(models.Model):
    class Status(models.TextChoices):
        PENDING = 'pending', 'Pending Approval'
        APPROVED = 'approved', 'Approved'
        REJECTED = 'rejected', 'Rejected'

    class Category(models.TextChoices):
        ECONOMY = 'Economy'
        COMPACT = 'Compact'
        SUV = 'SUV', 'SUV'
        LUXURY = 'Luxury'
        SPORTS = 'Sports'

    class Transmission(models.TextChoices):
        MANUAL = 'Manual'
        AUTOMATIC = 'Automatic'

    class Fuel(models.TextChoices):
        PETROL = 'Petrol'
        DIESEL = 'Diesel'
        ELECTRIC = 'Electric'
        HYBRID = 'Hybrid'

    EDITABLE_STATUSES = (Status.PENDING, Status.REJECTED)

    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='cars')
    brand = models.CharField(max_length=100)
    model = models.CharField(max_length=100)
    year = models.PositiveIntegerField()
    price = models.DecimalField(max_digits=10, decimal_places=2)
    image = models.ImageField(upload_to='car_images/')
    category = models.CharField(max_length=20, choices=Category.choices)
    transmission = models.CharField(max_length=20, choices=Transmission.choices)
    fuel = models.CharField(max_length=20, choices=Fuel.choices)
    seats = models.PositiveIntegerField()
    available = models.BooleanField(default=True)
    wilaya = models.CharField(max_length=100)
    commune = models.CharField(max_length=100, blank=True, default='')
    chauffeur = models.BooleanField(default=False)
    rating = models.DecimalField(max_digits=3, decimal_places=2, default=0)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING)
    rejection_reason = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status'], name='car_status_idx'),
            models.Index(fields=['owner', 'status'], name='car_owner_status_idx'),
        ]

    def __str__(self):
        return f"{self.year} {self.brand} {self.model}"

    @property
    def details(self):
        return f"{self.brand} {self.model}"

    @property
    def is_bookable(self):
        return self.status == self.Status.APPROVED and self.available

    @property
    def is_editable(self):
        return self.status in self.EDITABLE_STATUSES


class CarFeature(models.Model):
    car = models.ForeignKey(Car, on_delete=models.CASCADE, related_name='features')
    name = models.CharField(max_length=100)
    position = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ['position', 'id']

    def __str__(self):
        return self.name
