import io
import logging
from datetime import datetime, timezone
from decimal import Decimal

from django.core.files.base import ContentFile
from django.core.management.base import BaseCommand
from django.db import transaction
from PIL import Image

from bookings import pricing
from bookings.models import Booking
from cars.models import Car, CarFeature
from testimonials.models import Testimonial
from users.models import User

logger = logging.getLogger(__name__)

DEMO_PASSWORD = 'password123'

DEMO_USERS = [
    {'name': 'John Doe', 'email': 'john@example.com', 'phone': '+1234567890', 'role': User.Role.CUSTOMER},
    {'name': 'Jane Owner', 'email': 'jane@example.com', 'phone': '+1234567891', 'role': User.Role.OWNER},
]

DEMO_CARS = [
    {
        'brand': 'Toyota', 'model': 'Camry', 'year': 2023, 'price': Decimal('45'),
        'category': Car.Category.COMPACT, 'transmission': Car.Transmission.AUTOMATIC,
        'fuel': Car.Fuel.PETROL, 'seats': 5, 'wilaya': 'Alger', 'commune': 'Downtown',
        'rating': Decimal('4.5'), 'features': ['GPS', 'AC', 'Bluetooth'], 'color': 'silver',
    },
    {
        'brand': 'BMW', 'model': 'X5', 'year': 2023, 'price': Decimal('95'),
        'category': Car.Category.SUV, 'transmission': Car.Transmission.AUTOMATIC,
        'fuel': Car.Fuel.PETROL, 'seats': 7, 'wilaya': 'Alger', 'commune': 'Airport',
        'rating': Decimal('4.8'), 'features': ['GPS', 'Leather Seats', 'Sunroof'], 'color': 'navy',
    },
]


def placeholder_image(color):
    buffer = io.BytesIO()
    Image.new('RGB', (320, 200), color).save(buffer, format='PNG')
    return ContentFile(buffer.getvalue())


class Command(BaseCommand):
    help = 'Load demo users, approved cars, a booking and a testimonial.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--flush', action='store_true',
            help='Delete existing users, cars, bookings and testimonials first.',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['flush']:
            Testimonial.objects.all().delete()
            Booking.objects.all().delete()
            Car.objects.all().delete()
            User.objects.filter(is_superuser=False).delete()
            self.stdout.write('Cleared existing data')

        if User.objects.filter(email__in=[u['email'] for u in DEMO_USERS]).exists():
            self.stdout.write(self.style.WARNING('Demo data already present; use --flush to reload it.'))
            return

        users = {}
        for fields in DEMO_USERS:
            users[fields['role']] = User.objects.create_user(
                password=DEMO_PASSWORD, status=User.Status.ACTIVE, **fields
            )
        if not User.objects.filter(role=User.Role.ADMIN).exists():
            User.objects.create_superuser(
                email='admin@example.com', password=DEMO_PASSWORD, name='Admin User', phone='+1234567899',
            )
        self.stdout.write('Inserted users')

        owner = users[User.Role.OWNER]
        cars = []
        for fields in DEMO_CARS:
            fields = dict(fields)
            features = fields.pop('features')
            color = fields.pop('color')
            car = Car(owner=owner, status=Car.Status.APPROVED, **fields)
            car.image.save(f"{car.brand.lower()}-{car.model.lower()}.png", placeholder_image(color), save=False)
            car.save()
            CarFeature.objects.bulk_create(
                CarFeature(car=car, name=name, position=position) for position, name in enumerate(features)
            )
            cars.append(car)
        self.stdout.write('Inserted cars')

        start = datetime(2025, 8, 15, tzinfo=timezone.utc)
        end = datetime(2025, 8, 18, tzinfo=timezone.utc)
        services = ['gps', 'insurance']
        car = cars[0]
        Booking.objects.create(
            user=users[User.Role.CUSTOMER], car=car, owner=owner,
            start_date=start, end_date=end,
            total_amount=pricing.quote(car.price, start, end, services).total_amount,
            status=Booking.Status.CONFIRMED,
            pickup_location='Downtown Office', dropoff_location='Airport',
            additional_services=services, payment_method=Booking.PaymentMethod.CREDIT_CARD,
        )
        Car.objects.filter(pk=car.pk).update(available=False)
        self.stdout.write('Inserted bookings')

        Testimonial.objects.create(
            user=users[User.Role.CUSTOMER], name='Emily Davis', location='New York, NY',
            rating=5, comment='Excellent service!',
            avatar='https://images.pexels.com/photos/774909/pexels-photo-774909.jpeg?w=150',
        )
        self.stdout.write('Inserted testimonials')

        logger.info('Demo data loaded')
        self.stdout.write(self.style.SUCCESS('Database seeded successfully!'))
