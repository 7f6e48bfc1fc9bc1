import io

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient

from cars.models import Car
from users.models import User

PASSWORD = 'secret-pass'


def make_image(name='car.png', color='red'):
    buffer = io.BytesIO()
    Image.new('RGB', (4, 4), color).save(buffer, format='PNG')
    return SimpleUploadedFile(name, buffer.getvalue(), content_type='image/png')


def car_draft(**overrides):
    draft = {
        'brand': 'Toyota',
        'model': 'Yaris',
        'year': 2020,
        'price': '45.00',
        'category': 'Economy',
        'transmission': 'Manual',
        'fuel': 'Petrol',
        'seats': 5,
        'wilaya': 'Alger',
        'commune': 'Hydra',
        'chauffeur': False,
        'features': ['Air conditioning', 'Bluetooth'],
    }
    draft.update(overrides)
    return draft


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = str(tmp_path / 'uploads')
    return settings.MEDIA_ROOT


@pytest.fixture
def customer(db):
    return User.objects.create_user(
        email='customer@example.com', password=PASSWORD,
        name='Carla Customer', phone='0550000001', role=User.Role.CUSTOMER,
    )


@pytest.fixture
def owner(db):
    return User.objects.create_user(
        email='owner@example.com', password=PASSWORD,
        name='Omar Owner', phone='0550000002', role=User.Role.OWNER,
        status=User.Status.ACTIVE,
    )


@pytest.fixture
def other_owner(db):
    return User.objects.create_user(
        email='other.owner@example.com', password=PASSWORD,
        name='Olga Owner', phone='0550000003', role=User.Role.OWNER,
        status=User.Status.ACTIVE,
    )


@pytest.fixture
def pending_owner(db):
    return User.objects.create_user(
        email='pending.owner@example.com', password=PASSWORD,
        name='Paul Pending', phone='0550000004', role=User.Role.OWNER,
    )


@pytest.fixture
def admin_user(db):
    return User.objects.create_superuser(
        email='admin@example.com', password=PASSWORD,
        name='Ada Admin', phone='0550000005',
    )


@pytest.fixture
def car(owner):
    """An approved, available listing priced at 45 per day."""
    return Car.objects.create(
        owner=owner, brand='Toyota', model='Yaris', year=2020, price='45.00',
        image='car_images/seed.png', category=Car.Category.ECONOMY,
        transmission=Car.Transmission.MANUAL, fuel=Car.Fuel.PETROL, seats=5,
        wilaya='Alger', commune='Hydra', status=Car.Status.APPROVED,
    )


@pytest.fixture
def pending_car(owner):
    return Car.objects.create(
        owner=owner, brand='Renault', model='Clio', year=2019, price='30.00',
        image='car_images/clio.png', category=Car.Category.COMPACT,
        transmission=Car.Transmission.MANUAL, fuel=Car.Fuel.DIESEL, seats=5,
        wilaya='Oran', status=Car.Status.PENDING,
    )


@pytest.fixture
def client_for(db):
    def make_client(user=None):
        client = APIClient()
        if user is not None:
            token, _ = Token.objects.get_or_create(user=user)
            client.credentials(HTTP_AUTHORIZATION=f'Bearer {token.key}')
        return client
    return make_client
