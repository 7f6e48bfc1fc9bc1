import importlib
from io import StringIO

import pytest
from django.core.management import call_command
from django.urls import resolve
from rest_framework.settings import api_settings

from api.authentication import BearerTokenAuthentication


@pytest.mark.parametrize('module', [
    'api.exceptions',
    'api.authentication',
    'users.admin',
    'cars.admin',
    'bookings.admin',
    'car_rental.urls',
])
def test_modules_import(module):
    importlib.import_module(module)


def test_authentication_classes_resolve():
    assert api_settings.DEFAULT_AUTHENTICATION_CLASSES == [BearerTokenAuthentication]


def test_system_checks_pass():
    out = StringIO()
    call_command('check', stdout=out)

    assert 'no issues' in out.getvalue()


def test_api_routes_resolve():
    assert resolve('/api/cars/').url_name == 'cars'
    assert resolve('/api/bookings/7/approve/').kwargs == {'booking_id': 7}
