import math
from collections import namedtuple
from decimal import Decimal

# Daily unit price of each optional service.
SERVICE_PRICES = {
    'gps': Decimal('10'),
    'insurance': Decimal('25'),
    'child-seat': Decimal('15'),
    'driver': Decimal('20'),
    'wifi': Decimal('8'),
}

SECONDS_PER_DAY = 24 * 60 * 60

Quote = namedtuple('Quote', ['days', 'base_price', 'service_fee', 'total_amount'])


def rental_days(start_date, end_date):
    """Whole days between the two datetimes, any started day counting as one.

    A zero or negative span is returned as is.
    """
    return math.ceil((end_date - start_date).total_seconds() / SECONDS_PER_DAY)


def daily_service_price(services):
    return sum((SERVICE_PRICES.get(code, Decimal('0')) for code in services), Decimal('0'))


def quote(price_per_day, start_date, end_date, services=()):
    days = rental_days(start_date, end_date)
    base_price = Decimal(price_per_day) * days
    service_fee = daily_service_price(services) * days
    return Quote(days, base_price, service_fee, base_price + service_fee)
