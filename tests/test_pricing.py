from datetime import datetime, timedelta, timezone
from decimal import Decimal

from bookings import pricing

START = datetime(2025, 6, 1, 10, 0, tzinfo=timezone.utc)


def test_three_days_with_gps_and_insurance():
    quote = pricing.quote(Decimal('45.00'), START, START + timedelta(days=3), ['gps', 'insurance'])

    assert quote.days == 3
    assert quote.base_price == Decimal('135')
    assert quote.service_fee == Decimal('105')
    assert quote.total_amount == Decimal('240')


def test_started_day_counts_as_a_full_day():
    assert pricing.rental_days(START, START + timedelta(days=1, hours=2)) == 2
    assert pricing.rental_days(START, START + timedelta(minutes=1)) == 1


def test_unknown_service_codes_cost_nothing():
    assert pricing.daily_service_price(['gps', 'jetpack']) == Decimal('10')


def test_all_services_daily_price():
    assert pricing.daily_service_price(pricing.SERVICE_PRICES) == Decimal('78')


def test_no_services():
    quote = pricing.quote('30', START, START + timedelta(days=2))

    assert quote.service_fee == Decimal('0')
    assert quote.total_amount == Decimal('60')


def test_empty_span_is_not_rejected():
    quote = pricing.quote(Decimal('45'), START, START, ['gps'])

    assert quote.days == 0
    assert quote.total_amount == Decimal('0')
