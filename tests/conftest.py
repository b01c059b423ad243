import pytest
from django.conf import settings
from django.core.cache import caches
from rest_framework.test import APIClient

from apps.bookings.services.booking_store import booking_store
from apps.bookings.validators import scrub_and_validate

BASIC_AUTH = 'Basic YWRtaW46cGFzc3dvcmQxMjM='


@pytest.fixture(autouse=True)
def clear_cache():
    for alias in settings.CACHES:
        caches[alias].clear()
    yield
    for alias in settings.CACHES:
        caches[alias].clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def booking_payload():
    return {
        'firstname': 'Jim',
        'lastname': 'Brown',
        'totalprice': 111,
        'depositpaid': True,
        'bookingdates': {
            'checkin': '2018-01-01',
            'checkout': '2019-01-01',
        },
        'additionalneeds': 'Breakfast',
    }


@pytest.fixture
def make_booking(db):
    def _make(firstname='Sally', lastname='Brown', checkin='2014-03-13',
              checkout='2014-05-21', **fields):
        payload = {
            'firstname': firstname,
            'lastname': lastname,
            'totalprice': fields.pop('totalprice', 150),
            'depositpaid': fields.pop('depositpaid', False),
            'bookingdates': {'checkin': checkin, 'checkout': checkout},
            **fields,
        }
        data, error = scrub_and_validate(payload)
        assert error is None, error
        return booking_store.create(data)
    return _make
