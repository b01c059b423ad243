"""
Random bootstrap bookings for seeding
"""
import random
from datetime import date, timedelta

from apps.bookings.validators import scrub_and_validate

FIRST_NAMES = ['Sally', 'Jim', 'Mary', 'Mark', 'Susan', 'Jim', 'Eric', 'John']
LAST_NAMES = ['Brown', 'Jones', 'Wilson', 'Jackson', 'Smith', 'Ericsson']
ADDITIONAL_NEEDS = ['Breakfast', 'Late checkout', 'Extra pillows', None]


def create_booking_payload(rng=None, today=None) -> dict:
    """
    Build a random booking payload in wire shape

    Args:
        rng: random.Random to draw from (module random by default)
        today: Reference date for the stay window

    Returns:
        Payload accepted by scrub_and_validate
    """
    rng = rng or random
    today = today or date.today()

    checkin = today - timedelta(days=rng.randint(0, 3 * 365))
    checkout = checkin + timedelta(days=rng.randint(1, 30))

    payload = {
        'firstname': rng.choice(FIRST_NAMES),
        'lastname': rng.choice(LAST_NAMES),
        'totalprice': rng.randint(100, 1000),
        'depositpaid': rng.choice([True, False]),
        'bookingdates': {
            'checkin': checkin.isoformat(),
            'checkout': checkout.isoformat(),
        },
    }

    needs = rng.choice(ADDITIONAL_NEEDS)
    if needs is not None:
        payload['additionalneeds'] = needs

    return payload


def seed_bookings(store, count: int = 10, rng=None) -> list:
    """
    Insert count random bookings through the store

    Returns:
        Ids of the created bookings
    """
    created = []
    for _ in range(count):
        data, error = scrub_and_validate(create_booking_payload(rng=rng))
        if error:
            raise ValueError(f"Generated booking failed validation: {error}")
        created.append(store.create(data).id)
    return created
