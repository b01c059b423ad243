"""
Bookings signals
"""
import logging

from django.conf import settings
from django.db.models.signals import post_migrate
from django.dispatch import receiver

logger = logging.getLogger(__name__)

SEED_COUNT = 10


@receiver(post_migrate)
def seed_bootstrap_bookings(sender, **kwargs):
    """
    Seed bootstrap bookings after migrate when SEED is enabled and the
    store is empty.
    """
    if getattr(sender, 'name', None) != 'apps.bookings' or not settings.SEED:
        return

    from apps.bookings.services.booking_creator import seed_bookings
    from apps.bookings.services.booking_store import booking_store

    if booking_store.count():
        logger.info("Bookings already present, skipping seed")
        return

    ids = seed_bookings(booking_store, count=SEED_COUNT)
    logger.info(f"Seeded {len(ids)} bootstrap bookings")
