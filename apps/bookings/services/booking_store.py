"""
Booking record store backed by the ORM
"""
import logging
from typing import List, Optional

from django.db import DatabaseError, transaction

from apps.core.exceptions import StoreFailure
from apps.bookings.models import Booking

logger = logging.getLogger(__name__)


def _coerce_id(booking_id) -> Optional[int]:
    """Booking ids are positive integers; anything else matches nothing"""
    try:
        value = int(booking_id)
    except (TypeError, ValueError):
        return None
    return value if value > 0 else None


class BookingStore:
    """
    Insert, fetch, list, update and delete bookings by integer id.

    Database errors are surfaced as StoreFailure without retry.
    """

    def create(self, data: dict) -> Booking:
        """
        Insert a validated booking

        Args:
            data: Validated booking fields

        Returns:
            The stored booking with its new id
        """
        try:
            booking = Booking.objects.create(**data)
        except DatabaseError as e:
            logger.error(f"Error creating booking: {str(e)}")
            raise StoreFailure() from e

        logger.info(f"Created booking {booking.id}")
        return booking

    def get(self, booking_id) -> Optional[Booking]:
        """
        Fetch a booking by id, None if it does not exist
        """
        pk = _coerce_id(booking_id)
        if pk is None:
            return None

        try:
            return Booking.objects.filter(pk=pk).first()
        except DatabaseError as e:
            logger.error(f"Error fetching booking {pk}: {str(e)}")
            raise StoreFailure() from e

    def get_ids(self, booking_filter=None) -> List[int]:
        """
        List ids of the bookings matching a filter, in ascending order

        Args:
            booking_filter: BookingFilter built from query parameters,
                None for every booking
        """
        queryset = Booking.objects.order_by('id')

        try:
            if booking_filter is not None:
                # Every declared filter is a CharFilter, so the form is always valid
                booking_filter.is_valid()
                queryset = booking_filter.filter_queryset(queryset)
            return list(queryset.values_list('id', flat=True))
        except DatabaseError as e:
            logger.error(f"Error listing bookings: {str(e)}")
            raise StoreFailure() from e

    def update(self, booking_id, data: dict) -> bool:
        """
        Replace the fields of an existing booking

        Returns:
            True if a booking was updated
        """
        pk = _coerce_id(booking_id)
        if pk is None:
            return False

        try:
            with transaction.atomic():
                booking = Booking.objects.select_for_update().filter(pk=pk).first()
                if booking is None:
                    return False
                for field, value in data.items():
                    setattr(booking, field, value)
                booking.save()
        except DatabaseError as e:
            logger.error(f"Error updating booking {pk}: {str(e)}")
            raise StoreFailure() from e

        logger.info(f"Updated booking {pk}")
        return True

    def delete(self, booking_id) -> bool:
        """
        Delete a booking

        Returns:
            True if a booking was deleted
        """
        pk = _coerce_id(booking_id)
        if pk is None:
            return False

        try:
            deleted, _ = Booking.objects.filter(pk=pk).delete()
        except DatabaseError as e:
            logger.error(f"Error deleting booking {pk}: {str(e)}")
            raise StoreFailure() from e

        if deleted:
            logger.info(f"Deleted booking {pk}")
        return bool(deleted)

    def count(self) -> int:
        return Booking.objects.count()


# Singleton instance
booking_store = BookingStore()
