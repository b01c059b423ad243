"""
Booking filters
"""
import logging
from datetime import date
from typing import Optional

import django_filters
from django.utils.dateparse import parse_date

from .models import Booking

logger = logging.getLogger(__name__)


def parse_query_date(value: str) -> Optional[date]:
    """
    Parse a CCYY-MM-DD query value, None if it is not a valid date
    """
    try:
        return parse_date(value.strip())
    except ValueError:
        return None


class BookingFilter(django_filters.FilterSet):
    """
    Query-string filter for the booking id listing.

    Names match exactly. checkin keeps bookings checking in on or after the
    given date, checkout keeps bookings checking out on or before it. An
    unparseable date leaves its predicate out.
    """
    firstname = django_filters.CharFilter(field_name='firstname', lookup_expr='exact')
    lastname = django_filters.CharFilter(field_name='lastname', lookup_expr='exact')
    checkin = django_filters.CharFilter(method='filter_checkin')
    checkout = django_filters.CharFilter(method='filter_checkout')

    class Meta:
        model = Booking
        fields = ['firstname', 'lastname', 'checkin', 'checkout']

    def filter_checkin(self, queryset, name, value):
        checkin = parse_query_date(value)
        if checkin is None:
            logger.warning(f"Ignoring malformed checkin filter {value!r}")
            return queryset
        return queryset.filter(checkin__gte=checkin)

    def filter_checkout(self, queryset, name, value):
        checkout = parse_query_date(value)
        if checkout is None:
            logger.warning(f"Ignoring malformed checkout filter {value!r}")
            return queryset
        return queryset.filter(checkout__lte=checkout)


def build_booking_filter(query_params=None) -> BookingFilter:
    """
    Build the filter for the given query parameters

    Nothing is evaluated here; the store applies the filter to its queryset.
    """
    return BookingFilter(data=query_params or {}, queryset=Booking.objects.none())
