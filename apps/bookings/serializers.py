"""
Booking serializers
"""
import math
from decimal import Decimal, InvalidOperation

from rest_framework import serializers

MAX_PRICE = Decimal('100000000')
PRICE_QUANTUM = Decimal('0.01')


class StrictCharField(serializers.CharField):
    """CharField that refuses numbers instead of coercing them"""

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail('invalid')
        return super().to_internal_value(data)


class StrictBooleanField(serializers.BooleanField):
    """BooleanField that only accepts real booleans"""

    def to_internal_value(self, data):
        if not isinstance(data, bool):
            self.fail('invalid')
        return data


class PriceField(serializers.Field):
    """
    Non-negative amount with at most two decimal places.

    Accepts JSON numbers only. Whole amounts are rendered as integers.
    """
    default_error_messages = {
        'invalid': 'A number is required.',
        'min_value': 'Ensure this value is greater than or equal to 0.',
        'max_value': 'Ensure this value is less than 100000000.',
        'max_decimal_places': 'Ensure that there are no more than 2 decimal places.',
    }

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, (int, float, Decimal)):
            self.fail('invalid')
        if isinstance(data, float) and not math.isfinite(data):
            self.fail('invalid')

        try:
            value = Decimal(str(data))
        except InvalidOperation:
            self.fail('invalid')

        if value < 0:
            self.fail('min_value')
        if value >= MAX_PRICE:
            self.fail('max_value')
        if value.as_tuple().exponent < -2:
            self.fail('max_decimal_places')

        return value.quantize(PRICE_QUANTUM)

    def to_representation(self, value):
        if not isinstance(value, Decimal):
            value = Decimal(str(value))
        if value == value.to_integral_value():
            return int(value)
        return float(value)


class BookingDatesSerializer(serializers.Serializer):
    """Stay dates, nested under bookingdates on the wire"""
    checkin = serializers.DateField(input_formats=['%Y-%m-%d'], format='%Y-%m-%d')
    checkout = serializers.DateField(input_formats=['%Y-%m-%d'], format='%Y-%m-%d')


class BookingSerializer(serializers.Serializer):
    """
    Wire shape of a single booking.

    Validates incoming payloads and renders Booking instances. The nested
    bookingdates object maps onto the flat checkin/checkout model fields.
    """
    firstname = StrictCharField(max_length=255)
    lastname = StrictCharField(max_length=255)
    totalprice = PriceField()
    depositpaid = StrictBooleanField()
    bookingdates = BookingDatesSerializer(source='*')
    additionalneeds = StrictCharField(
        max_length=500,
        required=False,
        allow_null=True,
        allow_blank=True
    )

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if data.get('additionalneeds') is None:
            data.pop('additionalneeds', None)
        return data


class CreatedBookingSerializer(serializers.Serializer):
    """Output serializer for a freshly created booking"""
    bookingid = serializers.IntegerField(source='id')
    booking = BookingSerializer(source='*')


class BookingIdSerializer(serializers.Serializer):
    """Output serializer for the booking id listing"""
    bookingid = serializers.IntegerField()
