import json
from datetime import date
from decimal import Decimal
from xml.etree import ElementTree

import pytest

from apps.bookings.codec import decode, encode
from apps.bookings.models import Booking
from apps.bookings.negotiation import BookingFormat
from apps.bookings.serializers import BookingIdSerializer, BookingSerializer, CreatedBookingSerializer
from apps.core.exceptions import EncodingFailed

XML_BOOKING = b"""<booking>
    <firstname>Jim</firstname>
    <lastname>Brown</lastname>
    <totalprice>111</totalprice>
    <depositpaid>true</depositpaid>
    <bookingdates>
      <checkin>2018-01-01</checkin>
      <checkout>2019-01-01</checkout>
    </bookingdates>
    <additionalneeds>Breakfast</additionalneeds>
  </booking>"""


@pytest.fixture
def booking():
    return Booking(
        id=7,
        firstname='Sally',
        lastname='Brown',
        totalprice=Decimal('111.00'),
        depositpaid=True,
        checkin=date(2013, 2, 23),
        checkout=date(2014, 10, 23),
        additionalneeds='Breakfast',
    )


@pytest.fixture
def representation(booking):
    return BookingSerializer(booking).data


@pytest.mark.parametrize('accept, expected', [
    (None, BookingFormat.JSON),
    ('', BookingFormat.JSON),
    ('*/*', BookingFormat.JSON),
    ('application/json', BookingFormat.JSON),
    ('text/html', BookingFormat.JSON),
    ('application/xml', BookingFormat.XML),
    ('text/xml', BookingFormat.XML),
    ('text/html,application/xhtml+xml', BookingFormat.XML),
])
def test_output_format_from_accept(accept, expected):
    assert BookingFormat.from_accept(accept) is expected


@pytest.mark.parametrize('content_type, expected', [
    (None, BookingFormat.JSON),
    ('application/json', BookingFormat.JSON),
    ('application/xml', BookingFormat.JSON),
    ('text/xml', BookingFormat.XML),
    ('text/xml; charset=utf-8', BookingFormat.XML),
])
def test_input_format_from_content_type(content_type, expected):
    assert BookingFormat.from_content_type(content_type) is expected


def test_json_booking_shape(representation):
    body = json.loads(encode(representation, BookingFormat.JSON))

    assert body == {
        'firstname': 'Sally',
        'lastname': 'Brown',
        'totalprice': 111,
        'depositpaid': True,
        'bookingdates': {'checkin': '2013-02-23', 'checkout': '2014-10-23'},
        'additionalneeds': 'Breakfast',
    }


def test_fractional_price_renders_as_decimal_number(booking):
    booking.totalprice = Decimal('99.50')

    body = json.loads(encode(BookingSerializer(booking).data, BookingFormat.JSON))

    assert body['totalprice'] == 99.5


def test_missing_additionalneeds_is_omitted(booking):
    booking.additionalneeds = None

    body = json.loads(encode(BookingSerializer(booking).data, BookingFormat.JSON))

    assert 'additionalneeds' not in body


def test_xml_booking_shape(representation):
    payload = encode(representation, BookingFormat.XML)
    root = ElementTree.fromstring(payload)

    assert payload.startswith(b"<?xml version='1.0' encoding='utf-8'?>")
    assert root.tag == 'booking'
    assert [child.tag for child in root] == [
        'firstname', 'lastname', 'totalprice', 'depositpaid', 'bookingdates', 'additionalneeds'
    ]
    assert root.findtext('totalprice') == '111'
    assert root.findtext('depositpaid') == 'true'
    assert root.findtext('bookingdates/checkin') == '2013-02-23'
    assert root.findtext('bookingdates/checkout') == '2014-10-23'


def test_created_booking_encodings(booking):
    data = CreatedBookingSerializer(booking).data

    body = json.loads(encode(data, BookingFormat.JSON))
    assert body['bookingid'] == 7
    assert body['booking']['firstname'] == 'Sally'

    root = ElementTree.fromstring(encode(data, BookingFormat.XML, root_tag='created-booking'))
    assert root.tag == 'created-booking'
    assert root.findtext('bookingid') == '7'
    assert root.findtext('booking/lastname') == 'Brown'


def test_booking_id_listing():
    data = BookingIdSerializer([{'bookingid': 1}, {'bookingid': 4}], many=True).data

    assert json.loads(encode(data, BookingFormat.JSON)) == [{'bookingid': 1}, {'bookingid': 4}]

    root = ElementTree.fromstring(encode(data, BookingFormat.XML, root_tag='bookings'))
    assert root.tag == 'bookings'
    assert [item.findtext('bookingid') for item in root.findall('booking')] == ['1', '4']


def test_empty_listing_is_well_formed():
    data = BookingIdSerializer([], many=True).data

    assert json.loads(encode(data, BookingFormat.JSON)) == []
    assert len(ElementTree.fromstring(encode(data, BookingFormat.XML, root_tag='bookings'))) == 0


@pytest.mark.parametrize('booking_format', [BookingFormat.JSON, BookingFormat.XML])
def test_round_trip_is_stable(representation, booking_format):
    encoded = encode(representation, booking_format)

    assert encode(decode(encoded, booking_format), booking_format) == encoded


def test_xml_decode_unwraps_envelope_and_types_fields():
    data = decode(XML_BOOKING, BookingFormat.XML)

    assert data == {
        'firstname': 'Jim',
        'lastname': 'Brown',
        'totalprice': 111,
        'depositpaid': True,
        'bookingdates': {'checkin': '2018-01-01', 'checkout': '2019-01-01'},
        'additionalneeds': 'Breakfast',
    }


def test_xml_decode_keeps_untyped_text_for_validation():
    data = decode(
        b'<booking><totalprice>lots</totalprice><depositpaid>yes</depositpaid></booking>',
        BookingFormat.XML
    )

    assert data == {'totalprice': 'lots', 'depositpaid': 'yes'}


@pytest.mark.parametrize('booking_format', [BookingFormat.JSON, BookingFormat.XML])
def test_empty_body_decodes_to_empty_payload(booking_format):
    assert decode(b'', booking_format) == {}
    assert decode(b'  \n', booking_format) == {}


@pytest.mark.parametrize('payload, booking_format', [
    (b'{"firstname": ', BookingFormat.JSON),
    (b'\xff\xfe', BookingFormat.JSON),
    (b'<booking><firstname>Jim</booking>', BookingFormat.XML),
    (b'<created-booking><bookingid>1</bookingid></created-booking>', BookingFormat.XML),
    (b'{"firstname": "Jim"}', BookingFormat.XML),
    (b'<booking><firstname>Jim</firstname><firstname>Sally</firstname></booking>', BookingFormat.XML),
    (b'<booking><bookingdates><checkin>2018-01-01</checkin><checkin>2018-02-01</checkin></bookingdates></booking>', BookingFormat.XML),
])
def test_malformed_payloads_fail_to_decode(payload, booking_format):
    with pytest.raises(EncodingFailed):
        decode(payload, booking_format)


def test_xml_cannot_carry_control_characters(booking):
    booking.additionalneeds = 'Late\x01checkout'
    data = BookingSerializer(booking).data

    assert json.loads(encode(data, BookingFormat.JSON))['additionalneeds'] == 'Late\x01checkout'
    with pytest.raises(EncodingFailed):
        encode(data, BookingFormat.XML)


def test_json_cannot_carry_non_finite_numbers():
    with pytest.raises(EncodingFailed):
        encode({'totalprice': float('nan')}, BookingFormat.JSON)
