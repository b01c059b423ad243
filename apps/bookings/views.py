"""
Booking views
"""
from django.http import HttpResponse
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse, OpenApiExample
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.renderers import JSONRenderer
from rest_framework.views import APIView

from apps.authentication.permissions import HasLiveToken
from apps.core.exceptions import BookingNotFound, InvalidBooking
from apps.core.utils.helpers import status_response
from .codec import decode, encode
from .negotiation import BookingContentNegotiation, BookingFormat
from .filters import build_booking_filter
from .renderers import BookingXMLRenderer
from .serializers import BookingSerializer, BookingIdSerializer, CreatedBookingSerializer
from .services.booking_store import booking_store
from .validators import scrub_and_validate

BOOKING_EXAMPLE = {
    'firstname': 'Jim',
    'lastname': 'Brown',
    'totalprice': 111,
    'depositpaid': True,
    'bookingdates': {
        'checkin': '2018-01-01',
        'checkout': '2019-01-01'
    },
    'additionalneeds': 'Breakfast'
}

ACCEPT_HEADER = OpenApiParameter(
    'Accept', str, OpenApiParameter.HEADER,
    description='Response format, application/json (default) or application/xml'
)
CONTENT_TYPE_HEADER = OpenApiParameter(
    'Content-Type', str, OpenApiParameter.HEADER,
    description='Payload format, application/json (default) or text/xml'
)


class BookingAPIView(APIView):
    """
    Base view for booking endpoints.

    The response format is negotiated before the handler runs; the request
    format follows the Content-Type header. Bodies go through the codec
    rather than request.data so that both formats share one error path.
    """
    authentication_classes = []
    renderer_classes = [JSONRenderer, BookingXMLRenderer]
    content_negotiation_class = BookingContentNegotiation

    def response_format(self, request) -> BookingFormat:
        return BookingFormat(request.accepted_renderer.format)

    def request_format(self, request) -> BookingFormat:
        return BookingFormat.from_content_type(request.content_type)

    def read_payload(self, request):
        return decode(request.body, self.request_format(request))

    def booking_response(self, request, data, root_tag='booking', item_tag='booking'):
        booking_format = self.response_format(request)
        content = encode(data, booking_format, root_tag=root_tag, item_tag=item_tag)
        return HttpResponse(
            content,
            status=status.HTTP_200_OK,
            content_type=f'{booking_format.media_type}; charset=utf-8'
        )


class BookingListView(BookingAPIView):
    """
    List booking ids and create bookings
    """
    permission_classes = [AllowAny]

    @extend_schema(
        summary="Get booking ids",
        description=(
            "Ids of all bookings, optionally narrowed by guest name or stay dates. "
            "checkin keeps bookings checking in on or after the date, checkout keeps "
            "bookings checking out on or before it. Dates are CCYY-MM-DD."
        ),
        parameters=[
            OpenApiParameter('firstname', str, description='Exact guest first name'),
            OpenApiParameter('lastname', str, description='Exact guest last name'),
            OpenApiParameter('checkin', str, description='Earliest checkin date'),
            OpenApiParameter('checkout', str, description='Latest checkout date'),
            ACCEPT_HEADER,
        ],
        responses={
            200: BookingIdSerializer(many=True),
            418: OpenApiResponse(description="Cannot represent the listing")
        },
        tags=['Booking']
    )
    def get(self, request):
        booking_filter = build_booking_filter(request.query_params)
        ids = booking_store.get_ids(booking_filter)

        data = BookingIdSerializer([{'bookingid': pk} for pk in ids], many=True).data
        return self.booking_response(request, data, root_tag='bookings')

    @extend_schema(
        summary="Create booking",
        request=BookingSerializer,
        parameters=[CONTENT_TYPE_HEADER, ACCEPT_HEADER],
        examples=[OpenApiExample('Booking', value=BOOKING_EXAMPLE, request_only=True)],
        responses={
            200: CreatedBookingSerializer,
            418: OpenApiResponse(description="Cannot read or represent the booking"),
            500: OpenApiResponse(description="Invalid booking or store failure")
        },
        tags=['Booking']
    )
    def post(self, request):
        payload = self.read_payload(request)

        data, error = scrub_and_validate(payload)
        if error:
            # Create reports invalid payloads as a server error
            raise InvalidBooking(error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

        booking = booking_store.create(data)

        return self.booking_response(
            request,
            CreatedBookingSerializer(booking).data,
            root_tag='created-booking'
        )


class BookingDetailView(BookingAPIView):
    """
    Read, replace and delete a single booking. Writes need HasLiveToken.
    """

    def get_permissions(self):
        if self.request.method in ('PUT', 'DELETE'):
            return [HasLiveToken()]
        return [AllowAny()]

    @extend_schema(
        summary="Get booking",
        parameters=[ACCEPT_HEADER],
        responses={
            200: BookingSerializer,
            404: OpenApiResponse(description="Booking not found"),
            418: OpenApiResponse(description="Cannot represent the booking")
        },
        tags=['Booking']
    )
    def get(self, request, booking_id):
        booking = booking_store.get(booking_id)
        if booking is None:
            raise BookingNotFound()

        return self.booking_response(request, BookingSerializer(booking).data)

    @extend_schema(
        summary="Update booking",
        description="Replace a booking. Requires the token cookie or admin basic authorization.",
        request=BookingSerializer,
        parameters=[CONTENT_TYPE_HEADER, ACCEPT_HEADER],
        examples=[OpenApiExample('Booking', value=BOOKING_EXAMPLE, request_only=True)],
        responses={
            200: BookingSerializer,
            400: OpenApiResponse(description="Invalid booking"),
            403: OpenApiResponse(description="Forbidden"),
            405: OpenApiResponse(description="Booking not found"),
            418: OpenApiResponse(description="Cannot read or represent the booking")
        },
        tags=['Booking']
    )
    def put(self, request, booking_id):
        payload = self.read_payload(request)

        data, error = scrub_and_validate(payload)
        if error:
            raise InvalidBooking(error)

        booking_store.update(booking_id, data)

        booking = booking_store.get(booking_id)
        if booking is None:
            raise BookingNotFound(status_code=status.HTTP_405_METHOD_NOT_ALLOWED)

        return self.booking_response(request, BookingSerializer(booking).data)

    @extend_schema(
        summary="Delete booking",
        description="Requires the token cookie or admin basic authorization.",
        responses={
            201: OpenApiResponse(description="Deleted"),
            403: OpenApiResponse(description="Forbidden"),
            405: OpenApiResponse(description="Booking not found")
        },
        tags=['Booking']
    )
    def delete(self, request, booking_id):
        if not booking_store.delete(booking_id):
            raise BookingNotFound(status_code=status.HTTP_405_METHOD_NOT_ALLOWED)

        return status_response(status.HTTP_201_CREATED)
