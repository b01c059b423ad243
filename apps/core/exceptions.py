"""
Custom exceptions and exception handler
"""
import logging

from rest_framework.views import exception_handler
from rest_framework.exceptions import APIException
from rest_framework import status

from apps.core.utils.helpers import status_response

logger = logging.getLogger(__name__)


class BookerAPIException(APIException):
    """
    API exception whose status code can be overridden per raise.

    Some failures map to different codes depending on the endpoint
    (an unknown id is 404 on read but 405 on write).
    """

    def __init__(self, detail=None, code=None, status_code=None):
        super().__init__(detail, code)
        if status_code is not None:
            self.status_code = status_code


class BookingNotFound(BookerAPIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Booking not found.'
    default_code = 'booking_not_found'


class InvalidBooking(BookerAPIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid booking payload.'
    default_code = 'invalid_booking'


class EncodingFailed(BookerAPIException):
    status_code = status.HTTP_418_IM_A_TEAPOT
    default_detail = 'Booking cannot be represented in the requested format.'
    default_code = 'encoding_failed'


class StoreFailure(BookerAPIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Booking store unavailable.'
    default_code = 'store_failure'


def custom_exception_handler(exc, context):
    """
    Report handled API errors by status code only.

    The detail is logged; the response body is the reason phrase so that
    no internal detail reaches the client.
    """
    response = exception_handler(exc, context)

    if response is None:
        return None

    view = context.get('view')
    view_name = view.__class__.__name__ if view is not None else 'unknown view'
    detail = getattr(exc, 'detail', str(exc))

    if response.status_code >= 500:
        logger.error(f"{view_name} failed with {response.status_code}: {detail}")
    else:
        logger.warning(f"{view_name} rejected request with {response.status_code}: {detail}")

    plain = status_response(response.status_code)

    # Keep protocol headers such as Allow on 405
    for header in ('Allow', 'WWW-Authenticate', 'Retry-After'):
        if header in response:
            plain[header] = response[header]

    return plain
