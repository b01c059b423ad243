"""
Booking representation codec.

The wire format is resolved once per request (see negotiation) and passed
in as a BookingFormat.
"""
import io
import logging
from typing import Any

from rest_framework.exceptions import ParseError

from apps.core.exceptions import EncodingFailed
from .negotiation import BookingFormat

logger = logging.getLogger(__name__)


def encode(data: Any, booking_format: BookingFormat,
           root_tag: str = 'booking', item_tag: str = 'booking') -> bytes:
    """
    Encode a representation

    Args:
        data: Serializer output
        booking_format: Target format
        root_tag: XML root element name
        item_tag: XML element name for list items

    Returns:
        Encoded payload

    Raises:
        EncodingFailed: if the data cannot be represented
    """
    renderer = booking_format.renderer_class()
    context = {'root_tag': root_tag, 'item_tag': item_tag}

    try:
        return renderer.render(data, booking_format.media_type, context)
    except (TypeError, ValueError) as exc:
        logger.error(f"Cannot encode {root_tag} as {booking_format.value}: {exc}")
        raise EncodingFailed() from exc


def decode(payload: bytes, booking_format: BookingFormat, envelope: str = 'booking') -> Any:
    """
    Decode a request body

    XML documents must be wrapped in the envelope element, which is removed.
    An empty body decodes to an empty payload.

    Raises:
        EncodingFailed: if the payload is malformed
    """
    if not payload or not payload.strip():
        return {}

    parser = booking_format.parser_class()
    context = {'envelope': envelope}

    try:
        return parser.parse(io.BytesIO(payload), booking_format.parser_class.media_type, context)
    except ParseError as exc:
        logger.warning(f"Cannot decode {booking_format.value} payload: {exc.detail}")
        raise EncodingFailed() from exc
