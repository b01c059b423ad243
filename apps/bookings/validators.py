"""
Booking payload validation
"""
from typing import Any, Optional, Tuple

from .serializers import BookingSerializer


def format_validation_errors(errors, prefix: str = '') -> str:
    """
    Flatten serializer errors into a single message
    """
    parts = []
    for field, messages in errors.items():
        name = f"{prefix}{field}"
        if isinstance(messages, dict):
            parts.append(format_validation_errors(messages, prefix=f"{name}."))
        else:
            parts.append(f"{name}: {' '.join(str(message) for message in messages)}")
    return '; '.join(parts)


def scrub_and_validate(payload: Any) -> Tuple[Any, Optional[str]]:
    """
    Validate a decoded booking payload before it is written

    Unknown keys are dropped and totalprice is normalized to a Decimal.

    Args:
        payload: Decoded request body

    Returns:
        (validated data, None) if valid, (payload, error message) otherwise
    """
    serializer = BookingSerializer(data=payload)

    if serializer.is_valid():
        return dict(serializer.validated_data), None

    return payload, format_validation_errors(serializer.errors)
