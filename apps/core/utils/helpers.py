"""
Helper utilities
"""
from http import HTTPStatus

from django.http import HttpResponse


def status_response(status_code: int) -> HttpResponse:
    """
    Build a response that carries only a status code and its reason phrase
    """
    return HttpResponse(
        HTTPStatus(status_code).phrase,
        status=status_code,
        content_type='text/plain; charset=utf-8',
    )
