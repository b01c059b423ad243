"""
Wire format selection for booking endpoints
"""
from enum import Enum
from typing import Optional

from rest_framework.negotiation import DefaultContentNegotiation
from rest_framework.parsers import JSONParser
from rest_framework.renderers import JSONRenderer

from .renderers import BookingXMLRenderer, BookingXMLParser


class BookingFormat(Enum):
    JSON = 'json'
    XML = 'xml'

    @property
    def renderer_class(self):
        return BookingXMLRenderer if self is BookingFormat.XML else JSONRenderer

    @property
    def parser_class(self):
        return BookingXMLParser if self is BookingFormat.XML else JSONParser

    @property
    def media_type(self) -> str:
        return self.renderer_class.media_type

    @classmethod
    def from_accept(cls, accept: Optional[str]) -> 'BookingFormat':
        """Any Accept header mentioning xml selects XML output"""
        if accept and 'xml' in accept.lower():
            return cls.XML
        return cls.JSON

    @classmethod
    def from_content_type(cls, content_type: Optional[str]) -> 'BookingFormat':
        """Only text/xml bodies are read as XML"""
        media_type = (content_type or '').split(';')[0].strip().lower()
        if media_type == 'text/xml':
            return cls.XML
        return cls.JSON


class BookingContentNegotiation(DefaultContentNegotiation):
    """
    Picks the renderer from the Accept header without ever refusing a request.

    Unrecognised Accept values fall back to the view's first renderer.
    """

    def select_renderer(self, request, renderers, format_suffix=None):
        booking_format = BookingFormat.from_accept(request.META.get('HTTP_ACCEPT'))
        for renderer in renderers:
            if renderer.format == booking_format.value:
                return renderer, renderer.media_type
        return renderers[0], renderers[0].media_type
