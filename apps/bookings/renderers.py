"""
XML renderer and parser for the booking dialect
"""
import re
from datetime import date
from decimal import Decimal, InvalidOperation
from xml.etree import ElementTree

from rest_framework.exceptions import ParseError
from rest_framework.parsers import BaseParser
from rest_framework.renderers import BaseRenderer

# Characters that XML 1.0 cannot carry
ILLEGAL_XML_CHARS = re.compile('[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]')


def _parse_number(text):
    try:
        value = Decimal(text)
    except InvalidOperation:
        return text
    if not value.is_finite():
        return text
    if value == value.to_integral_value() and '.' not in text and 'e' not in text.lower():
        return int(value)
    return float(value)


def _parse_bool(text):
    return {'true': True, 'false': False}.get(text, text)


class BookingXMLRenderer(BaseRenderer):
    """
    Renders mappings as nested elements and lists as repeated item elements.

    The root and item tag names come from the renderer context.
    """
    media_type = 'application/xml'
    format = 'xml'
    charset = 'utf-8'
    root_tag_name = 'booking'
    item_tag_name = 'booking'

    def render(self, data, accepted_media_type=None, renderer_context=None):
        if data is None:
            return b''

        renderer_context = renderer_context or {}
        root = ElementTree.Element(renderer_context.get('root_tag', self.root_tag_name))
        self._build(root, data, renderer_context.get('item_tag', self.item_tag_name))

        return ElementTree.tostring(root, encoding='utf-8', xml_declaration=True)

    def _build(self, element, data, item_tag):
        if isinstance(data, dict):
            for key, value in data.items():
                if value is None:
                    continue
                self._build(ElementTree.SubElement(element, key), value, item_tag)
        elif isinstance(data, (list, tuple)):
            for item in data:
                self._build(ElementTree.SubElement(element, item_tag), item, item_tag)
        else:
            element.text = self._text(data)

    def _text(self, value):
        if isinstance(value, bool):
            return 'true' if value else 'false'
        if isinstance(value, date):
            return value.isoformat()
        if isinstance(value, (str, int, float, Decimal)):
            text = str(value)
            if ILLEGAL_XML_CHARS.search(text):
                raise ValueError("Value contains characters not allowed in XML")
            return text
        raise TypeError(f"Cannot render {type(value).__name__} as XML")


class BookingXMLParser(BaseParser):
    """
    Parses a booking document and unwraps its envelope element.

    Leaf values stay strings except the typed fields, which are converted
    when their text parses.
    """
    media_type = 'text/xml'
    envelope = 'booking'
    typed_fields = {
        'totalprice': _parse_number,
        'depositpaid': _parse_bool,
        'bookingid': _parse_number,
    }

    def parse(self, stream, media_type=None, parser_context=None):
        parser_context = parser_context or {}
        envelope = parser_context.get('envelope', self.envelope)

        try:
            root = ElementTree.parse(stream).getroot()
        except ElementTree.ParseError as exc:
            raise ParseError(f'XML parse error - {exc}')

        if root.tag != envelope:
            raise ParseError(f'Expected <{envelope}> document, got <{root.tag}>')

        return self._to_data(root)

    def _to_data(self, element):
        if len(element):
            data = {}
            for child in element:
                if child.tag in data:
                    raise ParseError(f"Repeated <{child.tag}> element in <{element.tag}>")
                data[child.tag] = self._to_data(child)
            return data

        text = (element.text or '').strip()
        convert = self.typed_fields.get(element.tag)
        return convert(text) if convert else text
