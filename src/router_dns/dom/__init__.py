# DOM primitives package
from .cascade import FallbackChain, click_first, resolve_first, type_into_first
from .field_writer import read_field_value, write_field_value
from .frames import get_content_frame
from .text_matcher import click_by_text

__all__ = [
    'FallbackChain',
    'resolve_first',
    'click_first',
    'type_into_first',
    'click_by_text',
    'write_field_value',
    'read_field_value',
    'get_content_frame',
]
