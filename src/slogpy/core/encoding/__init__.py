"""Encoders rendering attribute lists as text."""

from slogpy.core.encoding.jsonline import encode_json
from slogpy.core.encoding.logfmt import encode_logfmt
from slogpy.core.encoding.terminal import render_terminal

__all__ = [
    "encode_json",
    "encode_logfmt",
    "render_terminal",
]
