"""
Core transform for svg-less.

Name normalization, data URI encoding, dimension extraction, mixin
templating and the collector that ties them together.
"""

from .collector import MixinCollector
from .dimensions import coerce_length, get_dimensions
from .encoding import build_data_uri, encode_uri_component, normalize_name
from .mixin import build_mixin_block

__all__ = [
    "MixinCollector",
    "build_data_uri",
    "build_mixin_block",
    "coerce_length",
    "encode_uri_component",
    "get_dimensions",
    "normalize_name",
]
