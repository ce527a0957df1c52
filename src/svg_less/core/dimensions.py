"""Width and height extraction from svg sources."""

import re
import xml.etree.ElementTree as ET
from typing import Optional

from svg_less.errors import MalformedSourceError
from svg_less.models import Dimensions

# Strings a JavaScript Number() conversion accepts, i.e. isNaN() is false
NUMERIC_RE = re.compile(
    r"""
    [+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
    | [+-]?Infinity
    | 0[xX][0-9a-fA-F]+
    | 0[oO][0-7]+
    | 0[bB][01]+
    """,
    re.VERBOSE,
)


def is_numeric(value: str) -> bool:
    """True if ``value`` is a bare number without a unit.

    Surrounding whitespace is ignored and whitespace-only strings count as
    numbers (they convert to zero).
    """
    stripped = value.strip()
    return not stripped or NUMERIC_RE.fullmatch(stripped) is not None


def coerce_length(value: Optional[str]) -> Optional[str]:
    """Append ``px`` to unitless lengths.

    Examples:
        >>> coerce_length("24")
        '24px'
        >>> coerce_length("2em")
        '2em'
        >>> coerce_length(None) is None
        True
    """
    if not value:
        return None
    if is_numeric(value):
        return value + "px"
    return value


def _local_name(tag) -> str:
    if not isinstance(tag, str):
        return ""
    return tag.rpartition("}")[2]


def find_svg_element(svg_content: str, path: Optional[str] = None) -> ET.Element:
    """First ``svg`` element in document order.

    Raises:
        MalformedSourceError: If the content is not XML or has no svg element
    """
    try:
        root = ET.fromstring(svg_content)
    except ET.ParseError as exc:
        raise MalformedSourceError(f"Cannot parse svg: {exc}", path) from exc

    for element in root.iter():
        if _local_name(element.tag) == "svg":
            return element
    raise MalformedSourceError("No svg element found", path)


def get_dimensions(svg_content: str, path: Optional[str] = None) -> Dimensions:
    """Read width and height off the first svg element.

    Args:
        svg_content: Contents of the svg file
        path: Source path, only used in error messages

    Returns:
        Dimensions with unitless values suffixed by ``px``; absent or empty
        attributes are ``None``
    """
    element = find_svg_element(svg_content, path)
    return Dimensions(
        width=coerce_length(element.get("width")),
        height=coerce_length(element.get("height")),
    )
