"""Name normalization and data URI encoding.

XML declarations are matched at line starts only, where ``^`` follows any
line terminator (LF, CR, U+2028, U+2029) and ``.`` never crosses one.
Comment stripping is greedy over the whole text: everything from the first
``<!--`` to the last ``-->`` goes, including markup between two comments.
"""

import re
from pathlib import PureWindowsPath
from urllib.parse import quote

# Any character except a line terminator
_LINE_CHAR = r"[^\n\r\u2028\u2029]"

XML_DECLARATION_RE = re.compile(
    rf"(?:^|(?<=[\r\u2028\u2029]))<\?xml{_LINE_CHAR}*?>",
    re.IGNORECASE | re.MULTILINE,
)
COMMENT_RE = re.compile(r"<!--(.*(?=-->))-->", re.IGNORECASE | re.DOTALL)
LINE_BREAK_RE = re.compile(r"[\r\n]")
TRAILING_NEWLINE_RE = re.compile(r"(\r\n|\n|\r)\Z")

# Characters encodeURIComponent leaves alone besides letters, digits and "-_.~"
URI_COMPONENT_SAFE = "!*'()"


def normalize_name(path: str) -> str:
    """Selector suffix for a source path.

    Examples:
        >>> normalize_name("icons/My.Icon.SVG")
        'my-icon'
        >>> normalize_name("arrow-left.svg")
        'arrow-left'
    """
    # PureWindowsPath splits on both "/" and "\"
    return PureWindowsPath(path).stem.lower().replace(".", "-")


def encode_uri_component(value: str) -> str:
    """Percent-encode ``value`` the way ``encodeURIComponent`` does."""
    return quote(value, safe=URI_COMPONENT_SAFE, encoding="utf-8")


def strip_markup_noise(svg_content: str) -> str:
    """Drop XML declarations, comments, line breaks and tabs."""
    content = XML_DECLARATION_RE.sub("", svg_content)
    content = COMMENT_RE.sub("", content)
    content = LINE_BREAK_RE.sub("", content)
    content = TRAILING_NEWLINE_RE.sub("", content, count=1)
    return content.replace("\t", " ")


def build_data_uri(svg_content: str) -> str:
    """Encoded svg content ready to embed after ``data:image/svg+xml``.

    Args:
        svg_content: Contents of the svg file

    Returns:
        Percent-encoded content with ``/`` left unencoded
    """
    return encode_uri_component(strip_markup_noise(svg_content)).replace("%2F", "/")
