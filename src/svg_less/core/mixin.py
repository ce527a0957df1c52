"""Less mixin templating."""

from svg_less.config.schema import CollectorOptions

INDENT = "    "
DATA_URI_PREFIX = "data:image/svg+xml;charset=utf8, "


def build_selector(normalized_name: str, options: CollectorOptions) -> str:
    """Selector for one image, ``()`` makes it a callable mixin."""
    suffix = "" if options.output_mixin else "()"
    return f".{options.mixin_prefix}{normalized_name}{suffix}"


def build_mixin_block(
    normalized_name: str,
    encoded_svg: str,
    width: str,
    height: str,
    options: CollectorOptions,
) -> str:
    """Less rule embedding one svg as a data URI.

    Args:
        normalized_name: Selector suffix for the svg file
        encoded_svg: Output of ``build_data_uri``
        width: Width declaration value, used only with ``add_size``
        height: Height declaration value, used only with ``add_size``
        options: Collector options

    Returns:
        Block text, lines joined by ``\\n`` with no trailing newline
    """
    lines = [
        f"{build_selector(normalized_name, options)} {{",
        f'{INDENT}background-image: url("{DATA_URI_PREFIX}{encoded_svg}");',
    ]
    if options.add_size:
        lines.append(f"{INDENT}width: {width};")
        lines.append(f"{INDENT}height: {height};")
    lines.append("}")
    return "\n".join(lines)
