"""Drive a full collector run over a sequence of files.

The host build owns file discovery and writing; these helpers only feed
already-loaded files through one collector and hand back the result.
"""

from typing import Any, Iterable, Mapping, Tuple, Union

from svg_less.config.schema import CollectorOptions
from svg_less.core.collector import MixinCollector
from svg_less.core.logging import log_operation
from svg_less.models import OutputArtifact, SourceFile


def collect_mixins(
    sources: Iterable[SourceFile],
    options: Union[CollectorOptions, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> OutputArtifact:
    """Convert every source into one Less stylesheet.

    Args:
        sources: Files in the order their blocks should appear
        options: Collector options or a mapping of option names
        **overrides: Individual options, e.g. ``addSize=True``

    Returns:
        The stylesheet artifact

    Raises:
        SvgLessError: On the first failing source; nothing is produced
    """
    collector = MixinCollector(options, **overrides)
    with log_operation("Collecting svg mixins", output=collector.options.output_path):
        for source in sources:
            collector.ingest(source)
        return collector.finish()


def collect_from_pairs(
    pairs: Iterable[Tuple[str, Any]],
    options: Union[CollectorOptions, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> OutputArtifact:
    """``collect_mixins`` for plain ``(path, contents)`` pairs."""
    return collect_mixins(
        (SourceFile(path, contents) for path, contents in pairs), options, **overrides
    )
