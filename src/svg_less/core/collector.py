"""Mixin collector.

Turns a sequence of svg files into a single Less stylesheet. Each call to
``ingest`` renders one block and keeps it; ``finish`` joins the blocks in
arrival order into the output file. One collector instance serves exactly
one run.
"""

from typing import Any, List, Mapping, Optional, Tuple, Union

from svg_less.config.schema import CollectorOptions
from svg_less.core.dimensions import get_dimensions
from svg_less.core.encoding import build_data_uri, normalize_name
from svg_less.core.logging import get_logger
from svg_less.core.mixin import build_mixin_block
from svg_less.errors import (
    CollectorStateError,
    MalformedSourceError,
    StreamingUnsupportedError,
)
from svg_less.models import OutputArtifact, SourceFile

logger = get_logger(__name__)


class MixinCollector:
    """Collect one Less mixin per svg file.

    Example:
        >>> collector = MixinCollector(addSize=True)
        >>> collector.ingest(SourceFile("a.svg", '<svg width="10" height="10"/>'))
        >>> collector.finish().path
        'icons.less'
    """

    def __init__(
        self,
        options: Union[CollectorOptions, Mapping[str, Any], None] = None,
        **overrides: Any,
    ):
        if isinstance(options, CollectorOptions):
            if overrides:
                options = options.model_copy(
                    update=CollectorOptions.from_mapping(overrides).model_dump(
                        exclude_unset=True
                    )
                )
        else:
            options = CollectorOptions.from_mapping(options, **overrides)

        self.options = options
        self._blocks: List[str] = []
        self._finished = False

    @property
    def blocks(self) -> Tuple[str, ...]:
        """Blocks collected so far, in arrival order."""
        return tuple(self._blocks)

    @property
    def finished(self) -> bool:
        return self._finished

    def ingest(self, source: SourceFile) -> Optional[SourceFile]:
        """Render and keep the mixin block for one svg file.

        Args:
            source: File to convert

        Returns:
            ``source`` itself when it has no content (passed through
            untouched), otherwise ``None``

        Raises:
            StreamingUnsupportedError: If contents are streamed
            MalformedSourceError: If the svg cannot be parsed and
                ``skip_malformed`` is off
            CollectorStateError: If the collector already finished
        """
        if self._finished:
            raise CollectorStateError(
                f"Cannot ingest {source.path} after {self.options.output_path} was written"
            )

        if source.is_null():
            logger.debug("Passing through empty file {}", source.path)
            return source

        if source.is_stream():
            raise StreamingUnsupportedError(source.path)

        svg_content = source.text()
        normalized_name = normalize_name(source.path)
        encoded_svg = build_data_uri(svg_content)

        try:
            dimensions = get_dimensions(svg_content, source.path)
        except MalformedSourceError as exc:
            if not self.options.skip_malformed:
                raise
            logger.warning("Skipping {}: {}", source.path, exc.message)
            return None

        self._blocks.append(
            build_mixin_block(
                normalized_name,
                encoded_svg,
                dimensions.width or self.options.default_width,
                dimensions.height or self.options.default_height,
                self.options,
            )
        )
        logger.debug(
            "Collected {}{} from {}",
            self.options.mixin_prefix,
            normalized_name,
            source.path,
        )
        return None

    def finish(self) -> OutputArtifact:
        """Join the collected blocks into the output stylesheet.

        An empty run yields an artifact with empty contents.

        Raises:
            CollectorStateError: If called more than once
        """
        if self._finished:
            raise CollectorStateError(
                f"{self.options.output_path} was already written"
            )
        self._finished = True

        artifact = OutputArtifact(
            path=self.options.output_path, contents="\n".join(self._blocks)
        )
        logger.info("Wrote {} mixins to {}", len(self._blocks), artifact.path)
        return artifact
