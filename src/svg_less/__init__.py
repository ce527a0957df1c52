"""
svg-less: collect svg files into a Less stylesheet of data URI mixins.
"""

from .config.schema import CollectorOptions
from .core.collector import MixinCollector
from .errors import (
    CollectorStateError,
    ConfigurationError,
    MalformedSourceError,
    StreamingUnsupportedError,
    SvgLessError,
    UnsupportedInputError,
)
from .models import Dimensions, OutputArtifact, SourceFile
from .pipeline import collect_from_pairs, collect_mixins

__version__ = "1.0.0"

__all__ = [
    "CollectorOptions",
    "CollectorStateError",
    "ConfigurationError",
    "Dimensions",
    "MalformedSourceError",
    "MixinCollector",
    "OutputArtifact",
    "SourceFile",
    "StreamingUnsupportedError",
    "SvgLessError",
    "UnsupportedInputError",
    "collect_from_pairs",
    "collect_mixins",
]
