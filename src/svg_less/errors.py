"""Exception hierarchy for svg-less.

Every failure raised while collecting mixins is an ``SvgLessError`` so a host
build can catch the whole family in one place. Errors are never recovered
per input: the first one aborts the run.
"""

PLUGIN_NAME = "svg-less"


class SvgLessError(Exception):
    """Base exception for all svg-less errors.

    Formats as ``"svg-less: <message>"`` so it reads like any other build
    plugin failure in a pipeline log.
    """

    plugin = PLUGIN_NAME

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.plugin}: {self.message}"


class ConfigurationError(SvgLessError):
    """Invalid collector options (wrong types, unusable values)."""

    pass


class UnsupportedInputError(SvgLessError):
    """An input file cannot be handled in its current form."""

    pass


class StreamingUnsupportedError(UnsupportedInputError):
    """Input contents are delivered incrementally instead of in memory."""

    def __init__(self, path: str | None = None):
        super().__init__("Streaming not supported")
        self.path = path


class MalformedSourceError(SvgLessError):
    """Source is not parseable XML or has no ``svg`` element."""

    def __init__(self, message: str, path: str | None = None):
        if path:
            message = f"{message} ({path})"
        super().__init__(message)
        self.path = path


class CollectorStateError(SvgLessError):
    """Collector used after it already produced its output."""

    pass
