"""Collector option schema.

Pydantic model for the options a single collector run is constructed with.
Options come from the caller only; they are never read from the environment.
"""

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from svg_less.errors import ConfigurationError

DEFAULT_FILE_NAME = "icons"
DEFAULT_MIXIN_PREFIX = "icon-"
DEFAULT_WIDTH = "16px"
DEFAULT_HEIGHT = "16px"

_STRING_DEFAULTS = {
    "file_name": DEFAULT_FILE_NAME,
    "mixin_prefix": DEFAULT_MIXIN_PREFIX,
    "default_width": DEFAULT_WIDTH,
    "default_height": DEFAULT_HEIGHT,
}


class CollectorOptions(BaseModel):
    """Options for one mixin collector run.

    Accepts both the snake_case field names and the camelCase option names
    used by build configs (``fileName``, ``mixinPrefix``, ``addSize``,
    ``defaultWidth``, ``defaultHeight``, ``outputMixin``, ``skipMalformed``).

    Example:
        >>> CollectorOptions(fileName="sprites", addSize=True).output_path
        'sprites.less'
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    file_name: str = Field(
        default=DEFAULT_FILE_NAME,
        alias="fileName",
        description="Output base name, '.less' is appended",
    )
    mixin_prefix: str = Field(
        default=DEFAULT_MIXIN_PREFIX,
        alias="mixinPrefix",
        description="Prefix placed before every normalized file name",
    )
    add_size: bool = Field(
        default=False,
        alias="addSize",
        description="Emit width/height declarations in every block",
    )
    default_width: str = Field(
        default=DEFAULT_WIDTH,
        alias="defaultWidth",
        description="Width used when the svg element has none",
    )
    default_height: str = Field(
        default=DEFAULT_HEIGHT,
        alias="defaultHeight",
        description="Height used when the svg element has none",
    )
    output_mixin: bool = Field(
        default=False,
        alias="outputMixin",
        description="Emit plain class rules instead of callable mixins",
    )
    skip_malformed: bool = Field(
        default=False,
        alias="skipMalformed",
        description="Skip unparseable sources with a warning instead of failing",
    )

    @field_validator(
        "file_name", "mixin_prefix", "default_width", "default_height", mode="before"
    )
    @classmethod
    def default_when_empty(cls, v, info):
        """Fall back to the default for missing or empty string options."""
        if v is None or v == "":
            return _STRING_DEFAULTS[info.field_name]
        return v

    @field_validator("add_size", "output_mixin", "skip_malformed", mode="before")
    @classmethod
    def false_when_none(cls, v):
        return False if v is None else v

    @property
    def output_path(self) -> str:
        """Path of the stylesheet produced at the end of the run."""
        return f"{self.file_name}.less"

    @classmethod
    def from_mapping(
        cls, mapping: Optional[Mapping[str, Any]] = None, **overrides: Any
    ) -> "CollectorOptions":
        """Build options from a plain mapping plus keyword overrides.

        Raises:
            ConfigurationError: If a value has the wrong type
        """
        data = dict(mapping or {})
        data.update(overrides)
        try:
            return cls(**data)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid options: {exc}") from exc
