"""Configuration for svg-less.

``schema`` holds the per-run collector options; ``settings`` holds the
ambient, environment-driven settings (logging).
"""

from .schema import CollectorOptions
from .settings import SvgLessSettings, reload_settings

__all__ = ["CollectorOptions", "SvgLessSettings", "reload_settings"]
