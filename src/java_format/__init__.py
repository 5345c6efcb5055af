"""
java-format options - the configuration surface of the java-format pretty-printer

This package provides:
- Style presets (GOOGLE, AOSP) and their indentation multipliers
- Single-line Javadoc rendering modes
- An immutable options value assembled through a builder
"""

__version__ = "0.1.0"

from .options import (
    Builder,
    JavaFormatterOptions,
    SingleLineJavadocStyle,
    Style,
    builder,
    default_options,
)

__all__ = [
    "Builder",
    "JavaFormatterOptions",
    "SingleLineJavadocStyle",
    "Style",
    "builder",
    "default_options",
]
