"""Options for a java-format invocation.

Like gofmt, java-format exposes almost no configuration (aside from ``--aosp``).
The goal is consistent formatting that frees developers from arguments over
style choices, so supporting individual preferences is an explicit non-goal.
"""

from dataclasses import dataclass
from enum import Enum


class Style(str, Enum):
    """Code style presets, each fixing the unit of indent."""

    GOOGLE = ("google", 1)
    """The default Google Java Style configuration."""

    AOSP = ("aosp", 2)
    """The AOSP-compliant configuration."""

    def __new__(cls, value: str, indentation_multiplier: int) -> "Style":
        member = str.__new__(cls, value)
        member._value_ = value
        member._indentation_multiplier = indentation_multiplier
        return member

    def indentation_multiplier(self) -> int:
        return self._indentation_multiplier


class SingleLineJavadocStyle(str, Enum):
    """How a Javadoc comment that fits on one line is rendered."""

    SINGLE_LINE = "single-line"
    """``/** A single line. */``"""

    MULTI_LINE = "multi-line"
    """The comment text on its own line between ``/**`` and `` */``."""


@dataclass(frozen=True, init=False)
class JavaFormatterOptions:
    """Immutable snapshot of the formatter options.

    Instances are only created from a :class:`Builder` (see :func:`builder`
    and :func:`default_options`) and are safe to share between threads.
    """

    style: Style
    format_javadoc: bool
    single_line_javadoc_style: SingleLineJavadocStyle
    space_inside_empty_block: bool

    def __init__(self, builder: "Builder"):
        object.__setattr__(self, "style", builder._style)
        object.__setattr__(self, "format_javadoc", builder._format_javadoc)
        object.__setattr__(self, "single_line_javadoc_style", builder._single_line_javadoc_style)
        object.__setattr__(self, "space_inside_empty_block", builder._space_inside_empty_block)

    def indentation_multiplier(self) -> int:
        """Returns the multiplier for the unit of indent."""
        return self.style.indentation_multiplier()

    @staticmethod
    def default_options() -> "JavaFormatterOptions":
        """Returns the default formatting options."""
        return JavaFormatterOptions.builder().build()

    @staticmethod
    def builder() -> "Builder":
        """Returns a builder for JavaFormatterOptions."""
        return Builder()


class Builder:
    """A builder for JavaFormatterOptions.

    Not thread-safe: use one builder per assembly of options.
    """

    def __init__(self):
        self._style = Style.GOOGLE
        self._format_javadoc = True
        self._single_line_javadoc_style = SingleLineJavadocStyle.SINGLE_LINE
        self._space_inside_empty_block = False

    def style(self, style: Style) -> "Builder":
        self._style = style
        return self

    def format_javadoc(self, format_javadoc: bool) -> "Builder":
        self._format_javadoc = format_javadoc
        return self

    def single_line_javadoc_style(
        self, single_line_javadoc_style: SingleLineJavadocStyle
    ) -> "Builder":
        """Sets what style to use when formatting Javadoc comments that fit in a single line."""
        self._single_line_javadoc_style = single_line_javadoc_style
        return self

    def space_inside_empty_block(self, space_inside_empty_block: bool) -> "Builder":
        """Sets whether there should be a space inside of an empty block (``{ }``).

        Intended to work with Checkstyle's WhitespaceAround check.
        """
        self._space_inside_empty_block = space_inside_empty_block
        return self

    def build(self) -> JavaFormatterOptions:
        return JavaFormatterOptions(self)

    def __repr__(self) -> str:
        return (
            f"Builder(style={self._style!r}, format_javadoc={self._format_javadoc!r}, "
            f"single_line_javadoc_style={self._single_line_javadoc_style!r}, "
            f"space_inside_empty_block={self._space_inside_empty_block!r})"
        )


def builder() -> Builder:
    """Returns a fresh builder populated with the default options."""
    return JavaFormatterOptions.builder()


def default_options() -> JavaFormatterOptions:
    """Returns the default formatting options."""
    return JavaFormatterOptions.default_options()
