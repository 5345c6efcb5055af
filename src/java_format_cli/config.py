import logging
import tomllib
from pathlib import Path
from typing import Any

from java_format.options import Builder, SingleLineJavadocStyle, Style

logger = logging.getLogger(__name__)

KNOWN_KEYS = {"style", "format-javadoc", "single-line-javadoc-style", "space-inside-empty-block"}


class FormatOptionsConfig:
    """Handles loading and validation of .java-format.toml configuration"""

    def __init__(self, config_path: Path | None = None):
        # None means "not set in the file", so builder defaults and CLI flags win
        self.style: Style | None = None
        self.format_javadoc: bool | None = None
        self.single_line_javadoc_style: SingleLineJavadocStyle | None = None
        self.space_inside_empty_block: bool | None = None

        if config_path and config_path.exists():
            self._load_from_file(config_path)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)

            tool = data.get("tool", {})
            if not isinstance(tool, dict):
                raise ValueError("'tool' must be a table")
            section = tool.get("java-format", {})
            if not isinstance(section, dict):
                raise ValueError("'tool.java-format' must be a table")
            values = self._parse_section(section)
        except (tomllib.TOMLDecodeError, ValueError, OSError) as e:
            # Fallback to defaults if parsing fails
            logger.warning("Ignoring config file %s: %s", path, e)
            return

        for name, value in values.items():
            setattr(self, name, value)
        logger.debug("Loaded java-format options from %s: %s", path, values)

    @staticmethod
    def _parse_section(section: dict[str, Any]) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for key in section:
            if key not in KNOWN_KEYS:
                logger.warning("Unknown java-format option '%s'", key)

        if "style" in section:
            values["style"] = Style(section["style"])
        if "format-javadoc" in section:
            values["format_javadoc"] = _as_bool("format-javadoc", section["format-javadoc"])
        if "single-line-javadoc-style" in section:
            values["single_line_javadoc_style"] = SingleLineJavadocStyle(
                section["single-line-javadoc-style"]
            )
        if "space-inside-empty-block" in section:
            values["space_inside_empty_block"] = _as_bool(
                "space-inside-empty-block", section["space-inside-empty-block"]
            )
        return values

    def apply_to_builder(self, builder: Builder) -> Builder:
        """Stage the options set in the file onto builder"""
        if self.style is not None:
            builder.style(self.style)
        if self.format_javadoc is not None:
            builder.format_javadoc(self.format_javadoc)
        if self.single_line_javadoc_style is not None:
            builder.single_line_javadoc_style(self.single_line_javadoc_style)
        if self.space_inside_empty_block is not None:
            builder.space_inside_empty_block(self.space_inside_empty_block)
        return builder


def _as_bool(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"'{key}' must be true or false, got {value!r}")
    return value
