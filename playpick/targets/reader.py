"""
Readers that extract target declarations from a runner configuration.

Two formats are supported behind the TargetReader protocol:

- PatternTargetReader scans raw text for ``name: "<value>"`` entries, which
  is enough for a playwright.config.ts without parsing TypeScript.
- YamlTargetReader loads an explicit schema:

      targets:
        - chromium
        - name: Tablet - iPad
          category: tablet
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

import yaml

from playpick.exceptions import ConfigError

from .category import Category, categorize

# name: "value" or name: 'value', quotes must match, no line breaks inside
NAME_PATTERN = re.compile(r"""\bname\s*:\s*(?:"([^"\r\n]*)"|'([^'\r\n]*)')""")

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


@dataclass(frozen=True)
class Target:
    """A named browser/device configuration of the external runner."""

    name: str
    hint: Category | None = None

    @property
    def category(self) -> Category | None:
        """Category from the explicit hint, else from the naming rules."""
        if self.hint is not None:
            return self.hint
        return categorize(self.name)


class TargetReader(Protocol):
    """Protocol for configuration readers."""

    def read(self, text: str) -> list[Target]:
        """Return targets in document order, duplicates preserved."""
        ...


class PatternTargetReader:
    """
    Lightweight scan for name entries anywhere in the document.

    Surrounding structure is ignored, so entries inside comments are picked
    up too; names matching no category are simply never selected.
    """

    def read(self, text: str) -> list[Target]:
        return [
            Target(m.group(1) if m.group(1) is not None else m.group(2))
            for m in NAME_PATTERN.finditer(text)
        ]


class YamlTargetReader:
    """Structured reader for a YAML ``targets`` (or ``projects``) list."""

    def read(self, text: str) -> list[Target]:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML target list: {e}") from e

        entries = self._entries(data)
        return [self._parse_entry(entry, i) for i, entry in enumerate(entries)]

    @staticmethod
    def _entries(data: Any) -> list[Any]:
        if data is None:
            return []
        if isinstance(data, list):
            return data
        if isinstance(data, dict):
            entries = data.get("targets", data.get("projects", []))
            if entries is None:
                return []
            if isinstance(entries, list):
                return entries
        raise ConfigError("target list must be a sequence under 'targets'")

    @staticmethod
    def _parse_entry(entry: Any, index: int) -> Target:
        if isinstance(entry, str):
            return Target(entry)
        if not isinstance(entry, dict):
            raise ConfigError("target entry must be a string or mapping", index=index)

        name = entry.get("name")
        if not isinstance(name, str) or not name:
            raise ConfigError("target entry has no name", index=index)

        hint = entry.get("category")
        if hint is None:
            return Target(name)
        try:
            return Target(name, Category.from_hint(str(hint)))
        except ValueError as e:
            raise ConfigError(str(e), target=name) from e


def reader_for(path: str | Path) -> TargetReader:
    """Choose a reader by file suffix: YAML schema or text pattern scan."""
    if Path(path).suffix.lower() in YAML_SUFFIXES:
        return YamlTargetReader()
    return PatternTargetReader()


def read_targets(path: str | Path, reader: TargetReader | None = None) -> list[Target]:
    """
    Read the runner configuration and return its declared targets.

    Args:
        path: Path to the runner configuration file
        reader: Reader to use (default: chosen by suffix)

    Raises:
        ConfigError: If the file cannot be read
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(
            f"cannot read target configuration: {path}", reason=str(e)
        ) from e

    return (reader or reader_for(path)).read(text)
