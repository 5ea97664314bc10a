"""Candidate search paths and their YAML loader."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator

import yaml

from grubscan.models import Dialect

logger = logging.getLogger(__name__)

# Files with GRUB2 syntax
GRUB2_PATHS = (
    "boot/grub2/grub.cfg",
    "boot/grub2.cfg",
    "grub2/grub.cfg",
    "grub2.cfg",
)

# Files with legacy GRUB syntax
GRUB_LEGACY_PATHS = (
    "boot/grub/grub.cfg",
    "boot/grub.cfg",
    "grub/grub.cfg",
    "grub.cfg",
)


@dataclass
class SearchPaths:
    """Relative paths probed for GRUB configs, per dialect."""

    grub2: list[str] = field(default_factory=lambda: list(GRUB2_PATHS))
    legacy: list[str] = field(default_factory=lambda: list(GRUB_LEGACY_PATHS))

    def for_dialect(self, dialect: Dialect) -> list[str]:
        if dialect is Dialect.V2:
            return list(self.grub2)
        if dialect is Dialect.LEGACY:
            return list(self.legacy)
        raise ValueError(f"Invalid GRUB dialect: {dialect!r}")

    def ordered(self) -> Iterator[tuple[Dialect, str]]:
        """Yield (dialect, path) pairs in scan order, GRUB2 first."""
        for dialect in (Dialect.V2, Dialect.LEGACY):
            for path in self.for_dialect(dialect):
                yield dialect, path


class SearchPathLoader:
    """Load candidate search paths from a YAML file.

    Example::

        grub2:
          - boot/grub2/grub.cfg
        legacy:
          - boot/grub/menu.cfg
    """

    def load_file(self, filepath: str | Path) -> SearchPaths:
        filepath = Path(filepath)
        if not filepath.exists():
            raise FileNotFoundError(f"Search path file not found: {filepath}")

        with open(filepath) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {filepath}: {e}") from e

        if not data:
            logger.warning("No search paths in %s, using defaults", filepath)
            return SearchPaths()
        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping in {filepath}")

        paths = SearchPaths()
        if "grub2" in data:
            paths.grub2 = self._parse_list(data["grub2"], "grub2", filepath)
        if "legacy" in data:
            paths.legacy = self._parse_list(data["legacy"], "legacy", filepath)

        logger.info("Loaded %d GRUB2 and %d legacy search paths from %s",
                    len(paths.grub2), len(paths.legacy), filepath.name)
        return paths

    def _parse_list(self, value: Any, key: str, filepath: Path) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ValueError(f"'{key}' in {filepath} must be a list of paths")
        return value
