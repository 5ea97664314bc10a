"""Scanner that finds GRUB configs at well-known paths under a base directory."""

from __future__ import annotations

import logging
from pathlib import Path

from grubscan.ingest.parser import GrubConfigParser, join_path
from grubscan.measure import Measurer, log_measurement
from grubscan.models import BootEntry, Dialect, MeasurementKind
from grubscan.settings.loader import GRUB2_PATHS, GRUB_LEGACY_PATHS, SearchPaths

logger = logging.getLogger(__name__)

__all__ = ["GRUB2_PATHS", "GRUB_LEGACY_PATHS", "GrubConfigScanner"]


class GrubConfigScanner:
    """Probe candidate paths for GRUB2 and legacy GRUB configs and parse them."""

    def __init__(self, parser: GrubConfigParser | None = None,
                 measure: Measurer | None = None,
                 search_paths: SearchPaths | None = None) -> None:
        self.parser = parser or GrubConfigParser()
        self.measure = measure or log_measurement
        self.search_paths = search_paths or SearchPaths()

    def scan(self, base_dir: str | Path) -> list[BootEntry]:
        """Return the boot entries of every config found under ``base_dir``.

        GRUB2 candidates are tried before legacy ones. All kernel and initrd
        paths stay relative to ``base_dir``, not to the config's directory.
        """
        base_dir = str(base_dir)
        entries: list[BootEntry] = []
        for dialect, candidate in self.search_paths.ordered():
            path = join_path(base_dir, candidate)
            logger.debug("Trying to read %s", path)
            try:
                data = Path(path).read_bytes()
            except OSError as e:
                logger.warning("Cannot open %s: %s", path, e)
                continue

            self._measure(data, path)
            found = self.parser.parse_text(
                data.decode("utf-8", errors="surrogateescape"), dialect, base_dir)
            logger.info("Found %d boot entries in %s (%s)",
                        len(found), path, dialect.value)
            entries.extend(found)
        return entries

    def found_configs(self, base_dir: str | Path) -> list[tuple[Dialect, str]]:
        """List existing candidate files in scan order, without reading them."""
        base_dir = str(base_dir)
        found = []
        for dialect, candidate in self.search_paths.ordered():
            path = join_path(base_dir, candidate)
            if Path(path).is_file():
                found.append((dialect, path))
        return found

    def _measure(self, data: bytes, path: str) -> None:
        try:
            self.measure(MeasurementKind.CONFIG_DATA, data, path)
        except Exception as e:
            logger.warning("Measurement of %s failed: %s", path, e)
