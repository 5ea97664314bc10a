"""Integrity measurement hooks for config data read by the scanner.

A hook is any callable taking ``(kind, data, path)``. The scanner calls it
once per config file it manages to read, before parsing, and ignores the
result.
"""

from __future__ import annotations

import hashlib
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

from grubscan.models import MeasurementKind

logger = logging.getLogger(__name__)

Measurer = Callable[[MeasurementKind, bytes, str], object]


def log_measurement(kind: MeasurementKind, data: bytes, path: str) -> None:
    """Default hook: log the SHA-256 digest of the measured data."""
    digest = hashlib.sha256(data).hexdigest()
    logger.debug("Measured %s (%s): sha256=%s", path, kind.value, digest)


class DigestRecorder:
    """Measurement hook that keeps a record of every file it was given.

    Backs the ``grubscan scan --measurements`` option.
    """

    def __init__(self) -> None:
        self._records: list[dict[str, Any]] = []

    def __call__(self, kind: MeasurementKind, data: bytes, path: str) -> None:
        record = {
            "kind": kind.value,
            "path": path,
            "sha256": hashlib.sha256(data).hexdigest(),
            "size": len(data),
            "measured_at": datetime.utcnow().isoformat(),
        }
        self._records.append(record)
        logger.debug("Recorded measurement of %s", path)

    @property
    def records(self) -> list[dict[str, Any]]:
        return list(self._records)

    def export_json(self, filepath: str | Path) -> None:
        """Export all measurements to JSON."""
        data = {
            "exported_at": datetime.utcnow().isoformat(),
            "count": len(self._records),
            "measurements": self._records,
        }
        Path(filepath).write_text(json.dumps(data, indent=2))
