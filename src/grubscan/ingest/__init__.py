"""GRUB config ingestion: parser and filesystem scanner."""

from grubscan.ingest.parser import GrubConfigParser, join_path, unescape
from grubscan.ingest.scanner import GRUB2_PATHS, GRUB_LEGACY_PATHS, GrubConfigScanner

__all__ = [
    "GrubConfigParser",
    "GrubConfigScanner",
    "GRUB2_PATHS",
    "GRUB_LEGACY_PATHS",
    "join_path",
    "unescape",
]
