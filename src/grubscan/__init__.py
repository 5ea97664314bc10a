"""grubscan: find and parse GRUB bootloader configs into boot entries."""

__version__ = "1.0.0"

from grubscan.ingest.parser import GrubConfigParser
from grubscan.ingest.scanner import GrubConfigScanner
from grubscan.models import BootEntry, Dialect

__all__ = [
    "BootEntry",
    "Dialect",
    "GrubConfigParser",
    "GrubConfigScanner",
    "__version__",
]
