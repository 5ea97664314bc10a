"""GRUB legacy and GRUB2 configuration parser."""

from __future__ import annotations

import logging
import posixpath
from pathlib import Path
from typing import Any

from grubscan.models import BootEntry, Dialect, ValidityPredicate, default_validity

logger = logging.getLogger(__name__)

KERNEL_DIRECTIVES = {"linux", "linux16", "linuxefi"}
INITRD_DIRECTIVES = {"initrd", "initrd16", "initrdefi"}


def unescape(dialect: Dialect, text: str) -> str:
    """Undo the quoting a dialect applies to directive arguments.

    GRUB2 escapes ``$`` as ``\\$``; legacy GRUB has no such quoting.
    """
    if dialect is Dialect.V2:
        return text.replace("\\$", "$")
    if dialect is Dialect.LEGACY:
        return text
    raise ValueError(f"Invalid GRUB dialect: {dialect!r}")


def join_path(base_dir: str, path: str) -> str:
    """Place ``path`` under ``base_dir``, even when ``path`` is absolute."""
    parts = [p for p in (str(base_dir), path) if p]
    if not parts:
        return ""
    joined = posixpath.normpath("/".join(parts))
    # normpath keeps a leading "//" (POSIX allows it to be special)
    if joined.startswith("//"):
        joined = joined[1:]
    return joined


class GrubConfigParser:
    """Directive scanner for grub.cfg files.

    This is not a GRUB script interpreter. It only looks for lines starting
    with menuentry and the kernel, initrd, multiboot and module directives
    that follow it.
    """

    def __init__(self, validator: ValidityPredicate | None = None) -> None:
        self.validator = validator or default_validity

    def parse_file(self, filepath: str | Path, dialect: Any,
                   base_dir: str | Path | None = None) -> list[BootEntry]:
        """Parse a grub.cfg file from disk."""
        filepath = Path(filepath)
        if not filepath.is_file():
            raise FileNotFoundError(f"GRUB config not found: {filepath}")

        raw = filepath.read_text(encoding="utf-8", errors="surrogateescape")
        if base_dir is None:
            base_dir = filepath.parent
        return self.parse_text(raw, dialect, str(base_dir))

    def parse_text(self, text: str, dialect: Any, base_dir: str) -> list[BootEntry]:
        """Parse grub.cfg content into boot entries, in source order.

        Kernel, initrd, multiboot and module paths are resolved relative to
        ``base_dir``. An invalid dialect yields an empty list.
        """
        try:
            dialect = Dialect.coerce(dialect)
        except ValueError:
            logger.warning("Invalid GRUB dialect: %r", dialect)
            return []

        entries: list[BootEntry] = []
        current: BootEntry | None = None

        for line in text.split("\n"):
            tokens = line.lstrip().split()
            if not tokens:
                continue

            if tokens[0] == "menuentry":
                self._flush(current, entries)
                current = BootEntry(name=" ".join(tokens[1:]))
                continue

            if current is None or len(tokens) < 2:
                continue
            self._apply_directive(current, tokens, dialect, base_dir)

        self._flush(current, entries)
        return entries

    def _flush(self, entry: BootEntry | None, entries: list[BootEntry]) -> None:
        """Keep a finished entry if the validity predicate accepts it."""
        if entry is not None and self.validator(entry):
            entries.append(entry)

    def _apply_directive(self, entry: BootEntry, tokens: list[str],
                         dialect: Dialect, base_dir: str) -> None:
        keyword, target, rest = tokens[0], tokens[1], " ".join(tokens[2:])

        if keyword in KERNEL_DIRECTIVES:
            entry.kernel = join_path(base_dir, target)
            entry.kernel_args = unescape(dialect, rest)
        elif keyword in INITRD_DIRECTIVES:
            entry.initramfs = join_path(base_dir, target)
        elif keyword == "multiboot":
            entry.multiboot = join_path(base_dir, target)
            entry.multiboot_args = unescape(dialect, rest)
        elif keyword == "module":
            module = join_path(base_dir, target)
            args = unescape(dialect, rest)
            if args:
                module = f"{module} {args}"
            entry.modules.append(module)
