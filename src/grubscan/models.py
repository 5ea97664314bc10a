"""Core data models for grubscan."""

from __future__ import annotations

import enum
from dataclasses import asdict, dataclass, field
from typing import Any, Callable


class Dialect(enum.Enum):
    """Supported GRUB configuration dialects."""

    LEGACY = "legacy"
    V2 = "v2"

    @classmethod
    def coerce(cls, value: Any) -> Dialect:
        """Turn a dialect name or GRUB major version into a Dialect.

        Raises ValueError for anything that is not one of the two dialects.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid GRUB dialect: {value!r}")
        if isinstance(value, int):
            versions = {1: cls.LEGACY, 2: cls.V2}
            if value in versions:
                return versions[value]
            raise ValueError(f"Invalid GRUB version: {value}")
        if isinstance(value, str):
            return cls(value.strip().lower())
        raise ValueError(f"Invalid GRUB dialect: {value!r}")


class MeasurementKind(enum.Enum):
    """Classification tags passed to measurement hooks."""

    CONFIG_DATA = "configuration-data"


@dataclass
class BootEntry:
    """A single bootable option found in a GRUB config."""

    name: str = ""
    kernel: str = ""
    kernel_args: str = ""
    initramfs: str = ""
    multiboot: str = ""
    multiboot_args: str = ""
    modules: list[str] = field(default_factory=list)

    def is_valid(self) -> bool:
        return bool(self.kernel or self.multiboot)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


ValidityPredicate = Callable[[BootEntry], bool]


def default_validity(entry: BootEntry) -> bool:
    """Keep entries that have a kernel or a multiboot image."""
    return entry.is_valid()
