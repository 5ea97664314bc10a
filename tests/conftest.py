"""Shared test fixtures."""

import pytest

SAMPLE_GRUB2_CONFIG = r"""#
# DO NOT EDIT THIS FILE
#
set default="0"
insmod part_msdos

menuentry 'Fedora (5.14.10-300.fc35.x86_64) 35' --class fedora --class gnu-linux {
	load_video
	set gfxpayload=keep
	insmod gzio
	linux	/vmlinuz-5.14.10-300.fc35.x86_64 root=/dev/mapper/fedora-root ro rhgb quiet
	initrd	/initramfs-5.14.10-300.fc35.x86_64.img
}

menuentry 'Fedora rescue' {
	linuxefi /vmlinuz-0-rescue root=UUID=1234 console=\$tty
	initrdefi /initramfs-0-rescue.img
}

menuentry 'UEFI Firmware Settings' {
	fwsetup
}

menuentry 'Xen hypervisor' {
	multiboot /xen.gz dom0_mem=\$mem
	module /vmlinuz-xen root=/dev/sda1 console=\$con
	module /initrd-xen.img
}
"""

SAMPLE_LEGACY_CONFIG = r"""default 0
timeout 5

menuentry "Debian GNU/Linux"
    linux16 /boot/vmlinuz-4.19 root=/dev/sda1 ro init=\$init
    initrd16 /boot/initrd.img-4.19

menuentry "Memtest86+"
    memtest /boot/memtest86+.bin
"""


@pytest.fixture
def grub2_config():
    return SAMPLE_GRUB2_CONFIG


@pytest.fixture
def legacy_config():
    return SAMPLE_LEGACY_CONFIG


@pytest.fixture
def boot_root(tmp_path):
    """A fake mounted filesystem with no GRUB configs yet."""
    return tmp_path


@pytest.fixture
def write_config(boot_root):
    """Write a config file at a path relative to boot_root."""
    def _write(relpath, content):
        path = boot_root / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path
    return _write
