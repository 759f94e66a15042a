"""Shared test fixtures for vboxmodel.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest

from vboxmodel.dump import parse_machine_readable

MACHINE_READABLE_DUMP = """\
name="Ubuntu Server"
ostype="Ubuntu (64-bit)"
UUID="8c2f7d1e-4b6a-4a55-9d1e-0f3b2a6c9e11"
memory=1024
VMState="poweroff"
storagecontrollername0="IDE Controller"
storagecontrollertype0="PIIX4"
storagecontrollerinstance0="0"
storagecontrollermaxportcount0="2"
storagecontrollerportcount0="2"
storagecontrollerbootable0="on"
storagecontrollername1="SATA Controller"
storagecontrollertype1="IntelAhci"
storagecontrollerinstance1="0"
storagecontrollermaxportcount1="30"
storagecontrollerportcount1="1"
storagecontrollerbootable1="on"
"IDE Controller-0-0"="none"
"IDE Controller-0-1"="none"
"IDE Controller-1-0"="/vms/ubuntu/cdrom.iso"
"IDE Controller-ImageUUID-1-0"="322f79fd-7da6-416f-a16f-e70066ccf165"
"SATA Controller-0-0"="/vms/ubuntu/ubuntu.vdi"
"SATA Controller-ImageUUID-0-0"="5b1e2a44-9c0d-4f0e-8a63-3f2d5b8a7c10"
"""


@pytest.fixture()
def machine_readable_dump() -> str:
    """Return a realistic ``showvminfo --machinereadable`` dump."""
    return MACHINE_READABLE_DUMP


@pytest.fixture()
def dump_data(machine_readable_dump: str) -> dict[str, str]:
    """Return the parsed form of ``machine_readable_dump``."""
    return parse_machine_readable(machine_readable_dump)
