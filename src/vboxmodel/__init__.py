"""vboxmodel — VirtualBox configuration models with declarative relationships.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import vboxmodel

    # Load a VM from a saved ``showvminfo --machinereadable`` dump
    vm = vboxmodel.load_dump(open("ubuntu.txt").read())

    for controller in vm.storage_controllers:
        for device in controller.devices:
            print(controller.name, device.port, device.medium)

    # Or declare your own related models
    class Snapshot:
        @classmethod
        def populate_relationship(cls, caller, data):
            return data.get("currentsnapshotname")

    class MyVM(vboxmodel.Relatable):
        snapshot = vboxmodel.relationship(Snapshot)

    vboxmodel.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from vboxmodel.exceptions import (
    CommandFailedError,
    NonSettableRelationshipError,
    RelationshipNotFoundError,
    VirtualBoxError,
)
from vboxmodel.relatable import Hook, Relatable, relationship

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from vboxmodel.models import VirtualMachine


def load_dump(text: str) -> "VirtualMachine":
    """Parse machine-readable ``showvminfo`` output into a populated VM.

    Parameters
    ----------
    text:
        Raw ``VBoxManage showvminfo <vm> --machinereadable`` output.

    Returns
    -------
    VirtualMachine
        The VM with its storage controllers and attached devices.
    """
    from vboxmodel.dump import parse_machine_readable
    from vboxmodel.models import VirtualMachine

    return VirtualMachine.from_dump(parse_machine_readable(text))


__all__ = [
    "CommandFailedError",
    "Hook",
    "NonSettableRelationshipError",
    "Relatable",
    "RelationshipNotFoundError",
    "VirtualBoxError",
    "__version__",
    "load_dump",
    "relationship",
]
