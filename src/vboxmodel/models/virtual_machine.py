"""Virtual machines, built from ``showvminfo --machinereadable`` dumps."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from vboxmodel.command import Command
from vboxmodel.dump import parse_machine_readable
from vboxmodel.models.storage_controller import StorageController
from vboxmodel.relatable import Relatable, relationship

logger = logging.getLogger(__name__)


@dataclass
class VirtualMachine(Relatable):
    """A registered VirtualBox VM and its storage tree."""

    name: str
    uuid: str | None = None
    os_type: str | None = None
    memory: int | None = None
    state: str | None = None

    storage_controllers = relationship(StorageController)

    @classmethod
    def from_dump(cls, data: Mapping[str, Any]) -> "VirtualMachine":
        """Build a VM from a parsed machine-readable dump and populate its relationships."""
        memory = data.get("memory")
        vm = cls(
            name=data.get("name", ""),
            uuid=data.get("uuid"),
            os_type=data.get("ostype"),
            memory=int(memory) if memory is not None else None,
            state=data.get("vmstate"),
        )
        vm.populate_relationships(data)
        return vm

    @classmethod
    def find(cls, name: str) -> "VirtualMachine":
        """Query VirtualBox for the VM called ``name``.

        Raises
        ------
        vboxmodel.exceptions.CommandFailedError
            If ``VBoxManage`` does not know the VM.
        """
        output = Command.vboxmanage(f"showvminfo {Command.shell_escape(name)} --machinereadable")
        return cls.from_dump(parse_machine_readable(output))

    def save(self, *args: Any) -> None:
        self.save_relationships(*args)

    def destroy(self, *args: Any) -> None:
        """Detach all media, then unregister the VM and delete its files."""
        self.destroy_relationships(*args)
        Command.vboxmanage(f"unregistervm {Command.shell_escape(self.name)} --delete")
        logger.info("Destroyed VM %r", self.name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "uuid": self.uuid,
            "os_type": self.os_type,
            "memory": self.memory,
            "state": self.state,
            "storage_controllers": [
                controller.to_dict() for controller in self.storage_controllers or []
            ],
        }
