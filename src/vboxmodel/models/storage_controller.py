"""Storage controllers (IDE, SATA, SCSI, ...) of a virtual machine."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from vboxmodel.models.attached_device import AttachedDevice
from vboxmodel.relatable import Relatable, relationship

if TYPE_CHECKING:
    from vboxmodel.models.virtual_machine import VirtualMachine

logger = logging.getLogger(__name__)


@dataclass
class StorageController(Relatable):
    """A controller and, through ``devices``, the media attached to it.

    Parameters
    ----------
    parent:
        The virtual machine owning the controller.
    name:
        Controller name as shown by VirtualBox, e.g. ``"IDE Controller"``.
    type:
        Chipset type, e.g. ``"PIIX4"``.
    max_ports:
        Number of ports the controller exposes.
    """

    parent: "VirtualMachine" = field(repr=False, compare=False)
    name: str
    type: str | None = None
    max_ports: int | None = None

    devices = relationship(AttachedDevice)

    # ------------------------------------------------------------------
    # Relationship hooks
    # ------------------------------------------------------------------

    @classmethod
    def populate_relationship(
        cls, caller: "VirtualMachine", data: Mapping[str, Any] | None
    ) -> list["StorageController"]:
        """Build every ``storagecontrollername<i>`` entry of ``data``, in order."""
        controllers: list[StorageController] = []
        if not data:
            return controllers
        index = 0
        while f"storagecontrollername{index}" in data:
            max_ports = data.get(f"storagecontrollermaxportcount{index}")
            controller = cls(
                parent=caller,
                name=data[f"storagecontrollername{index}"],
                type=data.get(f"storagecontrollertype{index}"),
                max_ports=int(max_ports) if max_ports is not None else None,
            )
            controller.populate_relationships(data)
            controllers.append(controller)
            index += 1
        logger.debug("Populated %d storage controller(s)", len(controllers))
        return controllers

    @classmethod
    def save_relationship(
        cls,
        caller: "VirtualMachine",
        controllers: list["StorageController"] | None,
        *args: Any,
    ) -> None:
        for controller in controllers or []:
            controller.save(*args)

    @classmethod
    def destroy_relationship(
        cls,
        caller: "VirtualMachine",
        controllers: list["StorageController"] | None,
        *args: Any,
    ) -> None:
        for controller in controllers or []:
            controller.destroy(*args)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def save(self, *args: Any) -> None:
        self.save_relationships(*args)

    def destroy(self, *args: Any) -> None:
        """Detach every device on this controller."""
        self.destroy_relationships(*args)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "max_ports": self.max_ports,
            "devices": [device.to_dict() for device in self.devices or []],
        }
