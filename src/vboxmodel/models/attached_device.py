"""A medium attached to one port of a storage controller."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from vboxmodel.command import Command
from vboxmodel.exceptions import CommandFailedError

if TYPE_CHECKING:
    from vboxmodel.models.storage_controller import StorageController

logger = logging.getLogger(__name__)


@dataclass
class AttachedDevice:
    """A device on ``port`` (device slot 0) of its parent controller.

    Parameters
    ----------
    parent:
        The owning storage controller.
    port:
        0-based port number on the controller.
    medium:
        Path of the attached medium, or a keyword such as ``"none"``.
    uuid:
        Image UUID of the medium, when VirtualBox reports one.
    """

    parent: "StorageController" = field(repr=False, compare=False)
    port: int
    medium: str | None = None
    uuid: str | None = None

    # ------------------------------------------------------------------
    # Relationship hooks
    # ------------------------------------------------------------------

    @classmethod
    def populate_relationship(
        cls, caller: "StorageController", data: Mapping[str, Any]
    ) -> list["AttachedDevice"]:
        """Build one device per consecutive populated port of ``caller``."""
        devices: list[AttachedDevice] = []
        prefix = caller.name.lower()
        port = 0
        while f"{prefix}-{port}-0" in data:
            devices.append(
                cls(
                    parent=caller,
                    port=port,
                    medium=data[f"{prefix}-{port}-0"],
                    uuid=data.get(f"{prefix}-imageuuid-{port}-0"),
                )
            )
            port += 1
        logger.debug("Populated %d device(s) for controller %r", len(devices), caller.name)
        return devices

    @classmethod
    def destroy_relationship(
        cls,
        caller: "StorageController",
        devices: list["AttachedDevice"] | None,
        *args: Any,
    ) -> None:
        for device in devices or []:
            device.destroy(*args)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def destroy(self, raise_errors: bool = False) -> bool:
        """Detach the medium from its port.

        Returns False if VirtualBox refused and ``raise_errors`` is off.
        """
        vm_name = Command.shell_escape(self.parent.parent.name)
        controller_name = Command.shell_escape(self.parent.name)
        try:
            Command.vboxmanage(
                f"storageattach {vm_name} --storagectl {controller_name} "
                f"--port {self.port} --device 0 --medium none"
            )
        except CommandFailedError:
            if raise_errors:
                raise
            logger.warning(
                "Failed to detach port %d of controller %r", self.port, self.parent.name
            )
            return False
        return True

    def to_dict(self) -> dict[str, Any]:
        return {"port": self.port, "medium": self.medium, "uuid": self.uuid}
