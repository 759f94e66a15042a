"""Concrete VirtualBox models built on :class:`vboxmodel.relatable.Relatable`."""
from __future__ import annotations

from vboxmodel.models.attached_device import AttachedDevice
from vboxmodel.models.storage_controller import StorageController
from vboxmodel.models.virtual_machine import VirtualMachine

__all__ = ["AttachedDevice", "StorageController", "VirtualMachine"]
