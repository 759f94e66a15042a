"""Unit tests for vboxmodel.models.storage_controller."""
from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from vboxmodel.exceptions import RelationshipNotFoundError
from vboxmodel.models import AttachedDevice, StorageController
from vboxmodel.relatable.hooks import Hook, get_hook


@pytest.fixture()
def vm() -> SimpleNamespace:
    return SimpleNamespace(name="Ubuntu Server")


class TestPopulateRelationship:
    def test_builds_controllers_in_order(self, vm: SimpleNamespace, dump_data: dict[str, str]) -> None:
        controllers = StorageController.populate_relationship(vm, dump_data)
        assert [c.name for c in controllers] == ["IDE Controller", "SATA Controller"]

    def test_reads_controller_attributes(self, vm: SimpleNamespace, dump_data: dict[str, str]) -> None:
        ide = StorageController.populate_relationship(vm, dump_data)[0]
        assert ide.type == "PIIX4"
        assert ide.max_ports == 2
        assert ide.parent is vm

    def test_populates_devices(self, vm: SimpleNamespace, dump_data: dict[str, str]) -> None:
        ide, sata = StorageController.populate_relationship(vm, dump_data)
        assert [d.medium for d in ide.devices] == ["none", "/vms/ubuntu/cdrom.iso"]
        assert sata.devices[0].uuid == "5b1e2a44-9c0d-4f0e-8a63-3f2d5b8a7c10"
        assert all(isinstance(d, AttachedDevice) for d in sata.devices)

    def test_empty_or_missing_data(self, vm: SimpleNamespace) -> None:
        assert StorageController.populate_relationship(vm, None) == []
        assert StorageController.populate_relationship(vm, {}) == []

    def test_missing_max_ports(self, vm: SimpleNamespace) -> None:
        controller = StorageController.populate_relationship(vm, {"storagecontrollername0": "x"})[0]
        assert controller.max_ports is None
        assert controller.devices == []


class TestRelationships:
    def test_declares_devices(self) -> None:
        assert StorageController.relationships()["devices"].klass is AttachedDevice

    def test_devices_not_settable(self, vm: SimpleNamespace) -> None:
        from vboxmodel.exceptions import NonSettableRelationshipError

        controller = StorageController(parent=vm, name="IDE Controller")
        with pytest.raises(NonSettableRelationshipError):
            controller.devices = []


class TestLifecycleHooks:
    def test_save_relationship_saves_each_controller(self, vm: SimpleNamespace) -> None:
        controllers = [MagicMock(), MagicMock()]
        StorageController.save_relationship(vm, controllers, "X")
        for controller in controllers:
            controller.save.assert_called_once_with("X")

    def test_destroy_relationship_destroys_each_controller(self, vm: SimpleNamespace) -> None:
        controllers = [MagicMock()]
        StorageController.destroy_relationship(vm, controllers, True)
        controllers[0].destroy.assert_called_once_with(True)

    def test_destroy_forwards_to_devices(self, vm: SimpleNamespace, dump_data: dict[str, str]) -> None:
        ide = StorageController.populate_relationship(vm, dump_data)[0]
        with patch.object(AttachedDevice, "destroy_relationship") as destroy:
            ide.destroy(True)
        destroy.assert_called_once_with(ide, ide.devices, True)

    def test_save_without_device_hook_is_noop(self, vm: SimpleNamespace, dump_data: dict[str, str]) -> None:
        ide = StorageController.populate_relationship(vm, dump_data)[0]
        ide.save()


class TestDestroyRelationshipBothWays:
    def test_class_access_is_the_hook(self) -> None:
        assert get_hook(StorageController, Hook.DESTROY) is not None

    def test_instance_destroys_single_relationship(
        self, vm: SimpleNamespace, dump_data: dict[str, str]
    ) -> None:
        ide = StorageController.populate_relationship(vm, dump_data)[0]
        with patch.object(AttachedDevice, "destroy_relationship") as destroy:
            ide.destroy_relationship("devices", True)
        destroy.assert_called_once_with(ide, ide.devices, True)

    def test_instance_rejects_undeclared_name(self, vm: SimpleNamespace) -> None:
        controller = StorageController(parent=vm, name="IDE Controller")
        with pytest.raises(RelationshipNotFoundError):
            controller.destroy_relationship("disks")

    def test_class_hook_still_reaches_controllers(self, vm: SimpleNamespace) -> None:
        controllers = [MagicMock(), MagicMock()]
        StorageController.destroy_relationship(vm, controllers, True)
        for controller in controllers:
            controller.destroy.assert_called_once_with(True)


class TestToDict:
    def test_includes_devices(self, vm: SimpleNamespace, dump_data: dict[str, str]) -> None:
        sata = StorageController.populate_relationship(vm, dump_data)[1]
        assert sata.to_dict() == {
            "name": "SATA Controller",
            "type": "IntelAhci",
            "max_ports": 30,
            "devices": [
                {
                    "port": 0,
                    "medium": "/vms/ubuntu/ubuntu.vdi",
                    "uuid": "5b1e2a44-9c0d-4f0e-8a63-3f2d5b8a7c10",
                }
            ],
        }
