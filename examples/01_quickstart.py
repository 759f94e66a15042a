#!/usr/bin/env python3
"""Example: Quickstart — vboxmodel

Load a VM from a saved machine-readable dump and walk its storage tree.

Usage:
    VBoxManage showvminfo "My VM" --machinereadable > vm.txt
    python examples/01_quickstart.py vm.txt

Requirements:
    pip install vboxmodel
"""
from __future__ import annotations

import sys
from pathlib import Path

import vboxmodel


def main() -> None:
    print(f"vboxmodel version: {vboxmodel.__version__}")

    vm = vboxmodel.load_dump(Path(sys.argv[1]).read_text(encoding="utf-8"))
    print(f"VM '{vm.name}' ({vm.os_type}), {vm.memory} MB, state={vm.state}")

    for controller in vm.storage_controllers:
        print(f"  {controller.name} [{controller.type}]")
        for device in controller.devices:
            print(f"    port {device.port}: {device.medium}")


if __name__ == "__main__":
    main()
