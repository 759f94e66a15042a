#!/usr/bin/env python3
"""Example: Custom relationships — vboxmodel

Declare a relationship to your own type and take part in only the
lifecycle phases you care about.

Usage:
    python examples/02_custom_relationships.py
"""
from __future__ import annotations

from vboxmodel import NonSettableRelationshipError, Relatable, relationship


class NetworkAdapter:
    """Populated from ``nic<N>`` keys; renaming is allowed, deletion is ignored."""

    @classmethod
    def populate_relationship(cls, caller, data):
        return [value for key, value in sorted(data.items()) if key.startswith("nic")]

    @classmethod
    def set_relationship(cls, caller, old_value, new_value):
        # Keep only adapter types VirtualBox knows about.
        return [nic for nic in new_value if nic in {"nat", "bridged", "intnet", "none"}]


class SharedFolder:
    """Read-only: no set hook."""

    @classmethod
    def populate_relationship(cls, caller, data):
        return data.get("sharedfoldernamemachinemapping1")


class Machine(Relatable):
    adapters = relationship(NetworkAdapter)
    shared_folder = relationship(SharedFolder)


def main() -> None:
    machine = Machine()
    machine.populate_relationships(
        {"nic1": "nat", "nic2": "none", "sharedfoldernamemachinemapping1": "home"}
    )
    print(f"adapters={machine.adapters} shared_folder={machine.shared_folder}")

    machine.adapters = ["bridged", "bogus"]
    print(f"after set: adapters={machine.adapters}")

    try:
        machine.shared_folder = "elsewhere"
    except NonSettableRelationshipError as exc:
        print(f"refused: {exc}")


if __name__ == "__main__":
    main()
