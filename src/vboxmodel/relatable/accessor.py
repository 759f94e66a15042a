"""Descriptor exposing a declared relationship as an instance attribute.

Reading returns the instance's stored value (``None`` until populated or
set). Assigning goes through ``Relatable.write_relationship`` so the
associated type's ``set_relationship`` hook decides what is stored.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, overload

from vboxmodel.relatable.registry import RelationshipDeclaration, register

if TYPE_CHECKING:
    from vboxmodel.relatable.model import Relatable


class RelationshipAccessor:
    """Reader/writer pair for one relationship.

    Parameters
    ----------
    klass:
        The associated type.
    options:
        Extra declaration options, stored on the declaration untouched.
    """

    def __init__(self, klass: type, **options: Any) -> None:
        self.klass = klass
        self.options = options
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        register(owner, RelationshipDeclaration(name, self.klass, self.options))

    @overload
    def __get__(self, instance: None, owner: type) -> "RelationshipAccessor": ...

    @overload
    def __get__(self, instance: "Relatable", owner: type) -> Any: ...

    def __get__(self, instance: "Relatable | None", owner: type) -> Any:
        if instance is None:
            return self
        return instance.read_relationship(self._require_name())

    def __set__(self, instance: "Relatable", value: Any) -> None:
        instance.write_relationship(self._require_name(), value)

    def _require_name(self) -> str:
        if self.name is None:
            raise TypeError(
                "RelationshipAccessor was never bound to a class attribute; "
                "declare it in a class body or via declare_relationship()."
            )
        return self.name

    def __repr__(self) -> str:
        return f"RelationshipAccessor(name={self.name!r}, klass={self.klass.__qualname__})"


def relationship(klass: type, **options: Any) -> Any:
    """Declare a relationship in a class body.

    Example
    -------
    ::

        class StorageController(Relatable):
            devices = relationship(AttachedDevice)
    """
    return RelationshipAccessor(klass, **options)
