"""Lifecycle hooks an associated type may implement.

A type on the other end of a relationship participates in a lifecycle
phase by defining a class-level callable under the hook's name. Every
hook except ``set_relationship`` is optional, and even that one is only
needed when the relationship is assigned to directly.

The presence check is a static attribute lookup: a missing hook is a
normal outcome, never an exception.
"""
from __future__ import annotations

import inspect
from collections.abc import Callable
from enum import Enum
from typing import Any, Protocol, runtime_checkable


class Hook(Enum):
    """The four lifecycle capabilities, valued by the callable's name.

    POPULATE
        ``populate_relationship(caller, raw_data, *extra) -> value``;
        the return value becomes the relationship's stored value.
    SAVE
        ``save_relationship(caller, current_value, *extra)``; notification
        only, the return value is ignored.
    DESTROY
        ``destroy_relationship(caller, current_value, *extra)``;
        notification only, the return value is ignored.
    SET
        ``set_relationship(caller, old_value, new_value) -> value``; the
        return value, not ``new_value``, becomes the stored value.
    """

    POPULATE = "populate_relationship"
    SAVE = "save_relationship"
    DESTROY = "destroy_relationship"
    SET = "set_relationship"


@runtime_checkable
class PopulatesRelationship(Protocol):
    def populate_relationship(self, caller: Any, raw_data: Any, *extra: Any) -> Any: ...


@runtime_checkable
class SavesRelationship(Protocol):
    def save_relationship(self, caller: Any, current_value: Any, *extra: Any) -> None: ...


@runtime_checkable
class DestroysRelationship(Protocol):
    def destroy_relationship(self, caller: Any, current_value: Any, *extra: Any) -> None: ...


@runtime_checkable
class SetsRelationship(Protocol):
    def set_relationship(self, caller: Any, old_value: Any, new_value: Any) -> Any: ...


class HookAndOperation:
    """A class-level hook and an instance-level operation sharing one name.

    ``Relatable`` hosts expose ``destroy_relationship(name, *extra)`` on
    instances while the same class may implement the
    ``destroy_relationship(caller, value, *extra)`` hook for its own
    parents. Class access yields the hook, instance access the operation.
    """

    def __init__(self, hook: classmethod | staticmethod, operation: Callable[..., Any]) -> None:
        self.hook = hook
        self.operation = operation

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self.hook.__get__(None, owner)
        return self.operation.__get__(instance, owner)


def get_hook(klass: type, hook: Hook) -> Callable[..., Any] | None:
    """Return ``klass``'s callable for ``hook``, or ``None`` if it has none.

    The attribute is resolved statically, so only genuine class-level
    hooks count: ``classmethod``/``staticmethod`` objects and other
    non-function callables. A plain function found first in the MRO is
    an instance method, such as ``Relatable``'s own dispatch operations,
    and is not a hook.

    Parameters
    ----------
    klass:
        The associated type of a relationship.
    hook:
        The lifecycle capability to look up.

    Returns
    -------
    Callable | None
        The class-bound callable when present.
    """
    candidate = inspect.getattr_static(klass, hook.value, None)
    if isinstance(candidate, HookAndOperation):
        return candidate.hook.__get__(None, klass)
    if isinstance(candidate, (classmethod, staticmethod)):
        return candidate.__get__(None, klass)
    if candidate is None or inspect.isfunction(candidate) or not callable(candidate):
        return None
    return candidate


def supports(klass: type, hook: Hook) -> bool:
    """Return True if ``klass`` implements ``hook``."""
    return get_hook(klass, hook) is not None
