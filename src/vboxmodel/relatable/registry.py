"""Relationship declarations and their per-type registry.

Each host type keeps only its *own* declarations. The effective view a
type sees is computed by walking its MRO from the most basic ancestor
down, so a subtype's declaration for a name replaces the inherited one
while every other inherited entry is kept as-is.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

logger = logging.getLogger(__name__)

# Attribute holding a type's own declarations. Looked up in ``vars(cls)``
# only, never through inheritance.
OWN_DECLARATIONS_ATTR = "__relationship_declarations__"


@dataclass(frozen=True)
class RelationshipDeclaration:
    """A single named association from a host type to another type.

    Parameters
    ----------
    name:
        Attribute name of the relationship on the host type.
    klass:
        The associated type whose hooks receive lifecycle events.
    options:
        Open, read-only mapping of extra declaration options.
    """

    name: str
    klass: type
    options: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        if not isinstance(self.options, MappingProxyType):
            object.__setattr__(self, "options", MappingProxyType(dict(self.options)))


def own_declarations(cls: type) -> dict[str, RelationshipDeclaration]:
    """Return the declarations made directly on ``cls``, creating the store if needed."""
    declarations = vars(cls).get(OWN_DECLARATIONS_ATTR)
    if declarations is None:
        declarations = {}
        setattr(cls, OWN_DECLARATIONS_ATTR, declarations)
    return declarations


def register(cls: type, declaration: RelationshipDeclaration) -> None:
    """Record ``declaration`` on ``cls``, replacing any earlier one with the same name."""
    declarations = own_declarations(cls)
    if declaration.name in declarations:
        logger.debug(
            "Overwriting relationship %r on %s", declaration.name, cls.__qualname__
        )
    declarations[declaration.name] = declaration
    logger.debug(
        "Declared relationship %r -> %s on %s",
        declaration.name,
        declaration.klass.__qualname__,
        cls.__qualname__,
    )


def effective_declarations(cls: type) -> Mapping[str, RelationshipDeclaration]:
    """Return every declaration visible to ``cls``, own entries winning.

    Returns
    -------
    Mapping[str, RelationshipDeclaration]
        A read-only mapping keyed by relationship name.
    """
    merged: dict[str, RelationshipDeclaration] = {}
    for klass in reversed(cls.__mro__):
        merged.update(vars(klass).get(OWN_DECLARATIONS_ATTR, {}))
    return MappingProxyType(merged)
