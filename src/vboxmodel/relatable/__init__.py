"""Declarative relationships between models.

Exports the ``Relatable`` mixin, the ``relationship`` declaration helper
and the hook protocol.
"""
from __future__ import annotations

from vboxmodel.relatable.accessor import RelationshipAccessor, relationship
from vboxmodel.relatable.hooks import Hook, get_hook, supports
from vboxmodel.relatable.model import Relatable
from vboxmodel.relatable.registry import RelationshipDeclaration

__all__ = [
    "Hook",
    "Relatable",
    "RelationshipAccessor",
    "RelationshipDeclaration",
    "get_hook",
    "relationship",
    "supports",
]
