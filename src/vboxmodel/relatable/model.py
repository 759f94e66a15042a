"""The ``Relatable`` mixin: declared relationships plus lifecycle dispatch.

A model declares relationships to other types; it never needs to know
how those types build, store or persist themselves. Instead each
lifecycle event is handed to the associated type's optional class-level
hook (see :mod:`vboxmodel.relatable.hooks`).

Example
-------
::

    class Relatee:
        @classmethod
        def populate_relationship(cls, caller, data):
            return "FOO"

    class Model(Relatable):
        foos = relationship(Relatee)

    model = Model()
    model.populate_relationships({})
    model.foos
    'FOO'
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from vboxmodel.exceptions import NonSettableRelationshipError, RelationshipNotFoundError
from vboxmodel.relatable.accessor import RelationshipAccessor
from vboxmodel.relatable.hooks import Hook, HookAndOperation, get_hook
from vboxmodel.relatable.registry import RelationshipDeclaration, effective_declarations

logger = logging.getLogger(__name__)

_STORE_ATTR = "_relationship_data"


class Relatable:
    """Mixin giving a model declared relationships and lifecycle dispatch.

    A model may also be the associated type of another model's
    relationship. Hooks it defines as classmethods or staticmethods under
    a name that is also one of its own instance operations (currently
    ``destroy_relationship``) are wrapped so that class access reaches
    the hook and instance access reaches the operation.
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for hook in Hook:
            own = vars(cls).get(hook.value)
            operation = vars(Relatable).get(hook.value)
            if operation is not None and isinstance(own, (classmethod, staticmethod)):
                setattr(cls, hook.value, HookAndOperation(own, operation))

    # ------------------------------------------------------------------
    # Declaration
    # ------------------------------------------------------------------

    @classmethod
    def declare_relationship(cls, name: str, klass: type, **options: Any) -> None:
        """Declare (or redeclare) relationship ``name`` on this class.

        Equivalent to ``name = relationship(klass, **options)`` in the
        class body. The accessor is installed on ``cls`` only; parent
        classes are unaffected.
        """
        accessor = RelationshipAccessor(klass, **options)
        setattr(cls, name, accessor)
        accessor.__set_name__(cls, name)

    @classmethod
    def relationships(cls) -> Mapping[str, RelationshipDeclaration]:
        """Return all relationships visible to this class, inherited ones included."""
        return effective_declarations(cls)

    @classmethod
    def has_relationship(cls, name: str) -> bool:
        """Return True if ``name`` is a declared relationship."""
        return name in cls.relationships()

    # ------------------------------------------------------------------
    # Per-instance store
    # ------------------------------------------------------------------

    @property
    def _relationship_store(self) -> dict[str, Any]:
        store = self.__dict__.get(_STORE_ATTR)
        if store is None:
            store = {}
            self.__dict__[_STORE_ATTR] = store
        return store

    def read_relationship(self, name: str) -> Any:
        """Return the stored value for ``name``, or ``None`` if unset."""
        return self._relationship_store.get(name)

    def write_relationship(self, name: str, value: Any) -> Any:
        """Assign ``value`` to relationship ``name`` through its set hook.

        The associated type's ``set_relationship(self, old, value)`` is
        called and *its return value* is stored and returned.

        Raises
        ------
        RelationshipNotFoundError
            If ``name`` is not declared.
        NonSettableRelationshipError
            If the associated type has no ``set_relationship`` hook. The
            stored value is left unchanged.
        """
        declaration = self._declaration(name)
        hook = get_hook(declaration.klass, Hook.SET)
        if hook is None:
            raise NonSettableRelationshipError(name, declaration.klass)
        stored = hook(self, self.read_relationship(name), value)
        self._relationship_store[name] = stored
        return stored

    # ------------------------------------------------------------------
    # Lifecycle dispatch
    # ------------------------------------------------------------------

    def populate_relationships(self, raw_data: Any, *extra: Any) -> None:
        """Materialize every relationship from ``raw_data``.

        Relationships whose type has no ``populate_relationship`` hook
        are skipped and keep their current value.
        """
        for name, declaration in self.relationships().items():
            hook = get_hook(declaration.klass, Hook.POPULATE)
            if hook is None:
                logger.debug("%s.%s: no populate hook; skipping", type(self).__qualname__, name)
                continue
            self._relationship_store[name] = hook(self, raw_data, *extra)

    def save_relationships(self, *extra: Any) -> None:
        """Notify every related type that supports it that this model is saving."""
        for name, declaration in self.relationships().items():
            self._notify(name, declaration, Hook.SAVE, extra)

    def destroy_relationship(self, name: str, *extra: Any) -> None:
        """Notify the type behind ``name`` that the relationship is being destroyed.

        Raises
        ------
        RelationshipNotFoundError
            If ``name`` is not declared.
        """
        self._notify(name, self._declaration(name), Hook.DESTROY, extra)

    def destroy_relationships(self, *extra: Any) -> None:
        """Run ``destroy_relationship`` dispatch for every declared relationship."""
        for name, declaration in self.relationships().items():
            self._notify(name, declaration, Hook.DESTROY, extra)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _declaration(self, name: str) -> RelationshipDeclaration:
        try:
            return self.relationships()[name]
        except KeyError:
            raise RelationshipNotFoundError(name, type(self)) from None

    def _notify(
        self,
        name: str,
        declaration: RelationshipDeclaration,
        hook_kind: Hook,
        extra: tuple[Any, ...],
    ) -> None:
        hook = get_hook(declaration.klass, hook_kind)
        if hook is None:
            return
        logger.debug(
            "%s.%s: dispatching %s to %s",
            type(self).__qualname__,
            name,
            hook_kind.value,
            declaration.klass.__qualname__,
        )
        hook(self, self.read_relationship(name), *extra)
