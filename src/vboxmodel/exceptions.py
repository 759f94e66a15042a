"""Exception types raised by vboxmodel.

Every error carries the names involved as attributes so callers (and
the CLI) can report them without parsing the message text.
"""
from __future__ import annotations


class VirtualBoxError(Exception):
    """Base class for all vboxmodel errors."""


class NonSettableRelationshipError(VirtualBoxError, AttributeError):
    """Raised when assigning to a relationship whose type has no set hook."""

    def __init__(self, name: str, related_class: type) -> None:
        self.relationship_name = name
        self.related_class = related_class
        super().__init__(
            f"Relationship {name!r} cannot be set: "
            f"{related_class.__qualname__} does not define set_relationship()."
        )


class RelationshipNotFoundError(VirtualBoxError, KeyError):
    """Raised when a relationship name is not declared on a model."""

    def __init__(self, name: str, model_class: type) -> None:
        self.relationship_name = name
        self.model_class = model_class
        super().__init__(
            f"Relationship {name!r} is not declared on {model_class.__qualname__}."
        )

    def __str__(self) -> str:
        return str(self.args[0])


class CommandFailedError(VirtualBoxError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: str, returncode: int, output: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.output = output
        detail = f": {output.strip()}" if output.strip() else ""
        super().__init__(f"Command {command!r} exited with status {returncode}{detail}")
