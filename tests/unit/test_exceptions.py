"""Unit tests for vboxmodel.exceptions."""
from __future__ import annotations

import pytest

from vboxmodel.exceptions import (
    CommandFailedError,
    NonSettableRelationshipError,
    RelationshipNotFoundError,
    VirtualBoxError,
)


class Related:
    pass


class TestNonSettableRelationshipError:
    def test_is_virtualbox_error(self) -> None:
        with pytest.raises(VirtualBoxError):
            raise NonSettableRelationshipError("foos", Related)

    def test_is_attribute_error(self) -> None:
        with pytest.raises(AttributeError):
            raise NonSettableRelationshipError("foos", Related)

    def test_message_names_relationship_and_class(self) -> None:
        message = str(NonSettableRelationshipError("foos", Related))
        assert "foos" in message
        assert "Related" in message


class TestRelationshipNotFoundError:
    def test_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            raise RelationshipNotFoundError("bazs", Related)

    def test_has_attributes(self) -> None:
        error = RelationshipNotFoundError("bazs", Related)
        assert error.relationship_name == "bazs"
        assert error.model_class is Related

    def test_str_is_plain_message(self) -> None:
        assert str(RelationshipNotFoundError("bazs", Related)).startswith("Relationship 'bazs'")


class TestCommandFailedError:
    def test_has_attributes(self) -> None:
        error = CommandFailedError("VBoxManage list vms", 1, "boom\n")
        assert error.command == "VBoxManage list vms"
        assert error.returncode == 1
        assert error.output == "boom\n"

    def test_message_includes_output(self) -> None:
        assert "boom" in str(CommandFailedError("cmd", 2, "boom"))

    def test_message_without_output(self) -> None:
        assert str(CommandFailedError("cmd", 2)).endswith("status 2")
