"""
Tests for SetupContext.

Focus Areas:
1. Name validation at construction
2. Frozen identity fields vs. mutable declared-parent fields
"""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from setuptree import SetupContext
from setuptree.exceptions import InvalidArgumentError, SetupTreeError


class TestContextConstruction:
    """Test construction and name validation."""

    def test_positional_id_and_name(self):
        context_id = uuid4()
        context = SetupContext(context_id, "Chassis")

        assert context.id == context_id
        assert context.name == "Chassis"
        assert context.parent_context_id is None
        assert context.parent_ordinal == 0

    def test_optional_fields_as_keywords(self):
        parent_id = uuid4()
        context = SetupContext(
            uuid4(), "xSpring", parent_context_id=parent_id, parent_ordinal=3
        )

        assert context.parent_context_id == parent_id
        assert context.parent_ordinal == 3

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_blank_name_rejected(self, name):
        with pytest.raises(InvalidArgumentError) as exc_info:
            SetupContext(uuid4(), name)

        assert exc_info.value.argument == "name"
        assert "name" in str(exc_info.value)

    def test_none_name_rejected(self):
        with pytest.raises(InvalidArgumentError):
            SetupContext(uuid4(), None)

    def test_invalid_argument_is_value_error(self):
        """Callers catching ValueError also catch blank names."""
        with pytest.raises(ValueError):
            SetupContext(uuid4(), "")
        with pytest.raises(SetupTreeError):
            SetupContext(uuid4(), "")

    def test_name_with_inner_whitespace_kept(self):
        context = SetupContext(uuid4(), "Ratio 1")
        assert context.name == "Ratio 1"


class TestContextMutability:
    """Test which fields may change after construction."""

    def test_identity_fields_are_frozen(self):
        context = SetupContext(uuid4(), "Gearbox")

        with pytest.raises(ValidationError):
            context.name = "Other"
        with pytest.raises(ValidationError):
            context.id = uuid4()

    def test_declared_parent_is_mutable(self):
        context = SetupContext(uuid4(), "Gearbox")
        parent_id = uuid4()

        context.parent_context_id = parent_id
        context.parent_ordinal = 2

        assert context.parent_context_id == parent_id
        assert context.parent_ordinal == 2

        context.parent_context_id = None
        assert context.parent_context_id is None

    @pytest.mark.parametrize("name", ["", "  "])
    def test_copy_with_blank_name_rejected(self, name):
        context = SetupContext(uuid4(), "Gearbox")

        with pytest.raises(InvalidArgumentError):
            context.model_copy(update={"name": name})

    def test_copy_with_declared_parent_update(self):
        context = SetupContext(uuid4(), "Gearbox")
        parent_id = uuid4()

        copy = context.model_copy(update={"parent_context_id": parent_id})

        assert copy.name == "Gearbox"
        assert copy.id == context.id
        assert copy.parent_context_id == parent_id
        assert context.parent_context_id is None

    def test_model_validate_rejects_blank_name(self):
        with pytest.raises(ValueError) as exc_info:
            SetupContext.model_validate({"id": uuid4(), "name": "   "})
        assert "name" in str(exc_info.value)

    def test_model_validate_accepts_valid_data(self):
        context_id = uuid4()
        context = SetupContext.model_validate({"id": context_id, "name": "Chassis"})
        assert context.id == context_id
        assert context.name == "Chassis"

    def test_str_shows_name_and_id(self):
        context_id = uuid4()
        context = SetupContext(context_id, "Driver_")
        assert str(context) == f"Driver_ ({context_id})"
