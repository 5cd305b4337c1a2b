"""
Setup context record for SetupTree.

A context is the "business" description of a node: who it is (id, name) and
where it declares it belongs (parent context id, ordinal among same-named
siblings). It knows nothing about the live node graph.
"""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from setuptree.exceptions import InvalidArgumentError


def _require_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError("name")
    return name


class SetupContext(BaseModel):
    """
    Identity record wrapped by exactly one SetupNode.

    `id` and `name` are frozen once constructed. `parent_context_id` and
    `parent_ordinal` stay mutable and are deliberately not validated: they
    declare the desired tree position and may drift from the node graph until
    the registry reconciles the two.

    A blank name raises InvalidArgumentError from the constructor and from
    `model_copy`. Through `model_validate` it is rejected as a ValueError,
    which pydantic may wrap in its ValidationError.

    Params:
        id: Globally unique context identifier
        name: Display name, must not be empty or whitespace
        parent_context_id: Declared parent context, None for a root
        parent_ordinal: Disambiguates same-named siblings (repeated elements)
    """

    id: UUID = Field(frozen=True)
    name: str = Field(frozen=True)
    parent_context_id: UUID | None = None
    parent_ordinal: int = 0

    def __init__(self, id: UUID, name: str, **data: Any) -> None:  # noqa: A002
        super().__init__(id=id, name=_require_name(name), **data)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, name: str) -> str:
        return _require_name(name)

    def model_copy(
        self, *, update: dict[str, Any] | None = None, deep: bool = False
    ) -> "SetupContext":
        # model_copy skips validation, so the name is checked here
        if update and "name" in update:
            _require_name(update["name"])
        return super().model_copy(update=update, deep=deep)

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"
