"""Backing store for defined names.

The registry never holds a defined name's state itself: it reads and writes
through a :class:`NameStore`. A workbook implementation can back names with
its own XML or binary records by providing an object with these attributes.
"""

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


@runtime_checkable
class NameStore(Protocol):
    """Bean-style record holding the persisted fields of one defined name."""

    name: str | None
    reference: str | None
    comment: str | None
    local_sheet_id: int | None
    function: bool
    function_group_id: int | None

    def snapshot(self) -> str:
        """Complete serialized representation, used for equality and hashing."""
        ...


class NameRecord(BaseModel):
    """In-memory NameStore implementation."""

    model_config = ConfigDict(validate_assignment=True, strict=True)

    name: str | None = Field(None, description="Name text as shown to the user")
    reference: str | None = Field(None, description="Canonical or raw reference text")
    comment: str | None = Field(None, description="User comment")
    local_sheet_id: int | None = Field(
        None, ge=0, description="Sheet index the name is scoped to, None for workbook-global"
    )
    function: bool = Field(False, description="Name refers to a user-defined function")
    function_group_id: int | None = Field(
        None, ge=0, description="Function category if the name refers to a function"
    )

    def snapshot(self) -> str:
        return self.model_dump_json()
