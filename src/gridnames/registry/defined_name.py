"""A single defined name owned by a NamedRangeRegistry."""

from typing import TYPE_CHECKING

from ..core.constants import is_builtin_name
from ..core.exceptions import DetachedNameError
from .store import NameStore

if TYPE_CHECKING:
    from .named_range_registry import NamedRangeRegistry


class DefinedName:
    """A named cell, range or formula in a workbook.

    Use easy-to-understand names such as ``Products`` to refer to hard to
    understand ranges such as ``Sales!C20:C30``. Instances are created by
    :meth:`NamedRangeRegistry.create_name`; every setter goes through the
    registry so the naming and uniqueness rules are enforced against the
    other names in the workbook.

    Example::

        registry = NamedRangeRegistry(SheetList(["Sheet1"]))

        # applies to the entire workbook
        fmla = registry.create_name("FMLA")
        fmla.set_reference("Sheet1!$B$3")

        # applies to Sheet1
        local = registry.create_name("SheetLevelName")
        local.set_comment("This name is scoped to Sheet1")
        local.set_scope(0)
        local.set_reference("Sheet1!$B$3")
    """

    def __init__(self, store: NameStore, registry: "NamedRangeRegistry"):
        self._store = store
        self._registry: "NamedRangeRegistry | None" = registry

    @property
    def store(self) -> NameStore:
        """The record holding this name's persisted fields."""
        return self._store

    @property
    def registry(self) -> "NamedRangeRegistry":
        """The registry this name belongs to.

        Raises:
            DetachedNameError: If the name was removed from its registry
        """
        if self._registry is None:
            raise DetachedNameError(f"Defined name '{self._store.name}' was removed")
        return self._registry

    @property
    def is_attached(self) -> bool:
        return self._registry is not None

    def _detach(self) -> None:
        self._registry = None

    # Read accessors

    @property
    def name(self) -> str | None:
        """Name text that appears in the user interface."""
        return self._store.name

    @property
    def reference(self) -> str | None:
        """Reference this name points to, such as ``Sales!C20:C30``."""
        return self._store.reference

    @property
    def local_sheet_id(self) -> int | None:
        """Sheet index this name is scoped to, None if workbook-global."""
        return self._store.local_sheet_id

    @property
    def comment(self) -> str | None:
        return self._store.comment

    @property
    def is_function_name(self) -> bool:
        """Whether the name refers to a user-defined function."""
        return self._store.function

    @property
    def function_group_id(self) -> int | None:
        return self._store.function_group_id

    @property
    def is_builtin(self) -> bool:
        """Whether this is one of the reserved ``_xlnm.`` names."""
        return is_builtin_name(self._store.name)

    # Mutators delegate to the registry

    def set_name(self, new_name: str) -> None:
        self.registry.set_name(self, new_name)

    def set_reference(self, text: str | None) -> None:
        self.registry.set_reference(self, text)

    def set_scope(self, sheet_index: int | None) -> None:
        self.registry.set_scope(self, sheet_index)

    def set_comment(self, comment: str | None) -> None:
        self.registry.set_comment(self, comment)

    def set_function(self, value: bool) -> None:
        self.registry.set_function(self, value)

    def set_function_group_id(self, group_id: int | None) -> None:
        self.registry.set_function_group_id(self, group_id)

    def is_deleted(self) -> bool:
        """Whether the name points to a cell that no longer exists."""
        return self.registry.is_deleted(self)

    def resolve_sheet_name(self) -> str:
        return self.registry.resolve_sheet_name(self)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, DefinedName):
            return NotImplemented
        return self._store.snapshot() == other._store.snapshot()

    def __hash__(self) -> int:
        return hash(self._store.snapshot())

    def __repr__(self) -> str:
        return (
            f"DefinedName(name={self._store.name!r}, reference={self._store.reference!r}, "
            f"local_sheet_id={self._store.local_sheet_id!r})"
        )
