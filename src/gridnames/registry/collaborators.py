"""Interfaces the registry consumes from the surrounding workbook."""

from collections.abc import Callable, Sequence
from typing import Protocol, runtime_checkable

# Receives the offending reference text and the parser's failure reason
ReferenceWarningSink = Callable[[str, str], None]


@runtime_checkable
class SheetLookup(Protocol):
    """Resolves a sheet index to its name."""

    def sheet_name_for_index(self, index: int) -> str: ...


class SheetList:
    """SheetLookup over an ordered list of sheet names."""

    def __init__(self, sheet_names: Sequence[str]):
        self.sheet_names = list(sheet_names)

    def sheet_name_for_index(self, index: int) -> str:
        if index < 0 or index >= len(self.sheet_names):
            raise IndexError(
                f"Sheet index {index} is out of range (0..{len(self.sheet_names) - 1})"
            )
        return self.sheet_names[index]

    def __len__(self) -> int:
        return len(self.sheet_names)
