"""Parsing and formatting of A1-style area references.

Handles references such as ``Sheet1!$B$3``, ``'My Sheet'!A1:C10`` and
``a$1:$c2``. Parsing is strict: anything outside the single cell or
single rectangle grammar raises :class:`MalformedReferenceError`. Use
:meth:`AreaReferenceParser.is_contiguous` first to tell union references
(``A1:B2,D4``) apart from malformed ones.
"""

import re

from ..core.constants import REFERENCE_SYNTAX
from ..core.exceptions import MalformedReferenceError
from ..models.reference import AreaReference, CellCoordinate, SpreadsheetVersion
from ..utils.excel_utils import column_index_from_letter

_CELL_PATTERN = re.compile(
    r"(?P<col_abs>\$?)(?P<col>[A-Za-z]+)(?P<row_abs>\$?)(?P<row>[0-9]+)"
)

# Sheet names that must be quoted when formatted; quotes inside them are doubled
_NEEDS_QUOTING = re.compile(r"[ !',]|^[0-9]")


def _shorten(token: str, limit: int = 12) -> str:
    return token if len(token) <= limit else token[:limit] + "..."


def _split_unquoted(text: str, separator: str, maxsplit: int = -1) -> list[str]:
    """Split on a separator, ignoring occurrences inside single-quoted sheet names.

    A doubled quote inside a quoted section is an escaped quote and does not
    end the section.
    """
    parts = []
    current = []
    in_quotes = False
    i = 0
    while i < len(text):
        char = text[i]
        if char == REFERENCE_SYNTAX.QUOTE:
            if in_quotes and text[i + 1 : i + 2] == REFERENCE_SYNTAX.QUOTE:
                current.append(char * 2)
                i += 2
                continue
            in_quotes = not in_quotes
        elif char == separator and not in_quotes and maxsplit != 0:
            parts.append("".join(current))
            current = []
            maxsplit -= 1
            i += 1
            continue
        current.append(char)
        i += 1
    parts.append("".join(current))
    return parts


class AreaReferenceParser:
    """Parses area reference text into :class:`AreaReference` and back.

    The parser is stateless apart from the spreadsheet version, which fixes
    the largest row and column a reference may name.
    """

    def __init__(self, version: SpreadsheetVersion = SpreadsheetVersion.EXCEL2007):
        """Initialize the parser.

        Args:
            version: Spreadsheet format whose grid limits are enforced
        """
        self.version = version

    def parse(self, text: str) -> AreaReference:
        """Parse reference text into a normalized AreaReference.

        Args:
            text: Reference such as ``Sheet1!$A$1:C10``

        Returns:
            The structured reference, corners normalized to top-left/bottom-right

        Raises:
            MalformedReferenceError: If the text is not a single cell or rectangle,
                or names a row or column outside the grid
        """
        if text is None or not text.strip():
            raise MalformedReferenceError(text or "", "reference is empty")
        stripped = text.strip()

        sheet_name, cell_part = self._split_sheet(stripped, text)
        cell_tokens = _split_unquoted(cell_part, REFERENCE_SYNTAX.RANGE_SEPARATOR)
        if len(cell_tokens) > 2:
            raise MalformedReferenceError(text, "more than one ':' in cell portion")

        first_cell = self._parse_cell(cell_tokens[0], text)
        last_cell = None
        if len(cell_tokens) == 2:
            second = cell_tokens[1]
            if REFERENCE_SYNTAX.SHEET_SEPARATOR in second:
                # Sheet1!A1:Sheet1!B2 repeats the qualifier on the second cell
                second_sheet, second = self._split_sheet(second, text)
                if second_sheet != sheet_name:
                    raise MalformedReferenceError(
                        text, f"range spans sheets '{sheet_name}' and '{second_sheet}'"
                    )
            last_cell = self._parse_cell(second, text)

        return AreaReference(sheet_name=sheet_name, first_cell=first_cell, last_cell=last_cell)

    def is_contiguous(self, text: str) -> bool:
        """Cheap check that the text names at most one rectangular block.

        The cell grammar is not validated, so a True result does not mean
        :meth:`parse` will succeed.
        """
        if text is None:
            return False
        areas = _split_unquoted(text, REFERENCE_SYNTAX.AREA_SEPARATOR)
        if len(areas) != 1:
            return False
        cell_part = _split_unquoted(areas[0], REFERENCE_SYNTAX.SHEET_SEPARATOR, maxsplit=1)[-1]
        return len(_split_unquoted(cell_part, REFERENCE_SYNTAX.RANGE_SEPARATOR)) <= 2

    def format(self, reference: AreaReference) -> str:
        """Format an AreaReference as canonical text.

        Absolute markers are written exactly where the flags are set. The sheet
        name is quoted only when it contains a space, '!', a comma or a quote,
        or starts with a digit.
        """
        text = reference.first_cell.format()
        if reference.last_cell is not None:
            text += REFERENCE_SYNTAX.RANGE_SEPARATOR + reference.last_cell.format()
        if reference.sheet_name is not None:
            text = format_sheet_name(reference.sheet_name) + REFERENCE_SYNTAX.SHEET_SEPARATOR + text
        return text

    def canonicalize(self, text: str) -> str:
        """Parse and re-format reference text."""
        return self.format(self.parse(text))

    def _split_sheet(self, text: str, original: str) -> tuple[str | None, str]:
        parts = _split_unquoted(text, REFERENCE_SYNTAX.SHEET_SEPARATOR, maxsplit=1)
        if len(parts) == 1:
            if text.startswith(REFERENCE_SYNTAX.QUOTE):
                raise MalformedReferenceError(original, "quoted sheet name without '!'")
            return None, text
        return self._unquote_sheet(parts[0], original), parts[1]

    def _unquote_sheet(self, sheet: str, original: str) -> str:
        quote = REFERENCE_SYNTAX.QUOTE
        if sheet.startswith(quote):
            if len(sheet) < 2 or not sheet.endswith(quote):
                raise MalformedReferenceError(original, "unterminated quoted sheet name")
            sheet = sheet[1:-1].replace(quote * 2, quote)
        if not sheet:
            raise MalformedReferenceError(original, "sheet name is empty")
        return sheet

    def _parse_cell(self, token: str, original: str) -> CellCoordinate:
        match = _CELL_PATTERN.fullmatch(token)
        if not match:
            raise MalformedReferenceError(original, f"'{token}' is not a cell reference")

        letters = match.group("col")
        if (
            len(letters) > len(self.version.last_column_name)
            or column_index_from_letter(letters) >= self.version.max_columns
        ):
            raise MalformedReferenceError(
                original,
                f"column '{_shorten(letters.upper())}' is beyond the last column "
                f"'{self.version.last_column_name}'",
            )
        column = column_index_from_letter(letters)

        # Length first: int() rejects digit strings past the interpreter limit
        digits = match.group("row").lstrip("0")
        if len(digits) > len(str(self.version.max_rows)):
            raise MalformedReferenceError(
                original,
                f"row {_shorten(digits)} is beyond the last row {self.version.max_rows}",
            )

        row = int(digits) if digits else 0
        if row == 0:
            raise MalformedReferenceError(original, "row numbers start at 1")
        if row > self.version.max_rows:
            raise MalformedReferenceError(
                original, f"row {row} is beyond the last row {self.version.max_rows}"
            )

        return CellCoordinate(
            row=row - 1,
            column=column,
            row_absolute=bool(match.group("row_abs")),
            column_absolute=bool(match.group("col_abs")),
        )


def format_sheet_name(sheet_name: str) -> str:
    """Quote a sheet name for use in a reference, if it needs quoting."""
    if _NEEDS_QUOTING.search(sheet_name):
        quote = REFERENCE_SYNTAX.QUOTE
        return quote + sheet_name.replace(quote, quote * 2) + quote
    return sheet_name


_default_parser = AreaReferenceParser()


def parse_area_reference(text: str) -> AreaReference:
    """Parse reference text with the default (Excel 2007) grid limits."""
    return _default_parser.parse(text)


def is_contiguous(text: str) -> bool:
    """Check whether reference text names at most one rectangular block."""
    return _default_parser.is_contiguous(text)


def format_area_reference(reference: AreaReference) -> str:
    """Format an AreaReference as canonical text."""
    return _default_parser.format(reference)
