"""Registry of the defined names of one workbook."""

from collections.abc import Callable, Iterator

from ..config import Config
from ..core.constants import DELETED_REFERENCE_MARKER
from ..core.exceptions import (
    DetachedNameError,
    DuplicateNameError,
    InvalidNameError,
    InvalidScopeError,
    MalformedReferenceError,
    UnresolvableSheetError,
)
from ..references.area_parser import AreaReferenceParser
from ..utils.logging_context import NameContext, OperationContext, get_contextual_logger
from .collaborators import ReferenceWarningSink, SheetLookup
from .defined_name import DefinedName
from .store import NameRecord, NameStore

logger = get_contextual_logger(__name__)


def validate_name(name: str) -> None:
    """Check the name text rules.

    Names must begin with a letter or underscore and must not contain spaces.

    Raises:
        InvalidNameError: If the name breaks either rule or is empty
    """
    if not name:
        raise InvalidNameError(name)
    first = name[0]
    if not (first == "_" or first.isalpha()) or " " in name:
        raise InvalidNameError(name)


class NamedRangeRegistry:
    """Owns the defined names of a workbook and enforces their invariants.

    No two names may be equal ignoring case, whatever their scope. Reference
    text is canonicalized through an :class:`AreaReferenceParser`; text the
    parser cannot handle is kept verbatim so documents written by other
    applications survive a round trip.

    The registry is not thread-safe. The uniqueness check and the write that
    follows it are not atomic, so callers sharing a registry across threads
    must serialize every mutation behind their own lock.
    """

    def __init__(
        self,
        sheet_lookup: SheetLookup | None = None,
        *,
        config: Config | None = None,
        parser: AreaReferenceParser | None = None,
        store_factory: Callable[[], NameStore] = NameRecord,
        on_reference_warning: ReferenceWarningSink | None = None,
    ):
        """Initialize the registry.

        Args:
            sheet_lookup: Resolves sheet indices for locally scoped names
            config: Settings; defaults to ``Config()``
            parser: Reference parser; defaults to one built from the config
            store_factory: Creates the backing record for each new name
            on_reference_warning: Called with (text, reason) whenever a reference
                cannot be parsed and is stored raw
        """
        self.config = config or Config()
        self.parser = parser or self.config.create_parser()
        self.sheet_lookup = sheet_lookup
        self.store_factory = store_factory
        self.on_reference_warning = on_reference_warning
        self._names: list[DefinedName] = []

    # Collection

    def create_name(
        self,
        name: str,
        reference: str | None = None,
        *,
        sheet_index: int | None = None,
        comment: str | None = None,
    ) -> DefinedName:
        """Create and register a new defined name.

        All checks run before anything is stored, so a failure leaves the
        registry unchanged.

        Raises:
            InvalidNameError: If the name text is invalid
            DuplicateNameError: If another name is equal ignoring case
            InvalidScopeError: If sheet_index is negative
        """
        validate_name(name)
        self._check_unique(name, exclude=None)
        if sheet_index is not None and sheet_index < 0:
            raise InvalidScopeError(sheet_index)

        entry = DefinedName(self.store_factory(), self)
        entry.store.name = name
        self._names.append(entry)
        logger.debug("Created defined name %s", name)

        if reference is not None:
            self.set_reference(entry, reference)
        if sheet_index is not None:
            self.set_scope(entry, sheet_index)
        if comment is not None:
            self.set_comment(entry, comment)
        return entry

    def get_name(self, name: str) -> DefinedName | None:
        """Find a defined name ignoring case."""
        folded = name.casefold()
        for entry in self._names:
            if entry.name is not None and entry.name.casefold() == folded:
                return entry
        return None

    def name_at(self, index: int) -> DefinedName:
        return self._names[index]

    def remove_name(self, target: str | DefinedName) -> None:
        """Remove a defined name by text or by entry.

        The removed entry is detached; mutating it afterwards raises
        DetachedNameError.

        Raises:
            KeyError: If no such name is registered
        """
        if isinstance(target, DefinedName):
            entry = target if self._owns(target) else None
        else:
            entry = self.get_name(target)
        if entry is None:
            raise KeyError(f"No defined name {target!r} in this workbook")

        self._names = [e for e in self._names if e is not entry]
        entry._detach()
        logger.debug("Removed defined name %s", entry.name)

    @property
    def names(self) -> tuple[DefinedName, ...]:
        return tuple(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[DefinedName]:
        return iter(tuple(self._names))

    def __contains__(self, item: object) -> bool:
        if isinstance(item, DefinedName):
            return self._owns(item)
        if isinstance(item, str):
            return self.get_name(item) is not None
        return False

    # Entry operations

    def set_name(self, entry: DefinedName, new_name: str) -> None:
        """Rename a defined name.

        The entry itself is skipped (by identity) in the uniqueness scan, so
        renaming a name to its current text, or changing only its case, works.

        Raises:
            InvalidNameError: If the name text is invalid
            DuplicateNameError: If another name is equal ignoring case
        """
        self._require_owned(entry)
        with NameContext(entry.name), OperationContext("set_name"):
            validate_name(new_name)
            self._check_unique(new_name, exclude=entry)
            old_name = entry.store.name
            entry.store.name = new_name
            logger.debug("Renamed %s to %s", old_name, new_name)

    def set_reference(self, entry: DefinedName, text: str | None) -> None:
        """Set the reference a name points to, such as ``Sales!C20:C30``.

        Single-block references are stored in canonical form. Union references
        are stored as given. Text that looks like a single block but does not
        parse is also stored as given: a warning is logged and the
        ``on_reference_warning`` sink is called once. This method never raises
        for bad reference text; use the parser directly for strict validation.
        """
        self._require_owned(entry)
        with NameContext(entry.name), OperationContext("set_reference"):
            failure = None
            stored = text
            if text is not None and self.parser.is_contiguous(text):
                try:
                    stored = self.parser.format(self.parser.parse(text))
                except MalformedReferenceError as e:
                    failure = e
            entry.store.reference = stored
            if failure is not None:
                self._report_reference_fallback(text, failure.reason)

    def is_deleted(self, entry: DefinedName) -> bool:
        """Whether the reference contains the deleted-reference marker ``#REF!``."""
        reference = entry.store.reference
        return reference is not None and DELETED_REFERENCE_MARKER in reference

    def set_scope(self, entry: DefinedName, sheet_index: int | None) -> None:
        """Scope a name to one sheet, or make it workbook-global with None.

        The index is not checked against the number of sheets.

        Raises:
            InvalidScopeError: If sheet_index is negative
        """
        self._require_owned(entry)
        if sheet_index is not None and sheet_index < 0:
            raise InvalidScopeError(sheet_index)
        entry.store.local_sheet_id = sheet_index

    def resolve_sheet_name(self, entry: DefinedName) -> str:
        """Name of the sheet a defined name belongs to.

        A locally scoped name resolves through the sheet lookup. Otherwise the
        sheet qualifier of the reference is returned.

        Raises:
            UnresolvableSheetError: If neither a local scope nor a sheet
                qualifier identifies the sheet
        """
        sheet_index = entry.store.local_sheet_id
        if sheet_index is not None:
            if self.sheet_lookup is None:
                raise UnresolvableSheetError(
                    entry.name, f"scoped to sheet {sheet_index} but no sheet lookup is set"
                )
            return self.sheet_lookup.sheet_name_for_index(sheet_index)

        reference = entry.store.reference
        if reference is None:
            raise UnresolvableSheetError(entry.name, "no local scope and no reference")
        try:
            area = self.parser.parse(reference)
        except MalformedReferenceError as e:
            raise UnresolvableSheetError(
                entry.name, f"reference '{reference}' cannot be parsed: {e.reason}"
            ) from e
        if area.sheet_name is None:
            raise UnresolvableSheetError(entry.name)
        return area.sheet_name

    def set_comment(self, entry: DefinedName, comment: str | None) -> None:
        self._require_owned(entry)
        entry.store.comment = comment

    def set_function(self, entry: DefinedName, value: bool) -> None:
        """Mark whether the name refers to a user-defined function."""
        self._require_owned(entry)
        entry.store.function = value

    def set_function_group_id(self, entry: DefinedName, group_id: int | None) -> None:
        """Set the function category of a name that refers to a function."""
        self._require_owned(entry)
        if group_id is not None and group_id < 0:
            raise ValueError(f"Function group id must be non-negative, got {group_id}")
        entry.store.function_group_id = group_id

    # Helpers

    def _check_unique(self, name: str, exclude: DefinedName | None) -> None:
        folded = name.casefold()
        for other in self._names:
            if other is exclude or other.name is None:
                continue
            if other.name.casefold() == folded:
                raise DuplicateNameError(name)

    def _owns(self, entry: DefinedName) -> bool:
        return any(e is entry for e in self._names)

    def _require_owned(self, entry: DefinedName) -> None:
        if not self._owns(entry):
            raise DetachedNameError(
                f"Defined name '{entry.name}' does not belong to this registry"
            )

    def _report_reference_fallback(self, text: str, reason: str) -> None:
        logger.warning(
            "failed to parse cell reference '%s' (%s). Setting raw value", text, reason
        )
        if self.on_reference_warning is not None:
            self.on_reference_warning(text, reason)
