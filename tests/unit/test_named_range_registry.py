"""Tests for NamedRangeRegistry."""

import logging

import pytest

from gridnames.core.constants import BUILTIN
from gridnames.core.exceptions import (
    DetachedNameError,
    DuplicateNameError,
    InvalidNameError,
    InvalidScopeError,
    UnresolvableSheetError,
)
from gridnames.registry import NamedRangeRegistry, NameRecord, validate_name

REGISTRY_LOGGER = "gridnames.registry.named_range_registry"


class TestValidateName:
    """Test the name text rules."""

    @pytest.mark.parametrize(
        "name", ["_Valid", "Sales", "x", "Ünïcode", "Name.With.Dots", BUILTIN.PRINT_AREA]
    )
    def test_valid(self, name):
        validate_name(name)

    @pytest.mark.parametrize("name", ["1Foo", "_Valid Name", "Trailing ", " Leading", "", "$A"])
    def test_invalid(self, name):
        with pytest.raises(InvalidNameError) as exc_info:
            validate_name(name)
        assert exc_info.value.name == name


class TestCreateName:
    """Test adding names to the registry."""

    def test_create_with_defaults(self, registry):
        entry = registry.create_name("Sales")

        assert entry.name == "Sales"
        assert entry.reference is None
        assert entry.local_sheet_id is None
        assert entry.comment is None
        assert not entry.is_function_name
        assert entry.function_group_id is None
        assert len(registry) == 1
        assert registry.name_at(0) is entry

    def test_create_with_everything(self, registry):
        entry = registry.create_name(
            "Totals", "sheet1!a1:b2", sheet_index=1, comment="Quarter totals"
        )

        assert entry.reference == "sheet1!A1:B2"
        assert entry.local_sheet_id == 1
        assert entry.comment == "Quarter totals"

    def test_invalid_name_leaves_registry_unchanged(self, registry):
        with pytest.raises(InvalidNameError):
            registry.create_name("1Foo", "Sheet1!A1")
        assert len(registry) == 0

    def test_duplicate_ignores_case(self, registry):
        registry.create_name("Sales")

        with pytest.raises(DuplicateNameError, match="already contains this name: SALES"):
            registry.create_name("SALES")
        assert len(registry) == 1

    def test_negative_scope_rejected_before_insert(self, registry):
        with pytest.raises(InvalidScopeError):
            registry.create_name("Local", sheet_index=-1)
        assert "Local" not in registry

    def test_custom_store_factory(self, sheets):
        created = []

        def factory():
            record = NameRecord()
            created.append(record)
            return record

        registry = NamedRangeRegistry(sheets, store_factory=factory)
        entry = registry.create_name("Backed", "Sheet1!A1")

        assert created == [entry.store]
        assert created[0].reference == "Sheet1!A1"


class TestLookup:
    """Test finding and removing names."""

    def test_get_name_ignores_case(self, registry):
        entry = registry.create_name("Sales")

        assert registry.get_name("sales") is entry
        assert registry.get_name("Other") is None

    def test_contains(self, registry):
        entry = registry.create_name("Sales")

        assert "SALES" in registry
        assert entry in registry
        assert 42 not in registry

    def test_iteration_order(self, registry):
        names = [registry.create_name(n) for n in ("A_1", "B_1", "C_1")]

        assert list(registry) == names
        assert registry.names == tuple(names)

    def test_remove_by_text(self, registry):
        registry.create_name("Sales")
        registry.remove_name("SALES")

        assert len(registry) == 0
        # the name is free again
        registry.create_name("sales")

    def test_remove_by_entry_detaches_it(self, registry):
        entry = registry.create_name("Sales")
        registry.remove_name(entry)

        assert not entry.is_attached
        assert entry not in registry
        with pytest.raises(DetachedNameError):
            entry.set_reference("Sheet1!A1")
        with pytest.raises(DetachedNameError):
            registry.set_name(entry, "Again")

    def test_remove_missing(self, registry):
        with pytest.raises(KeyError):
            registry.remove_name("Nope")

    def test_entry_from_other_registry(self, registry, sheets):
        other = NamedRangeRegistry(sheets).create_name("Elsewhere")

        with pytest.raises(KeyError):
            registry.remove_name(other)
        with pytest.raises(DetachedNameError):
            registry.set_comment(other, "hi")


class TestSetName:
    """Test renaming."""

    def test_rename(self, registry):
        entry = registry.create_name("Old")
        entry.set_name("New")

        assert entry.name == "New"
        assert registry.get_name("old") is None

    def test_rename_to_own_name(self, registry):
        entry = registry.create_name("Sales")

        registry.set_name(entry, "Sales")
        registry.set_name(entry, "SALES")
        assert entry.name == "SALES"

    def test_rename_case_collision_with_other(self, registry):
        registry.create_name("Sales")
        other = registry.create_name("Costs")

        with pytest.raises(DuplicateNameError):
            other.set_name("sAlEs")
        assert other.name == "Costs"

    @pytest.mark.parametrize("bad", ["1Foo", "_Valid Name", ""])
    def test_invalid_rename_keeps_old_name(self, registry, bad):
        entry = registry.create_name("Keep")

        with pytest.raises(InvalidNameError):
            entry.set_name(bad)
        assert entry.name == "Keep"

    def test_valid_underscore_name(self, registry):
        entry = registry.create_name("Temp")
        entry.set_name("_Valid")
        assert entry.name == "_Valid"


class TestSetReference:
    """Test canonicalization and the raw-text fallback."""

    def test_canonical_form_is_stored(self, registry, warning_sink):
        entry = registry.create_name("Area")
        entry.set_reference("sheet1!c30:$c$20")

        assert entry.reference == "sheet1!C$20:$C30"
        warning_sink.assert_not_called()

    def test_malformed_text_is_stored_raw(self, registry, warning_sink, caplog):
        entry = registry.create_name("Broken")

        with caplog.at_level(logging.WARNING, logger=REGISTRY_LOGGER):
            entry.set_reference("not a reference at all")

        assert entry.reference == "not a reference at all"
        warning_sink.assert_called_once()
        text, reason = warning_sink.call_args.args
        assert text == "not a reference at all"
        assert "is not a cell reference" in reason
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "not a reference at all" in warnings[0].getMessage()

    def test_union_reference_is_stored_raw_without_warning(self, registry, warning_sink):
        entry = registry.create_name("Union")
        entry.set_reference("Sheet1!a1:c3,Sheet1!e5")

        assert entry.reference == "Sheet1!a1:c3,Sheet1!e5"
        warning_sink.assert_not_called()

    @pytest.mark.parametrize(
        "text,reason",
        [
            ("Sheet1!A" + "9" * 5000, "beyond the last row"),
            ("Sheet1!" + "A" * 5000 + "1", "beyond the last column"),
        ],
    )
    def test_oversized_cell_is_stored_raw(self, registry, warning_sink, text, reason):
        entry = registry.create_name("Huge")
        entry.set_reference(text)

        assert entry.reference == text
        warning_sink.assert_called_once()
        assert warning_sink.call_args.args[0] == text
        assert reason in warning_sink.call_args.args[1]

    def test_comma_in_sheet_name_survives_reassignment(self, registry, warning_sink):
        entry = registry.create_name("Quoted")
        entry.set_reference("'a,b'!a1")
        assert entry.reference == "'a,b'!A1"

        entry.set_reference(entry.reference)
        assert entry.reference == "'a,b'!A1"
        assert registry.parser.parse(entry.reference).sheet_name == "a,b"
        warning_sink.assert_not_called()

    def test_fallback_without_sink(self, sheets):
        registry = NamedRangeRegistry(sheets)
        entry = registry.create_name("Broken")

        entry.set_reference("Sheet1!A:A")
        assert entry.reference == "Sheet1!A:A"

    def test_none_clears_reference(self, registry):
        entry = registry.create_name("Area", "Sheet1!A1")
        entry.set_reference(None)
        assert entry.reference is None

    def test_excel97_limits_from_config(self, sheets, excel97_config, warning_sink):
        registry = NamedRangeRegistry(
            sheets, config=excel97_config, on_reference_warning=warning_sink
        )
        entry = registry.create_name("Wide", "Sheet1!XFD1")

        assert entry.reference == "Sheet1!XFD1"
        warning_sink.assert_called_once()


class TestIsDeleted:
    """Test deleted-reference detection."""

    def test_deleted_marker(self, registry):
        entry = registry.create_name("Gone")

        entry.set_reference("Sheet1!#REF!")
        assert entry.is_deleted()

        entry.set_reference("Sheet1!A1")
        assert not entry.is_deleted()

    def test_marker_in_one_bound(self, registry):
        entry = registry.create_name("Half", "Sheet1!A1:#REF!")
        assert registry.is_deleted(entry)

    def test_no_reference(self, registry):
        assert not registry.create_name("Empty").is_deleted()


class TestScope:
    """Test local scope and sheet resolution."""

    def test_set_and_clear_scope(self, registry):
        entry = registry.create_name("Local")

        entry.set_scope(2)
        assert entry.local_sheet_id == 2
        entry.set_scope(None)
        assert entry.local_sheet_id is None

    def test_scope_is_not_bounds_checked(self, registry):
        entry = registry.create_name("Far")
        entry.set_scope(99)
        assert entry.local_sheet_id == 99

    def test_negative_scope(self, registry):
        entry = registry.create_name("Local")
        with pytest.raises(InvalidScopeError):
            entry.set_scope(-1)
        assert entry.local_sheet_id is None

    def test_resolve_from_local_scope(self, registry):
        entry = registry.create_name("Local", "Sheet1!A1", sheet_index=2)
        assert entry.resolve_sheet_name() == "My Sheet"

    def test_resolve_from_reference(self, registry):
        entry = registry.create_name("Global", "'My Sheet'!$A$1:$B$2")
        assert entry.resolve_sheet_name() == "My Sheet"

    def test_unqualified_reference_is_ambiguous(self, registry):
        entry = registry.create_name("Ambiguous", "A1:B2")
        with pytest.raises(UnresolvableSheetError):
            entry.resolve_sheet_name()

    def test_unparsable_reference(self, registry):
        entry = registry.create_name("Deleted", "Sheet1!#REF!")
        with pytest.raises(UnresolvableSheetError, match="cannot be parsed"):
            entry.resolve_sheet_name()

    def test_no_reference(self, registry):
        with pytest.raises(UnresolvableSheetError):
            registry.create_name("Nothing").resolve_sheet_name()

    def test_local_scope_without_lookup(self):
        registry = NamedRangeRegistry()
        entry = registry.create_name("Local", sheet_index=0)
        with pytest.raises(UnresolvableSheetError, match="no sheet lookup"):
            entry.resolve_sheet_name()


class TestMetadata:
    """Test comment and function flags."""

    def test_comment(self, registry):
        entry = registry.create_name("Noted")
        entry.set_comment("This name is scoped to Sheet1")
        assert entry.comment == "This name is scoped to Sheet1"
        entry.set_comment(None)
        assert entry.comment is None

    def test_function_flags(self, registry):
        entry = registry.create_name("MyFunc")
        entry.set_function(True)
        entry.set_function_group_id(14)

        assert entry.is_function_name
        assert entry.function_group_id == 14

    def test_negative_function_group(self, registry):
        entry = registry.create_name("MyFunc")
        with pytest.raises(ValueError):
            entry.set_function_group_id(-3)

    def test_builtin_names(self, registry):
        print_area = registry.create_name(BUILTIN.PRINT_AREA, "Sheet1!$A$1:$H$40", sheet_index=0)
        user = registry.create_name("Report")

        assert print_area.is_builtin
        assert not user.is_builtin
