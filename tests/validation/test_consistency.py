"""
Tests for the macro ID consistency check.

Focus Areas:
1. Duplicate detection on sorted IDs
2. Range compression and formatting
3. Log output and the returned report
"""

import logging

import pytest

from dominoxml.model import CCM, CCMFolder, CCMLink, ControlChangeMacroList, ModuleData, Table
from dominoxml.validation import (
    check_consistency,
    compress_ranges,
    find_duplicates,
    format_ranges,
    sort_by_id,
)

LOGGER = "dominoxml.validation.consistency"


def module_with(*items) -> ModuleData:
    return ModuleData(name="M", control_change_macro_list=ControlChangeMacroList(items=list(items)))


class TestHelpers:
    """Test the sorting, duplicate and range helpers."""

    def test_sort_puts_unnumbered_last(self):
        nodes = [CCMFolder(name="a"), CCMFolder(name="b", id=3), CCMFolder(name="c", id=1)]
        assert [node.name for node in sort_by_id(nodes)] == ["c", "b", "a"]

    def test_sort_is_stable(self):
        nodes = [CCM(id=2, name="first"), CCM(id=1, name="x"), CCM(id=2, name="second")]
        assert [node.name for node in sort_by_id(nodes)] == ["x", "first", "second"]

    def test_find_duplicates(self):
        assert find_duplicates([1, 1, 3, 4, 5, 9]) == [1]
        assert find_duplicates([2, 2, 2]) == [2, 2]
        assert find_duplicates([]) == []

    @pytest.mark.parametrize(
        "ids, expected",
        [
            ([1, 1, 3, 4, 5, 9], "1 3-5 9"),
            ([0, 1, 2], "0-2"),
            ([7], "7"),
            ([2, 4, 6], "2 4 6"),
            ([], ""),
        ],
    )
    def test_ranges(self, ids, expected):
        assert format_ranges(compress_ranges(ids)) == expected


class TestCheckConsistency:
    """Test the full check over a module."""

    def test_duplicate_scenario(self, caplog):
        """IDs 9, 1, 4, 1, 3, 5 give one duplicate and four runs."""
        module = module_with(
            *(CCM(id=ccm_id, name=f"m{ccm_id}") for ccm_id in [9, 1, 4, 1, 3, 5])
        )
        with caplog.at_level(logging.INFO, logger=LOGGER):
            report = check_consistency(module)

        errors = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
        infos = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
        assert errors == ["Duplicate CCM tag ID: 1"]
        assert infos == ["Used Ids (CCM): 1 3-5 9"]
        assert report.duplicates == [("CCM", 1)]
        assert report.has_duplicates
        assert report.kinds["CCM"].ranges_text == "1 3-5 9"

    def test_kinds_are_separate_namespaces(self, caplog):
        """A folder, a macro and a table may share an ID."""
        module = module_with(
            CCMFolder(name="F", id=1, items=[CCM(id=1, name="c")]),
            Table(id=1),
        )
        with caplog.at_level(logging.INFO, logger=LOGGER):
            report = check_consistency(module)

        assert not report.has_duplicates
        assert caplog.messages == [
            "Used Ids (CCM): 1",
            "Used Ids (Folder): 1",
            "Used Ids (Table): 1",
        ]

    def test_nested_duplicates_are_found(self, caplog):
        module = module_with(
            CCMFolder(name="A", items=[CCMFolder(name="B", items=[CCM(id=12, name="x")])]),
            CCM(id=12, name="y"),
        )
        with caplog.at_level(logging.INFO, logger=LOGGER):
            report = check_consistency(module)
        assert report.duplicates == [("CCM", 12)]
        assert report.kinds["Folder"].unnumbered == 2

    def test_errors_are_logged_before_ranges(self, caplog):
        module = module_with(Table(id=2), Table(id=2), CCM(id=1, name="a"))
        with caplog.at_level(logging.INFO, logger=LOGGER):
            check_consistency(module)
        assert caplog.messages == [
            "Duplicate Table tag ID: 2",
            "Used Ids (CCM): 1",
            "Used Ids (Table): 2",
        ]

    def test_links_and_unnumbered_folders_are_not_reported(self, caplog):
        """Kinds without any ID produce no range line."""
        module = module_with(
            CCMFolder(name="A", items=["memo", CCMLink(id=1), CCMLink(id=1)]),
            CCMFolder(name="B"),
        )
        with caplog.at_level(logging.INFO, logger=LOGGER):
            report = check_consistency(module)
        assert caplog.messages == []
        assert not report.has_duplicates

    def test_module_without_macros(self, caplog):
        with caplog.at_level(logging.INFO, logger=LOGGER):
            report = check_consistency(ModuleData(name="M"))
        assert caplog.messages == []
        assert list(report.kinds) == ["CCM", "Folder", "Table"]
