"""
Consistency check over the control change macro tree.

The sequencer requires macro, folder and table IDs to be unique within their
kind, and module authors like to know which IDs are still free. This pass
reports both without ever failing: duplicates are logged at ERROR, the used
ID ranges at INFO, and the same findings are returned as a report.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from dominoxml.core import ModuleNode
from dominoxml.model.macros import CCM, CCMFolder, Table

if TYPE_CHECKING:
    from dominoxml.model.module_data import ModuleData

logger = logging.getLogger(__name__)

# Report order for the three ID namespaces.
TRACKED_KINDS: dict[str, type[ModuleNode]] = {
    "CCM": CCM,
    "Folder": CCMFolder,
    "Table": Table,
}


@dataclass
class KindReport:
    """
    Findings for one ID namespace.

    Params:
        kind: "CCM", "Folder" or "Table"
        ids: Every assigned ID, ascending (repeats kept)
        unnumbered: Number of nodes without an ID
        duplicates: Each ID equal to its predecessor in ``ids``
        ranges: Compressed ID runs as (start, end) pairs
    """

    kind: str
    ids: list[int] = field(default_factory=list)
    unnumbered: int = 0
    duplicates: list[int] = field(default_factory=list)
    ranges: list[tuple[int, int]] = field(default_factory=list)

    @property
    def ranges_text(self) -> str:
        return format_ranges(self.ranges)


@dataclass
class ConsistencyReport:
    """Findings for all ID namespaces, keyed by kind."""

    kinds: dict[str, KindReport] = field(default_factory=dict)

    @property
    def duplicates(self) -> list[tuple[str, int]]:
        return [(kind, dup) for kind, report in self.kinds.items() for dup in report.duplicates]

    @property
    def has_duplicates(self) -> bool:
        return bool(self.duplicates)


def sort_by_id(nodes: Iterable[ModuleNode]) -> list[ModuleNode]:
    """Stable sort by ``id``; nodes without an ID go last, in their original order."""
    return sorted(nodes, key=lambda node: (node.id is None, node.id or 0))


def find_duplicates(sorted_ids: list[int]) -> list[int]:
    """
    Return every ID that equals the ID right before it.

    An ID present three times is returned twice.
    """
    return [
        current for previous, current in zip(sorted_ids, sorted_ids[1:]) if current == previous
    ]


def compress_ranges(sorted_ids: list[int]) -> list[tuple[int, int]]:
    """
    Collapse ascending IDs into runs of consecutive values.

    Repeated IDs fold into the run they belong to.

    Examples:
        [3, 4, 5, 9] -> [(3, 5), (9, 9)]
        [1, 1, 3] -> [(1, 1), (3, 3)]
    """
    ranges: list[tuple[int, int]] = []
    for current in sorted_ids:
        if ranges and current - ranges[-1][1] <= 1:
            ranges[-1] = (ranges[-1][0], current)
        else:
            ranges.append((current, current))
    return ranges


def format_ranges(ranges: list[tuple[int, int]]) -> str:
    """Render runs as "1 3-5 9"."""
    return " ".join(str(start) if start == end else f"{start}-{end}" for start, end in ranges)


def build_kind_report(kind: str, nodes: Iterable[ModuleNode]) -> KindReport:
    """Sort one namespace and compute its duplicates and ranges."""
    ordered = sort_by_id(nodes)
    ids = [node.id for node in ordered if node.id is not None]
    return KindReport(
        kind=kind,
        ids=ids,
        unnumbered=len(ordered) - len(ids),
        duplicates=find_duplicates(ids),
        ranges=compress_ranges(ids),
    )


def check_macro_nodes(nodes: Iterable[ModuleNode]) -> ConsistencyReport:
    """
    Check a flattened macro tree and log the findings.

    Links and anything else outside the tracked kinds are ignored.

    Params:
        nodes: Folders, macros, tables (and possibly links) in traversal order

    Returns:
        ConsistencyReport with one KindReport per tracked kind
    """
    partitions: dict[str, list[ModuleNode]] = {kind: [] for kind in TRACKED_KINDS}
    for node in nodes:
        for kind, node_type in TRACKED_KINDS.items():
            if isinstance(node, node_type):
                partitions[kind].append(node)
                break

    report = ConsistencyReport(
        kinds={kind: build_kind_report(kind, members) for kind, members in partitions.items()}
    )

    for kind_report in report.kinds.values():
        for duplicate in kind_report.duplicates:
            logger.error(f"Duplicate {kind_report.kind} tag ID: {duplicate}")
    for kind_report in report.kinds.values():
        if kind_report.ids:
            logger.info(f"Used Ids ({kind_report.kind}): {kind_report.ranges_text}")

    return report


def check_consistency(module_data: "ModuleData") -> ConsistencyReport:
    """
    Check the macro tree of a module for duplicate IDs and report ID usage.

    Never raises for findings; see the module docstring.

    Params:
        module_data: The assembled module

    Returns:
        ConsistencyReport for the module's macro list (empty lists if it has none)
    """
    return check_macro_nodes(module_data.iter_macro_nodes())
