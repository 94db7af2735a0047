"""
Diagnostic passes over an assembled module.
"""

from dominoxml.validation.consistency import (
    ConsistencyReport,
    KindReport,
    check_consistency,
    check_macro_nodes,
    compress_ranges,
    find_duplicates,
    format_ranges,
    sort_by_id,
)

__all__ = [
    "ConsistencyReport",
    "KindReport",
    "check_consistency",
    "check_macro_nodes",
    "compress_ranges",
    "find_duplicates",
    "format_ranges",
    "sort_by_id",
]
