"""Test harness helpers built on capture().

Python 3.13+.
"""

from .runner import (
    INTEGER_FIXTURE,
    HarnessContext,
    IntegerLiteral,
    assert_structurally_equal,
    run_capture_test,
    run_get_line_test,
    run_loc_test,
    run_parse_test,
    run_print_debug_test,
    scan_integer,
    trim_newline,
)

__all__ = [
    "INTEGER_FIXTURE",
    "HarnessContext",
    "IntegerLiteral",
    "assert_structurally_equal",
    "run_capture_test",
    "run_get_line_test",
    "run_loc_test",
    "run_parse_test",
    "run_print_debug_test",
    "scan_integer",
    "trim_newline",
]
