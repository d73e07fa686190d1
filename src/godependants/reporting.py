"""
Diagnostic output for godependants
"""

import logging
import sys
from typing import Mapping, Sequence

from tabulate import tabulate

from godependants.constants import LOG_FORMAT, MAP_TABLE_HEADERS, REPORTER_NAME


def make_reporter(quiet: bool = False, verbose: bool = False) -> logging.Logger:
    """Build the logger handed to every component for one run.

    In quiet mode the reporter only carries a NullHandler, so nothing
    reaches stderr.
    """
    reporter = logging.getLogger(REPORTER_NAME)
    for handler in list(reporter.handlers):
        reporter.removeHandler(handler)
    reporter.propagate = False

    if quiet:
        reporter.addHandler(logging.NullHandler())
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        reporter.addHandler(handler)

    reporter.setLevel(logging.DEBUG if verbose else logging.INFO)
    return reporter


def format_dependant_map(dependants: Mapping[str, Sequence[str]]) -> str:
    """Render the dependant map as a table, one row per package"""
    rows = [
        [pkg, len(deps), "\n".join(deps)]
        for pkg, deps in sorted(dependants.items())
    ]
    return tabulate(rows, headers=MAP_TABLE_HEADERS, tablefmt="simple")
