"""
List the packages of a Go module that depend on a given package,
directly or through other externally hosted packages.
"""

from godependants._version import __version__
from godependants.core import analyze_module, find_dependants
from godependants.relationships import (
    collect_dependants,
    dependants_of,
    package_is_external,
    trim_external_module_deps,
)

__all__ = [
    "__version__",
    "analyze_module",
    "find_dependants",
    "collect_dependants",
    "dependants_of",
    "package_is_external",
    "trim_external_module_deps",
]
