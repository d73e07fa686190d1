"""
Centralized constants for godependants

Organized into sections:
- Toolchain
- Package paths
- Diagnostics
"""

# Toolchain
DEFAULT_GO_COMMAND = "go"
CURRENT_PACKAGE_ARGS = ["-json", "."]
MODULE_PACKAGES_ARGS = ["-e", "-deps", "-json", "./..."]

# Package paths
PATH_SEPARATOR = "/"
DOMAIN_MARKER = "."
LOCAL_PREFIX = "./"

# Diagnostics
REPORTER_NAME = "godependants.report"
LOG_FORMAT = "godependants: %(message)s"
MAP_TABLE_HEADERS = ["Package", "Count", "Dependants"]

ERROR_TEMPLATES = {
    "wrong_count": "wrong number of packages loaded: wanted {wanted}, got {got}",
    "no_module": "current package is not located within a module",
    "no_such_package": "no such package in module: {name}",
    "empty_path": "empty package path",
}
