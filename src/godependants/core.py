from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union
import logging

from godependants.config import GodependantsConfig
from godependants.constants import ERROR_TEMPLATES
from godependants.package_loader import current_package, load_module_packages
from godependants.relationships import (
    collect_dependants,
    dependants_of,
    direct_dependants_of,
    trim_external_module_deps,
)
from godependants.reporting import format_dependant_map
from godependants.types import PackageRecord
from godependants.utils import PackagePathError, clean_package_path

logger = logging.getLogger(__name__)


class ModuleAnalysis:
    """
    Loaded state of one module.

    Attributes:
        package (str): Import path of the package in the analyzed directory
        module (str): Module path
        records (List[PackageRecord]): Every loaded package
        dependants (Dict[str, List[str]]): Dependant map before trimming
        trimmed (Dict[str, List[str]]): Dependant map restricted to packages
            the module imports directly
    """

    def __init__(
        self,
        package: str,
        module: str,
        records: List[PackageRecord],
        dependants: Dict[str, List[str]],
        trimmed: Dict[str, List[str]],
    ):
        self.package = package
        self.module = module
        self.records = records
        self.dependants = dependants
        self.trimmed = trimmed

    def __repr__(self) -> str:
        return f"ModuleAnalysis(module={self.module}, packages={len(self.records)})"


def analyze_module(
    directory: Optional[Union[str, Path]] = None,
    config: Optional[GodependantsConfig] = None,
    log: logging.Logger = logger,
) -> ModuleAnalysis:
    """Load the module in ``directory`` and build its trimmed dependant map.

    Raises:
        ModuleLoadError: If the current package or module cannot be determined
        PackageLoadErrors: If any package of the module failed to load
    """
    config = config or GodependantsConfig()

    pkgname, modname = current_package(directory, config, log)
    log.info(f"module {modname}")

    records = load_module_packages(directory, config, log)
    dependants = collect_dependants(records, log)
    trimmed = trim_external_module_deps(modname, dependants, log)
    if trimmed:
        log.debug(f"dependant map:\n{format_dependant_map(trimmed)}")

    return ModuleAnalysis(pkgname, modname, records, dependants, trimmed)


def resolve_dependants(
    analysis: ModuleAnalysis,
    packages: Sequence[str] = (),
    direct: bool = False,
    log: logging.Logger = logger,
) -> List[str]:
    """Dependants of ``packages`` (or of the current package when empty)"""
    if packages:
        targets = []
        for pkg in packages:
            try:
                pkg = clean_package_path(pkg, analysis.module, log)
            except PackagePathError as e:
                log.warning(f"clean package path: {e}")
                continue

            if pkg not in analysis.trimmed:
                log.warning(ERROR_TEMPLATES["no_such_package"].format(name=pkg))
                continue
            targets.append(pkg)
    else:
        targets = [analysis.package]

    found = set()
    for pkg in targets:
        if direct:
            found.update(direct_dependants_of(pkg, analysis.trimmed))
        else:
            found.update(dependants_of(pkg, analysis.trimmed, log))
    return sorted(found)


def find_dependants(
    directory: Optional[Union[str, Path]] = None,
    packages: Sequence[str] = (),
    direct: bool = False,
    config: Optional[GodependantsConfig] = None,
    log: logging.Logger = logger,
) -> List[str]:
    """Packages of the module depending on each of ``packages``.

    Args:
        directory: Directory to resolve the module from, default working directory
        packages: Import paths or ``./``-relative paths; empty means the
            package in ``directory``
        direct: Only list direct dependants
        config: Toolchain configuration
        log: Reporter for diagnostics
    """
    analysis = analyze_module(directory, config, log)
    return resolve_dependants(analysis, packages, direct, log)
