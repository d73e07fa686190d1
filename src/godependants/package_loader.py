"""
Load the package graph of a Go module through the go toolchain
"""

import json
import logging
import os
import subprocess
from pathlib import Path
from typing import List, Optional, Tuple, Union

from pydantic import ValidationError

from godependants.config import GodependantsConfig
from godependants.constants import (
    CURRENT_PACKAGE_ARGS,
    ERROR_TEMPLATES,
    MODULE_PACKAGES_ARGS,
)
from godependants.types import PackageError, PackageRecord, root_packages

logger = logging.getLogger(__name__)


class ModuleLoadError(RuntimeError):
    """The module or its package set could not be loaded at all"""


class PackageLoadErrors(RuntimeError):
    """Individual packages failed to load"""

    def __init__(self, errors: List[PackageError]):
        self.errors = errors
        super().__init__(f"{len(errors)} package(s) failed to load")


def run_go_list(
    args: List[str],
    directory: Optional[Union[str, Path]] = None,
    config: Optional[GodependantsConfig] = None,
    log: logging.Logger = logger,
) -> str:
    """Run ``go list`` and return its standard output"""
    config = config or GodependantsConfig()
    cmd = [config.go_command, "list", *config.build_flags, *args]
    env = {**os.environ, **config.env} if config.env else None
    log.debug(f"running {' '.join(cmd)} in {directory or '.'}")

    try:
        proc = subprocess.run(
            cmd,
            cwd=str(directory) if directory else None,
            env=env,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        raise ModuleLoadError(f"run {config.go_command}: {e}") from e

    if proc.returncode != 0 and not proc.stdout.strip():
        raise ModuleLoadError(proc.stderr.strip() or f"go list exited {proc.returncode}")
    return proc.stdout


def decode_package_stream(text: str) -> List[PackageRecord]:
    """Decode the concatenated JSON objects written by ``go list -json``"""
    decoder = json.JSONDecoder()
    records = []
    idx = 0
    while True:
        while idx < len(text) and text[idx].isspace():
            idx += 1
        if idx >= len(text):
            break
        try:
            obj, idx = decoder.raw_decode(text, idx)
            records.append(PackageRecord.model_validate(obj))
        except (json.JSONDecodeError, ValidationError) as e:
            raise ModuleLoadError(f"decode go list output: {e}") from e
    return records


def current_package(
    directory: Optional[Union[str, Path]] = None,
    config: Optional[GodependantsConfig] = None,
    log: logging.Logger = logger,
) -> Tuple[str, str]:
    """Return the import path of the package in ``directory`` and its module path"""
    try:
        pkgs = decode_package_stream(
            run_go_list(CURRENT_PACKAGE_ARGS, directory, config, log)
        )
    except ModuleLoadError as e:
        raise ModuleLoadError(f"load current package: {e}") from e

    if len(pkgs) != 1:
        raise ModuleLoadError(ERROR_TEMPLATES["wrong_count"].format(wanted=1, got=len(pkgs)))
    if pkgs[0].module is None:
        raise ModuleLoadError(ERROR_TEMPLATES["no_module"])

    return pkgs[0].id, pkgs[0].module.path


def collect_load_errors(records: List[PackageRecord]) -> List[PackageError]:
    """Gather package errors, each distinct message once"""
    seen = set()
    errors = []
    for record in records:
        candidates = list(record.deps_errors)
        if record.error is not None:
            candidates.insert(0, record.error)
        for err in candidates:
            if str(err) in seen:
                continue
            seen.add(str(err))
            errors.append(err)
    return errors


def load_module_packages(
    directory: Optional[Union[str, Path]] = None,
    config: Optional[GodependantsConfig] = None,
    log: logging.Logger = logger,
) -> List[PackageRecord]:
    """Load every package under the module root together with all its dependencies"""
    try:
        records = decode_package_stream(
            run_go_list(MODULE_PACKAGES_ARGS, directory, config, log)
        )
    except ModuleLoadError as e:
        raise ModuleLoadError(f"load packages: {e}") from e

    errors = collect_load_errors(records)
    if errors:
        raise PackageLoadErrors(errors)

    log.debug(f"loaded {len(records)} packages ({len(root_packages(records))} roots)")
    return records
