# Dependency analysis and dependant mapping
from collections import defaultdict
from typing import Dict, Iterable, List, Mapping, Sequence, Set
import logging

from godependants.constants import DOMAIN_MARKER, PATH_SEPARATOR
from godependants.types import PackageRecord, index_packages, root_packages

logger = logging.getLogger(__name__)


def package_is_external(name: str) -> bool:
    """Whether ``name`` is hosted outside the standard library.

    External import paths start with a domain (``example.com/foo``);
    single-segment names and paths whose first segment has no period
    are treated as standard library. This is a heuristic: a local path
    such as ``my.dir/pkg`` is classified external too.
    """
    head, sep, _ = name.partition(PATH_SEPARATOR)
    if not sep:
        return False
    return DOMAIN_MARKER in head


def collect_dependants(
    records: Iterable[PackageRecord], log: logging.Logger = logger
) -> Dict[str, List[str]]:
    """Map every external package to the external packages importing it.

    The graph is walked depth-first from the root packages, each package
    at most once, imports in sorted order. The walk does not descend
    into internal packages.
    """
    records = list(records)
    index = index_packages(records)
    deps: Dict[str, List[str]] = defaultdict(list)
    seen: Set[str] = set()

    stack = [r.id for r in reversed(root_packages(records))]
    while stack:
        pkg_id = stack.pop()
        if pkg_id in seen:
            continue
        seen.add(pkg_id)

        if not package_is_external(pkg_id):
            continue

        imports = sorted(index[pkg_id].imports) if pkg_id in index else []
        for name in imports:
            if package_is_external(name):
                deps[name].append(pkg_id)

        # Children pushed in reverse so they pop in sorted order
        stack.extend(
            name for name in reversed(imports)
            if name in index and name not in seen
        )

    log.debug(f"collected dependants for {len(deps)} external packages")
    return dict(deps)


def trim_external_module_deps(
    local_mod_name: str,
    dependants: Mapping[str, Sequence[str]],
    log: logging.Logger = logger,
) -> Dict[str, List[str]]:
    """Drop packages that no package of the local module imports directly.

    Returns a new mapping. This is a single pass: an entry that only
    survives through another removed entry is not re-checked.
    """
    trimmed = {}
    for pkg, deps in dependants.items():
        if any(dep.startswith(local_mod_name) for dep in deps):
            trimmed[pkg] = list(deps)
        else:
            log.debug(f"trimming {pkg}: no dependant in {local_mod_name}")
    return trimmed


def direct_dependants_of(
    name: str, dependants: Mapping[str, Sequence[str]]
) -> List[str]:
    return list(dependants.get(name, ()))


def dependants_of(
    name: str,
    dependants: Mapping[str, Sequence[str]],
    log: logging.Logger = logger,
) -> Set[str]:
    """All packages depending on ``name``, directly or transitively.

    ``name`` itself is only included when it depends on itself through a
    cycle. Unknown packages have no dependants.
    """
    log.info(f"dependants of {name}")
    result: Set[str] = set()
    work = list(reversed(dependants.get(name, ())))
    while work:
        dep = work.pop()
        if dep in result:
            continue
        result.add(dep)
        log.debug(f"adding dependant {dep}")
        work.extend(
            d for d in reversed(dependants.get(dep, ()))
            if d not in result
        )
    return result
