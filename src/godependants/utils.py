import logging
import posixpath

from godependants.constants import ERROR_TEMPLATES, LOCAL_PREFIX

logger = logging.getLogger(__name__)


class PackagePathError(ValueError):
    """A user-supplied package argument could not be resolved"""


def clean_package_path(
    name: str, module_name: str, log: logging.Logger = logger
) -> str:
    """Rewrite a directory-relative package argument to its import path.

    ``./sub/pkg`` becomes ``<module_name>/sub/pkg``; anything else is
    returned unchanged.
    """
    if not name.strip():
        raise PackagePathError(ERROR_TEMPLATES["empty_path"])

    if name.startswith(LOCAL_PREFIX):
        name = posixpath.normpath(
            posixpath.join(module_name, name[len(LOCAL_PREFIX):])
        )

    log.info(f"cleaned: {name}")
    return name
