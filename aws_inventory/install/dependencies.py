"""External tools the installed aws-inventory expects on PATH."""

import shutil
from dataclasses import dataclass
from typing import Callable, List, Optional


@dataclass(frozen=True)
class Dependency:
    """A runtime dependency: its package name and the executable it provides."""

    formula: str
    executable: str


DECLARED_DEPENDENCIES = (
    Dependency(formula="awscli", executable="aws"),
    Dependency(formula="jq", executable="jq"),
    Dependency(formula="yq", executable="yq"),
)


def find_missing_dependencies(
    which: Optional[Callable[[str], Optional[str]]] = None,
) -> List[Dependency]:
    """Return declared dependencies whose executable is not on PATH.

    Only looks the executables up; nothing is run.

    Args:
        which: Lookup function (default: shutil.which)
    """
    which = which or shutil.which
    return [dep for dep in DECLARED_DEPENDENCIES if which(dep.executable) is None]
