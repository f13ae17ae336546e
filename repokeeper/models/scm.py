import enum
from typing import Union

from repokeeper.utils.logger import logger


class Scm(str, enum.Enum):
    """Source control systems a repository can use."""

    GIT = "git"
    HG = "hg"
    SVN = "svn"


class DefaultBranch(str, enum.Enum):
    GIT = "master"
    HG = "default"
    SVN = "trunk"


DEFAULT_BRANCHES = {
    Scm.GIT: DefaultBranch.GIT,
    Scm.HG: DefaultBranch.HG,
    Scm.SVN: DefaultBranch.SVN,
}


def default_branch(scm: Union[Scm, str]) -> str:
    """Return the conventional default branch for an SCM kind.

    Unknown kinds resolve to the git default.
    """
    try:
        kind = Scm(scm)
    except ValueError:
        logger.debug(f"Unknown SCM kind {scm!r}, using the git default branch")
        kind = Scm.GIT
    return DEFAULT_BRANCHES[kind].value
