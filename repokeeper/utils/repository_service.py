from typing import Dict, Optional

from repokeeper.config.settings import STATELESS_MODE
from repokeeper.models.repository import Repository, new_hosted_repo
from repokeeper.models.scm import Scm
from repokeeper.utils.logger import logger
from repokeeper.utils.ssh_keys import fingerprint


def create_repository(
    host: str,
    owner: str,
    name: str,
    private: bool = False,
    url: Optional[str] = None,
    scm: str = Scm.GIT.value,
    user_id: Optional[int] = None,
    team_id: Optional[int] = None,
) -> Repository:
    """Register a repository and provision its deploy keys.

    The repository is persisted unless the application runs in
    STATELESS_MODE. A ``KeyGenerationError`` propagates to the caller.
    """
    repo = new_hosted_repo(host, owner, name, private=private, url=url, scm=scm)
    repo.user_id = user_id
    repo.team_id = team_id

    if STATELESS_MODE:
        logger.info(f"Repository created (not persisted): {repo.slug}")
        return repo

    repo.save()
    logger.info(
        f"Repository {repo.slug} registered with deploy key {fingerprint(repo.public_key)}"
    )
    return repo


def get_repository(slug: str) -> Optional[Repository]:
    if STATELESS_MODE:
        return None
    return Repository.get_by_slug(slug)


def update_settings(
    repo: Repository,
    disabled: Optional[bool] = None,
    disabled_pr: Optional[bool] = None,
    timeout: Optional[int] = None,
    params: Optional[Dict[str, str]] = None,
    priveleged: Optional[bool] = None,
) -> Repository:
    """Change the build settings of a repository.

    Only the given settings change; identity and credentials never do.
    """
    changes = {
        "disabled": disabled,
        "disabled_pr": disabled_pr,
        "timeout": timeout,
        "params": dict(params) if params is not None else None,
        "priveleged": priveleged,
    }
    for field, value in changes.items():
        if value is not None:
            setattr(repo, field, value)
    repo.touch()

    if not STATELESS_MODE:
        repo.save()
        logger.info(f"Updated settings for {repo.slug}")
    return repo
