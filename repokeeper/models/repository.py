import enum
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from sqlalchemy import Column, JSON
from sqlmodel import Field

from repokeeper.config import settings
from repokeeper.integrations.clone_urls import clone_url
from repokeeper.models.base_model import BaseModel, get_session, select
from repokeeper.models.host import Host
from repokeeper.models.scm import Scm, default_branch
from repokeeper.utils.slug import repo_slug
from repokeeper.utils.ssh_keys import generate_key_pair

# Never part of the API-facing representation
API_HIDDEN_FIELDS = {"username", "password", "private_key", "params"}


def _default_timeout() -> int:
    return settings.DEFAULT_BUILD_TIMEOUT


class Repository(BaseModel, table=True):
    __tablename__ = "repos"

    id: Optional[int] = Field(default=None, primary_key=True, index=True)

    # the full, canonical name of the repository, for example
    # github.com/octocat/hello-world
    slug: str = Field(index=True, unique=True)
    host: str
    owner: str
    name: str

    private: bool = False
    disabled: bool = False
    disabled_pr: bool = False

    scm: str = Scm.GIT.value
    url: str
    username: Optional[str] = None
    password: Optional[str] = None

    # injected into the build environment as .ssh/id_rsa.pub and .ssh/id_rsa
    public_key: str = ""
    private_key: str = ""

    params: Dict[str, str] = Field(default_factory=dict, sa_column=Column(JSON))
    timeout: int = Field(default_factory=_default_timeout)
    priveleged: bool = False

    user_id: Optional[int] = Field(default=None, index=True)
    team_id: Optional[int] = Field(default=None, index=True)

    def __repr__(self):
        return f"<Repository(slug={self.slug}, scm={self.scm}, private={self.private})>"

    def default_branch(self) -> str:
        return default_branch(self.scm)

    def to_api_dict(self) -> Dict[str, Any]:
        """Serialize for API consumers, without credentials or build params."""
        return self.dict(exclude=API_HIDDEN_FIELDS)

    def to_persisted_dict(self) -> Dict[str, Any]:
        return self.dict()

    @classmethod
    def get_by_slug(cls, slug: str):
        """Fetch a single record by slug."""
        with next(get_session()) as session:
            result = session.exec(select(cls).where(cls.slug == slug)).first()
        return result


def _tag(value: Union[enum.Enum, str]) -> str:
    return value.value if isinstance(value, enum.Enum) else value


def new_repo(
    host: Union[Host, str],
    owner: str,
    name: str,
    scm: Union[Scm, str],
    url: str,
    private: bool = False,
) -> Repository:
    """Create a repository with a freshly generated deploy key pair.

    Raises ``KeyGenerationError`` if the key pair cannot be generated, in
    which case no repository is created.
    """
    host = _tag(host)
    slug = repo_slug(host, owner, name)
    keys = generate_key_pair()
    return Repository(
        slug=slug,
        host=host,
        owner=owner,
        name=name,
        private=private,
        scm=_tag(scm),
        url=url,
        public_key=keys.public_key,
        private_key=keys.private_key,
    )


@dataclass(frozen=True)
class HostFactory:
    """Builds repositories for a host that has clone URL templates."""

    host: Host
    scm: Scm = Scm.GIT

    def __call__(self, owner: str, name: str, private: bool = False) -> Repository:
        """Build a repository from the host's clone URL template.

        ``private`` picks the template and is also stored on the repository,
        so public and private builds differ in both ``url`` and ``private``.
        """
        url = clone_url(self.host, owner, name, private)
        return new_repo(self.host, owner, name, self.scm, url, private=private)


REPO_FACTORIES: Dict[Host, HostFactory] = {
    Host.GITHUB: HostFactory(Host.GITHUB),
    Host.BITBUCKET: HostFactory(Host.BITBUCKET),
}


def new_github_repo(owner: str, name: str, private: bool = False) -> Repository:
    return REPO_FACTORIES[Host.GITHUB](owner, name, private)


def new_bitbucket_repo(owner: str, name: str, private: bool = False) -> Repository:
    return REPO_FACTORIES[Host.BITBUCKET](owner, name, private)


def new_hosted_repo(
    host: Union[Host, str],
    owner: str,
    name: str,
    private: bool = False,
    url: Optional[str] = None,
    scm: Union[Scm, str] = Scm.GIT,
) -> Repository:
    """Create a repository for any known host tag.

    Hosts with clone URL templates derive the URL themselves unless one is
    given. The templates are git URLs, so other SCM kinds need an explicit
    ``url`` on every host, as do custom and legacy hosts.
    """
    try:
        host = Host(host)
    except ValueError:
        raise ValueError(
            f"Unknown host: {host!r}. Must be one of {[h.value for h in Host]}"
        ) from None

    factory = REPO_FACTORIES.get(host)
    if url is None:
        if factory is None:
            raise ValueError(f"A clone URL is required for {host.value} repositories")
        if _tag(scm) != factory.scm.value:
            raise ValueError(
                f"A clone URL is required for {_tag(scm)} repositories on {host.value}"
            )
        return factory(owner, name, private)
    return new_repo(host, owner, name, scm, url, private=private)
