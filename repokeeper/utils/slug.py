"""Repository slug helpers.

A slug is the canonical ``host/owner/name`` identifier of a repository,
for example ``github.com/octocat/hello-world``. Parts are kept verbatim.
"""

from typing import Tuple


def repo_slug(host: str, owner: str, name: str) -> str:
    """Build the canonical slug for a repository."""
    return f"{host}/{owner}/{name}"


def parse_repo_slug(slug: str) -> Tuple[str, str, str]:
    """Split a slug back into ``(host, owner, name)``.

    The name keeps any further ``/`` it contains. Raises ``ValueError`` when
    one of the three parts is missing or empty.
    """
    parts = slug.split("/", 2)
    if len(parts) != 3 or not all(parts):
        raise ValueError(
            f"Invalid repository slug: expected 'host/owner/name', got {slug!r}"
        )
    host, owner, name = parts
    return host, owner, name
