"""repokeeper command line interface."""

import json
from typing import Optional

import click
from sqlalchemy.exc import IntegrityError

from repokeeper.config.db import init_db
from repokeeper.models.host import Host
from repokeeper.models.scm import Scm, default_branch
from repokeeper.utils.logger import setup_logger
from repokeeper.utils.repository_service import create_repository, get_repository
from repokeeper.utils.slug import parse_repo_slug
from repokeeper.utils.ssh_keys import KeyGenerationError


def _echo_json(data: dict) -> None:
    click.echo(json.dumps(data, indent=2, sort_keys=True))


@click.group()
def main() -> None:
    """Register CI repositories and provision their deploy keys."""
    setup_logger()


@main.command(name="create")
@click.argument("host", type=click.Choice([h.value for h in Host]))
@click.argument("owner")
@click.argument("name")
@click.option("--private", is_flag=True, help="Repository requires credentials to clone")
@click.option("--url", default=None, help="Clone URL, required for custom hosts")
@click.option(
    "--scm", default=Scm.GIT.value, type=click.Choice([s.value for s in Scm]),
    help="Source control system",
)
@click.option("--user-id", type=int, default=None, help="Owning user")
@click.option("--team-id", type=int, default=None, help="Owning team")
def create(
    host: str,
    owner: str,
    name: str,
    private: bool,
    url: Optional[str],
    scm: str,
    user_id: Optional[int],
    team_id: Optional[int],
) -> None:
    """Register a repository and print it."""
    init_db()
    try:
        repo = create_repository(
            host, owner, name,
            private=private, url=url, scm=scm,
            user_id=user_id, team_id=team_id,
        )
    except KeyGenerationError as e:
        raise click.ClickException(f"Could not provision deploy keys: {e}")
    except IntegrityError:
        raise click.ClickException(f"Repository already registered: {host}/{owner}/{name}")
    except ValueError as e:
        raise click.UsageError(str(e))
    _echo_json(repo.to_api_dict())


@main.command(name="show")
@click.argument("slug")
def show(slug: str) -> None:
    """Print a registered repository."""
    try:
        parse_repo_slug(slug)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="SLUG")
    init_db()
    repo = get_repository(slug)
    if repo is None:
        raise click.ClickException(f"Repository not found: {slug}")
    _echo_json(repo.to_api_dict())


@main.command(name="branch")
@click.argument("scm")
def branch(scm: str) -> None:
    """Print the default branch of an SCM kind."""
    click.echo(default_branch(scm))


if __name__ == "__main__":
    main()
