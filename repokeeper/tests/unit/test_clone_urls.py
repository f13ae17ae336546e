import pytest

from repokeeper.integrations.clone_urls import (
    CLONE_URL_TEMPLATES,
    clone_url,
    clone_url_template,
)
from repokeeper.models.host import Host


@pytest.mark.parametrize(
    "host, private, expected",
    [
        (Host.GITHUB, False, "git://github.com/octocat/hello-world.git"),
        (Host.GITHUB, True, "git@github.com:octocat/hello-world.git"),
        (Host.BITBUCKET, False, "https://bitbucket.org/octocat/hello-world.git"),
        (Host.BITBUCKET, True, "git@bitbucket.org:octocat/hello-world.git"),
    ],
)
def test_clone_url(host, private, expected):
    assert clone_url(host, "octocat", "hello-world", private) == expected


def test_clone_url_accepts_plain_host_tags():
    assert clone_url("github.com", "acme", "widgets", True) == "git@github.com:acme/widgets.git"


def test_template_table_covers_both_visibilities():
    assert set(CLONE_URL_TEMPLATES) == {
        (Host.GITHUB, False),
        (Host.GITHUB, True),
        (Host.BITBUCKET, False),
        (Host.BITBUCKET, True),
    }


@pytest.mark.parametrize("host", [Host.CUSTOM, Host.GOOGLE, "gitlab.com", ""])
def test_hosts_without_templates_render_nothing(host):
    assert clone_url_template(host, False) is None
    assert clone_url(host, "acme", "widgets", False) is None
    assert clone_url(host, "acme", "widgets", True) is None


def test_clone_url_is_stable():
    first = clone_url(Host.BITBUCKET, "acme", "widgets", False)
    assert all(
        clone_url(Host.BITBUCKET, "acme", "widgets", False) == first for _ in range(5)
    )
