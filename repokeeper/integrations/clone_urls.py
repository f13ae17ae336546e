from typing import Dict, Optional, Tuple

from repokeeper.models.host import Host

# (host, private) -> template, rendered with (owner, name)
CLONE_URL_TEMPLATES: Dict[Tuple[Host, bool], str] = {
    (Host.GITHUB, False): "git://github.com/%s/%s.git",
    (Host.GITHUB, True): "git@github.com:%s/%s.git",
    (Host.BITBUCKET, False): "https://bitbucket.org/%s/%s.git",
    (Host.BITBUCKET, True): "git@bitbucket.org:%s/%s.git",
}


def clone_url_template(host: str, private: bool) -> Optional[str]:
    try:
        return CLONE_URL_TEMPLATES.get((Host(host), bool(private)))
    except ValueError:
        return None


def clone_url(host: str, owner: str, name: str, private: bool) -> Optional[str]:
    """Render the clone URL a build agent uses for the repository.

    Returns ``None`` for hosts without a template (custom and legacy hosts),
    whose URL has to be supplied by the caller.
    """
    template = clone_url_template(host, private)
    if template is None:
        return None
    return template % (owner, name)
