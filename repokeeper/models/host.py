import enum


class Host(str, enum.Enum):
    """Hosting services a repository can be registered from."""

    GITHUB = "github.com"
    BITBUCKET = "bitbucket.org"
    # Legacy hosting, kept so existing rows still map to a known tag
    GOOGLE = "code.google.com"
    CUSTOM = "custom"
