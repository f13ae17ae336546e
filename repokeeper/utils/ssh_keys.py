"""Per-repository deploy keys.

Every registered repository gets its own RSA key pair. The public half is
rendered as an OpenSSH ``authorized_keys`` line and the private half as an
unencrypted PKCS#1 PEM block, which are the two forms injected into build
environments as ``.ssh/id_rsa.pub`` and ``.ssh/id_rsa``.
"""

import base64
import hashlib
from dataclasses import dataclass
from typing import Optional

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from repokeeper.config import settings

PUBLIC_EXPONENT = 65537
MIN_KEY_BITS = 2048


class KeyGenerationError(Exception):
    """Raised when a key pair cannot be generated or read back."""


@dataclass(frozen=True)
class KeyPair:
    public_key: str
    private_key: str


def _authorized_key(public_key: rsa.RSAPublicKey) -> str:
    line = public_key.public_bytes(
        encoding=serialization.Encoding.OpenSSH,
        format=serialization.PublicFormat.OpenSSH,
    )
    return line.decode("ascii") + "\n"


def _pem(private_key: rsa.RSAPrivateKey) -> str:
    return private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")


def generate_key_pair(bits: Optional[int] = None) -> KeyPair:
    """Generate a fresh RSA key pair.

    ``bits`` defaults to ``settings.SSH_KEY_BITS``. Nothing is cached, so two
    calls never share key material.
    """
    key_size = settings.SSH_KEY_BITS if bits is None else bits
    if key_size < MIN_KEY_BITS:
        raise KeyGenerationError(
            f"Refusing to generate a {key_size}-bit RSA key, minimum is {MIN_KEY_BITS}"
        )
    try:
        private_key = rsa.generate_private_key(
            public_exponent=PUBLIC_EXPONENT, key_size=key_size
        )
        return KeyPair(
            public_key=_authorized_key(private_key.public_key()),
            private_key=_pem(private_key),
        )
    except Exception as e:
        raise KeyGenerationError(f"Failed to generate a {key_size}-bit RSA key: {e}") from e


def public_key_from_private_key(private_key: str) -> str:
    """Derive the authorized-key line for a PEM encoded RSA private key."""
    try:
        key = serialization.load_pem_private_key(
            private_key.encode("ascii"), password=None
        )
    except (ValueError, TypeError, UnicodeEncodeError) as e:
        raise KeyGenerationError(f"Unreadable private key: {e}") from e
    if not isinstance(key, rsa.RSAPrivateKey):
        raise KeyGenerationError(f"Expected an RSA private key, got {type(key).__name__}")
    return _authorized_key(key.public_key())


def fingerprint(public_key: str) -> str:
    """Return the ``SHA256:...`` fingerprint of an authorized-key line."""
    blob = base64.b64decode(public_key.split()[1])
    digest = base64.b64encode(hashlib.sha256(blob).digest()).decode("ascii")
    return "SHA256:" + digest.rstrip("=")
