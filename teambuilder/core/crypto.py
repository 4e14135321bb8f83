# teambuilder/core/crypto.py
import base64
import os

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from teambuilder.core.config import settings

SALT_BYTES = 16
KEY_LENGTH = 32
SCHEME = "scrypt"


def _b64encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode().rstrip("=")

def _b64decode(data: str) -> bytes:
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)

def _kdf(salt: bytes, n: int, r: int, p: int) -> Scrypt:
    # Scrypt instances are single-use
    return Scrypt(salt=salt, length=KEY_LENGTH, n=n, r=r, p=p)

def hash_password(password: str) -> str:
    """
    Salted one-way hash, encoded as scrypt$n$r$p$salt$key so the cost
    parameters travel with the stored value.
    """
    n, r, p = settings.SCRYPT_N, settings.SCRYPT_R, settings.SCRYPT_P
    salt = os.urandom(SALT_BYTES)
    key = _kdf(salt, n, r, p).derive(password.encode("utf-8"))
    return "$".join([SCHEME, str(n), str(r), str(p), _b64encode(salt), _b64encode(key)])

def verify_password(password: str, password_hash: str | None) -> bool:
    if not password_hash:
        return False
    try:
        scheme, n, r, p, salt_b64, key_b64 = password_hash.split("$")
        if scheme != SCHEME:
            return False
        kdf = _kdf(_b64decode(salt_b64), int(n), int(r), int(p))
        expected = _b64decode(key_b64)
    except ValueError:
        # malformed stored hash
        return False
    try:
        kdf.verify(password.encode("utf-8"), expected)
    except InvalidKey:
        return False
    return True
