"""
Password hashing and access tokens.
"""
import hashlib
import secrets
from datetime import datetime, timedelta, timezone

from jose import jwt

# scrypt cost parameters (~16 MiB, a few ms per hash)
SCRYPT_N = 2**14
SCRYPT_R = 8
SCRYPT_P = 1


def _scrypt(password: str, salt: bytes) -> bytes:
    return hashlib.scrypt(password.encode(), salt=salt, n=SCRYPT_N, r=SCRYPT_R, p=SCRYPT_P)


def hash_password(password: str) -> str:
    """Hash a password for storage as 'scrypt$<salt hex>$<hash hex>'."""
    salt = secrets.token_bytes(16)
    return f"scrypt${salt.hex()}${_scrypt(password, salt).hex()}"


def verify_password(password: str, stored_hash: str) -> bool:
    """Verify a password against its stored hash."""
    try:
        scheme, salt_hex, hash_hex = stored_hash.split("$")
        salt = bytes.fromhex(salt_hex)
    except ValueError:
        return False
    if scheme != "scrypt":
        return False
    return secrets.compare_digest(_scrypt(password, salt).hex(), hash_hex)


def create_access_token(
    trainer_id: int,
    secret: str,
    algorithm: str = "HS256",
    expires_minutes: int = 1440,
) -> str:
    """Sign a token whose subject is the trainer id."""
    expires_at = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    claims = {"sub": str(trainer_id), "exp": expires_at}
    return jwt.encode(claims, secret, algorithm=algorithm)


def decode_access_token(token: str, secret: str, algorithm: str = "HS256") -> dict:
    """
    Verify signature and expiry and return the claims.

    Raises jose.JWTError (ExpiredSignatureError included) on failure.
    """
    return jwt.decode(token, secret, algorithms=[algorithm])
