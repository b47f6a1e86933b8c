from passlib.context import CryptContext

from smarteam.core.settings import settings


# Salted, one-way. Each hash carries its own salt and round count, so raising
# the configured cost later still verifies older hashes.
_password_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
    pbkdf2_sha256__default_rounds=settings.password_hash_rounds,
)


def hash_password(plain_password: str) -> str:
    return _password_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Compare a plaintext password with a stored hash.

    A stored value passlib cannot parse counts as a mismatch.
    """
    try:
        return _password_context.verify(plain_password, hashed_password)
    except ValueError:
        return False


# Verified against when the email is unknown, so a failed login costs the
# same hashing work whether or not the account exists.
DUMMY_HASH: str = hash_password("smarteam-timing-dummy")
