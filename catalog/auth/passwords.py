from passlib.hash import bcrypt

from catalog.core import config


def hash_password(password: str, rounds: int | None = None) -> str:
    return bcrypt.using(rounds=rounds or config.PASSWORD_HASH_ROUNDS).hash(password)


def verify_password(password: str, hashed_password: str | None) -> bool:
    if not hashed_password:
        return False
    try:
        return bcrypt.verify(password, hashed_password)
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False
