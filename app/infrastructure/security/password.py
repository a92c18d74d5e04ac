"""Child password hashing (bcrypt, cost 10).

Hashes use the standard $2b$ format so they verify against hashes written
by other bcrypt implementations sharing the child table.
"""

import bcrypt

BCRYPT_ROUNDS = 10


def get_password_hash(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Return a bcrypt hash of password."""
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if plain_password matches hashed_password."""
    try:
        return bool(
            bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
        )
    except (ValueError, TypeError):
        return False
