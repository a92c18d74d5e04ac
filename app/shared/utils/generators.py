"""ID and value generators (CUID primary keys, public child/post/comment codes)."""

import secrets
import string

from cuid2 import cuid_wrapper

from app.shared.utils.datetime import utc_now

cuid_generator = cuid_wrapper()

_LOWER_ALNUM = string.ascii_lowercase + string.digits
_UPPER_ALNUM = string.ascii_uppercase + string.digits


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2).

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def _random_chars(alphabet: str, length: int) -> str:
    return "".join(secrets.choice(alphabet) for _ in range(length))


def generate_child_code() -> str:
    """Public child code: 'QC' + two-digit year + six upper-case alphanumerics."""
    return f"QC{utc_now():%y}{_random_chars(_UPPER_ALNUM, 6)}"


def generate_post_code() -> str:
    """Public post code, under 20 chars: 'post_' + base36 timestamp + 4 random chars."""
    millis = int(utc_now().timestamp() * 1000)
    digits = ""
    while millis:
        millis, rem = divmod(millis, 36)
        digits = _LOWER_ALNUM[rem] + digits
    return f"post_{digits or '0'}_{_random_chars(_LOWER_ALNUM, 4)}"


def generate_comment_code() -> str:
    """Public comment code: ten lower-case alphanumerics."""
    return _random_chars(_LOWER_ALNUM, 10)
