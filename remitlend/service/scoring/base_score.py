"""
Base Score Derivation for the RemitLend credit score engine.

Every user gets a deterministic base score derived from their identifier, so
repeated lookups agree without any storage. The derivation is a 32-bit
multiply-add fold over the identifier's UTF-16 code units, mapped into the
500-850 window. It is not cryptographic; collisions between identifiers are
expected.

The constants below define every score ever issued. Changing any of them
changes all derived scores.
"""

from typing import Iterator

HASH_MULTIPLIER = 31
HASH_MODULUS = 2 ** 32

BASE_SCORE_MIN = 500
BASE_SCORE_MAX = 850
BASE_SCORE_WINDOW = BASE_SCORE_MAX - BASE_SCORE_MIN + 1  # 351


def utf16_code_units(value: str) -> Iterator[int]:
    """
    Yield the UTF-16 code units of ``value``.

    Characters outside the Basic Multilingual Plane produce two units
    (a surrogate pair). Lone surrogates are passed through unchanged.
    """
    encoded = value.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(encoded), 2):
        yield encoded[i] | (encoded[i + 1] << 8)


def identifier_hash(user_id: str) -> int:
    """
    Fold an identifier into an unsigned 32-bit hash.

    Args:
        user_id: The identifier to hash

    Returns:
        Hash in [0, 2**32)
    """
    value = 0
    for unit in utf16_code_units(user_id):
        value = (value * HASH_MULTIPLIER + unit) % HASH_MODULUS
    return value


def base_score(user_id: str) -> int:
    """
    Derive the base credit score for a user.

    Args:
        user_id: Opaque user identifier

    Returns:
        Score in [500, 850], identical for identical inputs
    """
    return BASE_SCORE_MIN + identifier_hash(user_id) % BASE_SCORE_WINDOW
