# create_velist/tokens.py
"""Random secret generation for freshly scaffolded projects."""

from __future__ import annotations

import secrets

from create_velist.constants import SECRET_ALPHABET, SECRET_LENGTH

__all__ = ["random_string"]


def random_string(length: int = SECRET_LENGTH, alphabet: str = SECRET_ALPHABET) -> str:
    """Return ``length`` characters drawn uniformly from ``alphabet``.

    Parameters
    ----------
    length : int, default SECRET_LENGTH
        Number of characters to generate. Must not be negative.
    alphabet : str, default SECRET_ALPHABET
        Pool of characters to draw from. Must not be empty.

    Raises
    ------
    ValueError
        If ``length`` is negative or ``alphabet`` is empty.

    Notes
    -----
    The value seeds a development JWT secret; ``secrets.choice`` is used
    even though this is not a security boundary.
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    if not alphabet:
        raise ValueError("alphabet must not be empty")
    return "".join(secrets.choice(alphabet) for _ in range(length))
