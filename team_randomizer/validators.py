"""Validation utilities for Team Randomizer."""

import json
from typing import Iterable, List, Optional


def normalize_name(name: str) -> str:
    """Trim surrounding whitespace from a member name."""
    return name.strip()


def name_key(name: str) -> str:
    """Return the key under which two member names compare equal."""
    return name.lower()


def is_acceptable_name(name: str, max_length: Optional[int] = None) -> bool:
    """Check whether an already trimmed name may be stored in the roster.

    Args:
        name: Trimmed member name
        max_length: Maximum allowed length, or None for no limit

    Returns:
        True if the name is non-empty and within the length limit
    """
    if not name:
        return False
    if max_length is not None and len(name) > max_length:
        return False
    return True


def validate_member_names(names: Iterable[str], max_length: Optional[int] = None) -> None:
    """Validate member names given on the command line.

    Args:
        names: Raw member names to validate
        max_length: Maximum allowed length, or None for no limit

    Raises:
        ValueError: If a name is empty, whitespace-only or too long
    """
    for name in names:
        trimmed = normalize_name(name)
        if not trimmed:
            raise ValueError("Member names cannot be empty or whitespace-only")
        if max_length is not None and len(trimmed) > max_length:
            raise ValueError(
                f"Member name too long (max {max_length} chars): '{trimmed}'"
            )


def decode_snapshot(payload: object) -> Optional[List[str]]:
    """Decode a persisted roster snapshot.

    The snapshot is a UTF-8 JSON array of strings. Anything else, including
    a missing payload, decodes to None.

    Args:
        payload: Raw value read from the key-value store; non-bytes values
            such as numbers stored by another program count as unparsable

    Returns:
        The list of member names, or None if absent or unparsable
    """
    if not isinstance(payload, (bytes, bytearray, memoryview)):
        return None

    try:
        data = json.loads(bytes(payload).decode('utf-8'))
    except (UnicodeDecodeError, ValueError):
        return None

    if not isinstance(data, list):
        return None

    if not all(isinstance(item, str) for item in data):
        return None

    return data


def encode_snapshot(names: Iterable[str]) -> bytes:
    """Encode member names as a UTF-8 JSON array."""
    return json.dumps(list(names), ensure_ascii=False).encode('utf-8')
