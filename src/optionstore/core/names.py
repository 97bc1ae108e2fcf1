"""
Option name normalization.

Option names are hierarchical. ':' and '/' are accepted on input and always
collapse to the canonical backslash separator.
"""

from typing import Optional, Tuple

SEPARATOR = "\\"
ACCEPTED_SEPARATORS = (":", "/", SEPARATOR)


def normalize_name(name: str) -> str:
    """Replace every accepted separator with the canonical one."""
    for separator in ACCEPTED_SEPARATORS:
        if separator != SEPARATOR and separator in name:
            name = name.replace(separator, SEPARATOR)
    return name


def join_name(path: Optional[str], name: str) -> str:
    """Join an optional group path and a leaf name into a normalized full name."""
    if not path:
        return normalize_name(name)
    return normalize_name(f"{path}{SEPARATOR}{name}")


def split_name(name: str) -> Tuple[str, str]:
    """
    Split a normalized name into (group, leaf) on the last separator.

    The group is empty for names without a separator.
    """
    group, sep, leaf = name.rpartition(SEPARATOR)
    if not sep:
        return "", name
    return group, leaf


def segments(name: str) -> Tuple[str, ...]:
    """Return the non-empty path segments of a name."""
    return tuple(part for part in normalize_name(name).split(SEPARATOR) if part)
