"""Dotted version string comparison."""

import re

_LEADING_DIGITS = re.compile(r"\d+")


def parse_version(version: str) -> tuple[int, ...]:
    """Turn a dotted version string into a tuple of integers.

    Suffixes after the digits of a component are ignored, so
    ``"1.5.0-beta"`` parses as ``(1, 5, 0)``.

    Args:
        version: Version string (e.g. "1.4.9")

    Returns:
        Tuple of integer components

    Raises:
        ValueError: If a component does not start with a digit
    """
    parts = []
    for component in version.strip().split("."):
        match = _LEADING_DIGITS.match(component)
        if not match:
            raise ValueError(f"Invalid version string: {version!r}")
        parts.append(int(match.group(0)))
    return tuple(parts)


def is_at_least(version: str, minimum: str) -> bool:
    """Check if a version is greater than or equal to another.

    Missing trailing components count as zero ("1.5" == "1.5.0").

    Raises:
        ValueError: If either string is not a dotted version
    """
    current = parse_version(version)
    required = parse_version(minimum)
    width = max(len(current), len(required))
    current += (0,) * (width - len(current))
    required += (0,) * (width - len(required))
    return current >= required
