"""
Text processing utilities for content normalization and output formatting.
"""

from typing import Iterable, Tuple


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."


def unique_in_order(items: Iterable[str]) -> Tuple[str, ...]:
    """
    Drop repeated labels while keeping first-occurrence order.

    Skill and tag labels behave like sets, but their display order comes
    from the content file.

    Example:
        >>> unique_in_order(["React", "TypeScript", "React"])
        ('React', 'TypeScript')
    """
    seen = set()
    unique = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        unique.append(item)
    return tuple(unique)


def format_percentage(value: float) -> str:
    """
    Format a percentage for inline CSS with at most two decimals.

    Example:
        >>> format_percentage(100 / 3 - 1)
        '32.33%'
        >>> format_percentage(49.0)
        '49%'
    """
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text}%"
