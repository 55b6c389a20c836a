"""Glob matching and URL classification for asset references.

Patterns are matched in "contains" mode: a pattern matches when it matches
any part of the candidate path, so ``*.md`` matches ``posts/a/index.md``.
A pattern may hold several alternatives separated by ``|`` and simple
``{a,b}`` brace groups.
"""

import re
from fnmatch import fnmatchcase

ABSOLUTE_URL_PATTERN = re.compile(r"^(?:[a-zA-Z][a-zA-Z0-9+.\-]*:|/)")


def is_relative(url: str) -> bool:
    """Check whether a reference is page-relative.

    Scheme URLs (``https:``, ``data:``, ``mailto:``), protocol-relative
    URLs (``//host``) and host-relative paths (``/img``) are not.

    Examples:
        >>> is_relative("img/photo.jpg")
        True
        >>> is_relative("https://example.com/photo.jpg")
        False
    """
    return bool(url) and not ABSOLUTE_URL_PATTERN.match(url)


def expand_braces(pattern: str) -> list[str]:
    """Expand the first ``{a,b}`` group of a pattern, recursively.

    Examples:
        >>> expand_braces("*.{png,jpg}")
        ['*.png', '*.jpg']
    """
    match = re.search(r"\{([^{}]*)\}", pattern)
    if not match:
        return [pattern]
    head, tail = pattern[: match.start()], pattern[match.end():]
    expanded = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(head + option + tail))
    return expanded


def split_alternatives(pattern: str) -> list[str]:
    """Split a pattern into its individual glob alternatives."""
    alternatives = []
    for part in pattern.split("|"):
        part = part.strip()
        if part:
            alternatives.extend(expand_braces(part))
    return alternatives


def glob_match(candidate: str, pattern: str) -> bool:
    """Check whether any alternative of pattern occurs within candidate.

    Args:
        candidate: Path or reference; backslashes are treated as separators
        pattern: Glob pattern, possibly with ``|`` alternatives

    Returns:
        True if any alternative matches
    """
    candidate = candidate.replace("\\", "/")
    return any(
        fnmatchcase(candidate, f"*{alternative}*")
        for alternative in split_alternatives(pattern)
    )
