"""Name-pattern configuration parsing.

Builds the ``{property name: "pattern, pattern"}`` mapping consumed by
``NameMapper`` from command-line ``NAME=PATTERNS`` options or from a
properties-style file with one such entry per line.
"""

from .errors import ConfigError


def _split_entry(entry: str) -> tuple:
    name, sep, patterns = entry.partition("=")
    name = name.strip()
    if not sep or not name or not patterns.strip():
        raise ConfigError(f"Expected NAME=PATTERN[,PATTERN...], got '{entry}'")
    return name, patterns.strip()


def parse_merge_options(entries: list) -> dict:
    """Parse ``NAME=PATTERNS`` strings into a name-pattern mapping.

    Repeating a name appends its patterns to the earlier ones.

    Args:
        entries: Values given to ``--merge``.

    Returns:
        Dict of property name → comma-separated pattern string.

    Raises:
        ConfigError: An entry has no ``=``, no name, or no patterns.
    """
    merged = {}
    for entry in entries:
        name, patterns = _split_entry(entry)
        if name in merged:
            merged[name] = f"{merged[name]},{patterns}"
        else:
            merged[name] = patterns
    return merged


def parse_merge_file(content: str) -> dict:
    """Parse properties-style text (``NAME=PATTERNS`` per line).

    Blank lines and lines starting with ``#`` or ``!`` are ignored.
    """
    entries = []
    for line in content.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith(("#", "!")):
            continue
        entries.append(stripped)
    return parse_merge_options(entries)
