"""Theme-name normalisation for the two downstream theme formats."""

import re


def to_kebab_case(name: str) -> str:
    """'Tokyo Night Storm' -> 'tokyo-night-storm' (JSON theme files)."""
    s = re.sub(r'[\s_]+', '-', name.strip().lower())
    return re.sub(r'[^a-z0-9-]', '', s)


def to_title_case(name: str) -> str:
    """'tokyo-night-storm' -> 'Tokyo Night Storm' (terminal theme files)."""
    words = re.sub(r'[-_]', ' ', name.strip()).split(' ')
    return ' '.join(w[:1].upper() + w[1:].lower() for w in words)
