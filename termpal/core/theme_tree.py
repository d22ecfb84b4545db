"""Typed theme-tree model and dark/light flattening.

JSON themes written by older releases stored every colour as
{"dark": X, "light": Y} even for non-adaptive themes, which made editors
pick the light value. The tree below classifies such a document once,

  Leaf(value)               any JSON scalar
  DarkLightPair(dark, light) a mapping with exactly the keys dark and light
  Node(children)            any other mapping
  Seq(items)                a JSON array

and flatten_pairs() collapses every pair into a single Leaf.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Leaf:
    value: Any


@dataclass(frozen=True)
class DarkLightPair:
    dark: Any
    light: Any


@dataclass(frozen=True)
class Node:
    children: dict[str, ThemeTree]


@dataclass(frozen=True)
class Seq:
    items: tuple[ThemeTree, ...]


ThemeTree = Leaf | DarkLightPair | Node | Seq

_PAIR_KEYS = {'dark', 'light'}


def parse_tree(obj: Any) -> ThemeTree:
    """Classify a decoded JSON value."""
    if isinstance(obj, Mapping):
        if set(obj) == _PAIR_KEYS:
            return DarkLightPair(dark=obj['dark'], light=obj['light'])
        return Node({str(k): parse_tree(v) for k, v in obj.items()})
    if isinstance(obj, list):
        return Seq(tuple(parse_tree(v) for v in obj))
    return Leaf(obj)


def to_plain(tree: ThemeTree) -> Any:
    if isinstance(tree, Leaf):
        return tree.value
    if isinstance(tree, DarkLightPair):
        return {'dark': tree.dark, 'light': tree.light}
    if isinstance(tree, Seq):
        return [to_plain(v) for v in tree.items]
    return {k: to_plain(v) for k, v in tree.children.items()}


def flatten_pairs(tree: ThemeTree, prefer: str = 'dark') -> ThemeTree:
    """Replace every DarkLightPair with a Leaf holding the preferred side."""
    if prefer not in _PAIR_KEYS:
        raise ValueError(f"prefer must be 'dark' or 'light', got {prefer!r}")
    if isinstance(tree, DarkLightPair):
        return Leaf(tree.dark if prefer == 'dark' else tree.light)
    if isinstance(tree, Node):
        return Node({k: flatten_pairs(v, prefer) for k, v in tree.children.items()})
    if isinstance(tree, Seq):
        return Seq(tuple(flatten_pairs(v, prefer) for v in tree.items))
    return tree


def has_pairs(tree: ThemeTree) -> bool:
    if isinstance(tree, DarkLightPair):
        return True
    if isinstance(tree, Node):
        return any(has_pairs(v) for v in tree.children.values())
    if isinstance(tree, Seq):
        return any(has_pairs(v) for v in tree.items)
    return False


def is_adaptive_theme(doc: Mapping[str, Any]) -> bool:
    """Adaptive themes carry light_/dark_ prefixed defs and keep their pairs."""
    defs = doc.get('defs') or {}
    return 'light_bg' in defs and 'dark_bg' in defs


def flatten_theme(doc: Mapping[str, Any], prefer: str = 'dark') -> tuple[dict[str, Any], bool]:
    """Flatten the `theme` section of a theme document.

    Returns (document, changed). Adaptive themes, documents without a
    `theme` section and already-flat themes come back unchanged.
    """
    out = dict(doc)
    if is_adaptive_theme(doc) or not isinstance(doc.get('theme'), Mapping):
        return out, False
    tree = parse_tree(doc['theme'])
    if not has_pairs(tree):
        return out, False
    out['theme'] = to_plain(flatten_pairs(tree, prefer))
    return out, True
