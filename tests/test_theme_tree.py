"""Tests for termpal.core.theme_tree and termpal.core.names."""

import pytest
from termpal.core.names import to_kebab_case, to_title_case
from termpal.core.theme_tree import (
    DarkLightPair,
    Leaf,
    Node,
    Seq,
    flatten_pairs,
    flatten_theme,
    has_pairs,
    is_adaptive_theme,
    parse_tree,
    to_plain,
)

LEGACY_THEME = {
    '$schema': 'https://opencode.ai/theme.json',
    'defs': {'bg': '#101010', 'fg': '#eeeeee'},
    'theme': {
        'primary': {'dark': 'blue', 'light': 'blue'},
        'background': {'dark': 'bg', 'light': '#ffffff'},
        'text': 'fg',
        'markdown': {'heading': {'dark': 'magenta', 'light': 'red'}, 'link': 'cyan'},
    },
}


class TestParseTree:
    def test_leaf(self):
        assert parse_tree('#ffffff') == Leaf('#ffffff')

    def test_pair(self):
        assert parse_tree({'dark': 'a', 'light': 'b'}) == DarkLightPair('a', 'b')

    def test_pair_needs_exactly_two_keys(self):
        tree = parse_tree({'dark': 'a', 'light': 'b', 'extra': 'c'})
        assert isinstance(tree, Node)

    def test_nested_node(self):
        tree = parse_tree({'x': {'y': 'z'}})
        assert tree == Node({'x': Node({'y': Leaf('z')})})

    def test_list_becomes_seq(self):
        tree = parse_tree({'x': ['a', {'dark': 'd', 'light': 'l'}]})
        assert tree == Node({'x': Seq((Leaf('a'), DarkLightPair('d', 'l')))})

    def test_list_round_trip(self):
        doc = {'stops': ['#111111', {'dark': 'a', 'light': 'b'}, ['c']]}
        assert to_plain(parse_tree(doc)) == doc

    def test_round_trip(self):
        assert to_plain(parse_tree(LEGACY_THEME['theme'])) == LEGACY_THEME['theme']


class TestFlattenPairs:
    def test_prefers_dark(self):
        assert flatten_pairs(DarkLightPair('d', 'l')) == Leaf('d')

    def test_prefers_light(self):
        assert flatten_pairs(DarkLightPair('d', 'l'), prefer='light') == Leaf('l')

    def test_recurses(self):
        tree = flatten_pairs(parse_tree(LEGACY_THEME['theme']))
        assert to_plain(tree) == {
            'primary': 'blue',
            'background': 'bg',
            'text': 'fg',
            'markdown': {'heading': 'magenta', 'link': 'cyan'},
        }
        assert not has_pairs(tree)

    def test_bad_preference(self):
        with pytest.raises(ValueError):
            flatten_pairs(Leaf('x'), prefer='dim')

    def test_has_pairs(self):
        assert has_pairs(parse_tree(LEGACY_THEME['theme']))
        assert not has_pairs(parse_tree({'a': 'b'}))

    def test_pair_inside_list(self):
        tree = parse_tree({'stops': ['#111111', {'dark': 'a', 'light': 'b'}]})
        assert has_pairs(tree)
        flat = flatten_pairs(tree, prefer='light')
        assert to_plain(flat) == {'stops': ['#111111', 'b']}
        assert not has_pairs(flat)


class TestFlattenTheme:
    def test_flattens_legacy(self):
        doc, changed = flatten_theme(LEGACY_THEME)
        assert changed
        assert doc['theme']['background'] == 'bg'
        assert doc['defs'] == LEGACY_THEME['defs']

    def test_input_not_mutated(self):
        flatten_theme(LEGACY_THEME)
        assert LEGACY_THEME['theme']['primary'] == {'dark': 'blue', 'light': 'blue'}

    def test_flattens_pairs_in_lists(self):
        doc = {
            'theme': {
                'background': {'dark': '#000000', 'light': '#ffffff'},
                'stops': ['#111111', {'dark': 'a', 'light': 'b'}],
            }
        }
        flat, changed = flatten_theme(doc)
        assert changed
        assert flat['theme'] == {'background': '#000000', 'stops': ['#111111', 'a']}

    def test_list_without_pairs_unchanged(self):
        doc = {'theme': {'stops': ['#111111', '#222222']}}
        assert flatten_theme(doc) == (doc, False)

    def test_already_flat(self):
        doc, changed = flatten_theme({'theme': {'text': 'fg'}})
        assert not changed
        assert doc == {'theme': {'text': 'fg'}}

    def test_no_theme_section(self):
        assert flatten_theme({'defs': {}}) == ({'defs': {}}, False)

    def test_adaptive_theme_untouched(self):
        adaptive = {
            'defs': {'light_bg': '#ffffff', 'dark_bg': '#000000'},
            'theme': {'background': {'dark': 'dark_bg', 'light': 'light_bg'}},
        }
        assert is_adaptive_theme(adaptive)
        doc, changed = flatten_theme(adaptive)
        assert not changed
        assert doc == adaptive


class TestNames:
    def test_kebab(self):
        assert to_kebab_case('Tokyo Night Storm') == 'tokyo-night-storm'
        assert to_kebab_case('shopping-cart') == 'shopping-cart'
        assert to_kebab_case('  My_Theme! ') == 'my-theme'

    def test_title(self):
        assert to_title_case('tokyo-night-storm') == 'Tokyo Night Storm'
        assert to_title_case('Shopping Cart') == 'Shopping Cart'
        assert to_title_case('dark_OCEAN') == 'Dark Ocean'
