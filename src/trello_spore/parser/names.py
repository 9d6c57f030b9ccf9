"""Canonical method names.

A method's raw name is built from its verb and path
(``GET /1/boards/[board_id]/cards`` -> ``get_boards_board_id_cards``) and
then rewritten by ``NAME_RULES`` in order, each rule seeing the output of
the previous one. The collapse and prefix rules match on underscores, so
they must run before the camel-case fold removes them.
"""

import re
from collections.abc import Callable
from typing import NamedTuple

from .params import PLACEHOLDER_RE

Replacement = str | Callable[[re.Match], str]


class Rule(NamedTuple):
    """A substitution; ``count=0`` rewrites every match, as in ``re.sub``."""

    pattern: re.Pattern
    replacement: Replacement
    count: int = 1

    def apply(self, name: str) -> str:
        return self.pattern.sub(self.replacement, name, count=self.count)


NAME_RULES: list[Rule] = [
    Rule(re.compile(r"_actions_idaction($|_)"), r"_action\1"),
    Rule(re.compile(r"_boards_board_id($|_)"), r"_board\1"),
    Rule(re.compile(r"^put_boards$"), "put_board"),
    Rule(re.compile(r"_cards_card_id_or_shortlink($|_)"), r"_card\1"),
    Rule(re.compile(r"^put_cards$"), "put_card"),
    Rule(re.compile(r"_checklists_idchecklist($|_)"), r"_checklist\1"),
    Rule(re.compile(r"^put_checklists$"), "put_checklist"),
    Rule(re.compile(r"^put_"), "modify_"),
    Rule(re.compile(r"^post_"), "new_"),
    Rule(re.compile(r"_(\w)"), lambda m: m.group(1).upper(), count=0),
]

PREFIX_RE = re.compile(r"/1/")
SEPARATOR_RE = re.compile(r"[/ ]")


def raw_method_name(verb: str, path: str) -> str:
    """Lower-cased ``verb + path`` slug, before any rewrite rule."""
    name = PREFIX_RE.sub("_", verb + path, count=1)
    name = PLACEHOLDER_RE.sub(r"\1", name)
    name = SEPARATOR_RE.sub("_", name)
    return name.lower()


def apply_rules(name: str, rules: list[Rule] | None = None) -> str:
    """Run ``name`` through the rewrite rules in order."""
    for rule in NAME_RULES if rules is None else rules:
        name = rule.apply(name)
    return name


def method_name(verb: str, path: str) -> str:
    """Canonical name of a method, e.g. ``getBoardCards``."""
    return apply_rules(raw_method_name(verb, path))
