"""
registry.py - Ordered storage for plural rules, singular rules and uncountables.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from .rules import Rule

logger = logging.getLogger(__name__)


@dataclass
class RuleRegistry:
    """
    The three ordered collections an inflector resolves against.

    New entries go to the front of each list, so the most recently added
    rule is consulted first. Entries are never removed individually; only
    clear() discards them.

    Attributes:
        plurals (List[Rule]): Pluralization rules, highest priority first.
        singulars (List[Rule]): Singularization rules, highest priority first.
        uncountables (List[str]): Words exempt from inflection.
    """
    plurals: List[Rule] = field(default_factory=list)
    singulars: List[Rule] = field(default_factory=list)
    uncountables: List[str] = field(default_factory=list)

    def add_plural(self, rule: Rule) -> None:
        self.plurals.insert(0, rule)

    def add_singular(self, rule: Rule) -> None:
        self.singulars.insert(0, rule)

    def add_uncountable(self, word: str) -> None:
        self.uncountables.insert(0, word)

    def is_uncountable(self, word: str) -> bool:
        """Exact membership test, no pattern matching."""
        return word in self.uncountables

    def clear(self) -> None:
        """Discard all rules and uncountable words."""
        self.plurals = []
        self.singulars = []
        self.uncountables = []
        logger.debug("Cleared inflection rule registry")

    def is_empty(self) -> bool:
        return not (self.plurals or self.singulars or self.uncountables)
