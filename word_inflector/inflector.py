"""
inflector.py - The rule engine: registers rules and resolves inflections.

An Inflector owns its own RuleRegistry, so independent engines (for example
one per rule set) never share state. A freshly constructed Inflector is
empty; call reset_inflections() to load the default English rules.
"""
from __future__ import annotations

import logging
import math
import re
from pathlib import Path
from typing import Any, Optional, Tuple

from .config import InflectionConfig
from .formatting import ordinalize, titleize
from .registry import RuleRegistry
from .rules import PatternLike, Rule, gsub

logger = logging.getLogger(__name__)

_LEADING_NUMBER_RE = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_count(count: Any) -> float:
    """
    Parse a count the way JavaScript's parseFloat does.

    Numbers are used as they are. Anything else is converted to text and its
    leading numeric prefix is parsed ('2 apples' -> 2.0). Input with no
    numeric prefix, including booleans and None, yields NaN.

    Args:
        count: The count supplied to pluralize.

    Returns:
        float: Parsed value, or math.nan.
    """
    if isinstance(count, bool):
        return math.nan
    if isinstance(count, (int, float)):
        return float(count)
    match = _LEADING_NUMBER_RE.match(str(count).lstrip())
    if not match:
        return math.nan
    return float(match.group(0).replace('Infinity', 'inf'))


class Inflector:
    """
    Rule-based English word inflector.

    Plural and singular rules are tried most-recent-first and the first rule
    that matches decides the result. Uncountable words are checked before any
    rule and are returned unchanged.

    Attributes:
        registry (RuleRegistry): Plural rules, singular rules and uncountables.

    Example:
        >>> inflector = Inflector().reset_inflections()
        >>> inflector.pluralize('bus')
        'buses'
        >>> inflector.pluralize('cat', 2, True)
        '2 cats'
    """

    def __init__(self, registry: Optional[RuleRegistry] = None) -> None:
        self.registry = registry if registry is not None else RuleRegistry()

    @classmethod
    def english(cls) -> Inflector:
        """Create an inflector loaded with the default English rules."""
        return cls().reset_inflections()

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> Inflector:
        """
        Create an inflector loaded with the rule set in yaml_path.

        Args:
            yaml_path (Path): Rule-set YAML file.

        Returns:
            Inflector: New inflector holding only that rule set.
        """
        return cls().reset_inflections(InflectionConfig.from_yaml(yaml_path))

    # read-only views
    @property
    def plurals(self) -> Tuple[Rule, ...]:
        return tuple(self.registry.plurals)

    @property
    def singulars(self) -> Tuple[Rule, ...]:
        return tuple(self.registry.singulars)

    @property
    def uncountables(self) -> Tuple[str, ...]:
        return tuple(self.registry.uncountables)

    # matcher
    @staticmethod
    def gsub(word: str, pattern: PatternLike, replacement: str) -> Optional[str]:
        """Apply one pattern to word; None when the pattern does not occur."""
        return gsub(word, pattern, replacement)

    # registrar
    def plural(self, pattern: PatternLike, replacement: str) -> Inflector:
        """
        Add a pluralization rule ahead of all existing ones.

        Args:
            pattern (str | re.Pattern): Pattern source or compiled pattern.
            replacement (str): Template referring to captures as $1, $2, ...

        Returns:
            Inflector: self, for chaining.

        Raises:
            re.error: If the pattern does not compile.
        """
        rule = Rule(pattern, replacement)
        self.registry.add_plural(rule)
        logger.debug(f"Registered plural rule /{rule.source}/ -> '{replacement}'")
        return self

    def singular(self, pattern: PatternLike, replacement: str) -> Inflector:
        """
        Add a singularization rule ahead of all existing ones.

        Args:
            pattern (str | re.Pattern): Pattern source or compiled pattern.
            replacement (str): Template referring to captures as $1, $2, ...

        Returns:
            Inflector: self, for chaining.

        Raises:
            re.error: If the pattern does not compile.
        """
        rule = Rule(pattern, replacement)
        self.registry.add_singular(rule)
        logger.debug(f"Registered singular rule /{rule.source}/ -> '{replacement}'")
        return self

    def irregular(self, singular: str, plural: str) -> Inflector:
        """
        Register a whole-word irregular pair in both directions.

        Args:
            singular (str): Singular form, e.g. 'person'.
            plural (str): Plural form, e.g. 'people'.

        Returns:
            Inflector: self, for chaining.
        """
        self.plural(rf'\b{singular}\b', plural)
        self.singular(rf'\b{plural}\b', singular)
        return self

    def uncountable(self, word: str) -> Inflector:
        """Exempt word from pluralization and singularization."""
        self.registry.add_uncountable(word)
        logger.debug(f"Registered uncountable word '{word}'")
        return self

    # resolver
    def pluralize(self, word: str, count: Any = None, include_number: bool = False) -> str:
        """
        Return the plural of word, or the form matching count.

        Args:
            word (str): Word to inflect.
            count: Optional count. Exactly 1 selects the singular, any other
                value (including unparsable input) selects the plural.
            include_number (bool): Prefix the result with count and a space.

        Returns:
            str: The inflected word.
        """
        if count is not None:
            result = self.singularize(word) if parse_count(count) == 1 else self.pluralize(word)
            return f"{count} {result}" if include_number else result

        if self.registry.is_uncountable(word):
            return word
        return self._resolve(word, self.registry.plurals)

    def singularize(self, word: str) -> str:
        """
        Return the singular of word.

        Args:
            word (str): Word to inflect.

        Returns:
            str: The inflected word, or word itself when no rule applies.
        """
        if self.registry.is_uncountable(word):
            return word
        return self._resolve(word, self.registry.singulars)

    @staticmethod
    def _resolve(word: str, rules) -> str:
        for rule in rules:
            result = rule.apply(word)
            if result is not None:
                return result
        return word

    # peripheral
    ordinalize = staticmethod(ordinalize)
    titleize = staticmethod(titleize)

    # bootstrap
    def load_rule_set(self, config: InflectionConfig) -> Inflector:
        """
        Register every rule in config on top of the current rules.

        Sections are applied in the order plurals, singulars, irregulars,
        uncountables, each list top to bottom.

        Args:
            config (InflectionConfig): Rule set to register.

        Returns:
            Inflector: self, for chaining.

        Raises:
            ValueError: If a pattern in config does not compile.
        """
        for section, register in (('plurals', self.plural), ('singulars', self.singular)):
            for idx, (pattern, replacement) in enumerate(getattr(config, section)):
                try:
                    register(pattern, replacement)
                except re.error as e:
                    raise ValueError(f"Invalid pattern {pattern!r} at {section}[{idx}]: {e}") from e
        for idx, (singular, plural) in enumerate(config.irregulars):
            try:
                self.irregular(singular, plural)
            except re.error as e:
                raise ValueError(f"Invalid irregular pair {singular!r}/{plural!r} at irregulars[{idx}]: {e}") from e
        for word in config.uncountables:
            self.uncountable(word)
        return self

    def reset_inflections(self, config: Optional[InflectionConfig] = None) -> Inflector:
        """
        Discard all rules and reload a rule set.

        Args:
            config (InflectionConfig, optional): Rule set to load. Defaults to
                the bundled English rules.

        Returns:
            Inflector: self, for chaining.
        """
        self.registry.clear()
        self.load_rule_set(config if config is not None else InflectionConfig())
        logger.debug(
            f"Reset inflections: {len(self.registry.plurals)} plural rules, "
            f"{len(self.registry.singulars)} singular rules, "
            f"{len(self.registry.uncountables)} uncountable words"
        )
        return self
