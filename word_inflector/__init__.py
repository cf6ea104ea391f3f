"""word_inflector package: Rule-based English pluralization, singularization and ordinals.

Words are inflected by ordered pattern/replacement rules. The most recently
registered rule that matches wins; irregular pairs and uncountable words
cover what the patterns cannot.

Core classes:
    - Inflector: Rule engine owning its own rule registry
    - RuleRegistry: Ordered plural rules, singular rules and uncountable words
    - Rule: Immutable pattern/replacement pair
    - InflectionConfig: Rule set loaded from YAML (bundled English by default)

Module-level functions operate on one shared default Inflector, which is
empty until reset_inflections() is called.

Example:
    >>> import word_inflector as inflection
    >>> _ = inflection.reset_inflections()
    >>> inflection.pluralize('person')
    'people'
    >>> inflection.irregular('goose', 'geese')
    >>> inflection.pluralize('goose')
    'geese'
    >>> inflection.ordinalize(23)
    '23rd'
"""

from typing import Any, Optional

from .config import InflectionConfig
from .formatting import ordinalize, titleize
from .inflector import Inflector, parse_count
from .registry import RuleRegistry
from .rules import PatternCompileError, PatternLike, Rule, gsub

_default_inflector = Inflector()


def get_default_inflector() -> Inflector:
    """Return the shared inflector behind the module-level functions."""
    return _default_inflector


def plural(pattern: PatternLike, replacement: str) -> None:
    _default_inflector.plural(pattern, replacement)


def singular(pattern: PatternLike, replacement: str) -> None:
    _default_inflector.singular(pattern, replacement)


def irregular(singular_form: str, plural_form: str) -> None:
    _default_inflector.irregular(singular_form, plural_form)


def uncountable(word: str) -> None:
    _default_inflector.uncountable(word)


def pluralize(word: str, count: Any = None, include_number: bool = False) -> str:
    return _default_inflector.pluralize(word, count, include_number)


def singularize(word: str) -> str:
    return _default_inflector.singularize(word)


def reset_inflections(config: Optional[InflectionConfig] = None) -> Inflector:
    """Reload the shared inflector with the default (or given) rule set."""
    return _default_inflector.reset_inflections(config)


__all__ = [
    "Inflector",
    "InflectionConfig",
    "PatternCompileError",
    "Rule",
    "RuleRegistry",
    "get_default_inflector",
    "gsub",
    "irregular",
    "ordinalize",
    "parse_count",
    "plural",
    "pluralize",
    "reset_inflections",
    "singular",
    "singularize",
    "titleize",
    "uncountable",
]
