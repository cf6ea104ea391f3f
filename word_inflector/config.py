from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
import yaml

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = Path(__file__).parent / "english.yaml"

RulePair = Tuple[str, str]


def _load_yaml(yaml_path: Path) -> Dict[str, Any]:
    """
    Read a rule-set YAML file into a dictionary.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid YAML or not a mapping.
    """
    if not yaml_path or not Path(yaml_path).exists():
        raise FileNotFoundError(f"Inflection rules file not found: {yaml_path}")
    try:
        with open(yaml_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing {yaml_path}: {e}")
    if not isinstance(data, dict):
        raise ValueError(f"Inflection rules file {yaml_path} must contain a mapping, got {type(data).__name__}")
    return data


def _pairs(section: str, entries: Any) -> List[RulePair]:
    if not isinstance(entries, list):
        raise ValueError(f"Section '{section}' must be a list")
    pairs = []
    for idx, entry in enumerate(entries):
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ValueError(f"Entry {idx} in '{section}' must be a [pattern, replacement] pair, got {entry!r}")
        first, second = entry
        if not isinstance(first, str) or not isinstance(second, str):
            raise ValueError(f"Entry {idx} in '{section}' must contain two strings, got {entry!r}")
        pairs.append((first, second))
    return pairs


def _words(section: str, entries: Any) -> List[str]:
    if not isinstance(entries, list):
        raise ValueError(f"Section '{section}' must be a list")
    for idx, entry in enumerate(entries):
        if not isinstance(entry, str):
            raise ValueError(f"Entry {idx} in '{section}' must be a string, got {entry!r}")
    return list(entries)


@dataclass
class InflectionConfig:
    """
    A rule set for the inflector.

    With no arguments, loads the bundled English rules from english.yaml.
    Entries in each list are registered in order, so later entries take
    priority over earlier ones.
    """
    # [pattern, replacement] pairs
    plurals: List[RulePair] = field(init=False)
    singulars: List[RulePair] = field(init=False)

    # [singular, plural] pairs
    irregulars: List[RulePair] = field(init=False)

    uncountables: List[str] = field(init=False)

    def __post_init__(self):
        """Load the bundled default rule set."""
        self._apply(_load_yaml(DEFAULT_RULES_PATH), source=DEFAULT_RULES_PATH)

    def _apply(self, config_dict: Dict[str, Any], source: Optional[Path] = None,
               defaults: Optional[Dict[str, Any]] = None) -> None:
        unknown = set(config_dict) - set(self.__dataclass_fields__)
        if unknown:
            logger.warning(f"Ignoring unknown sections in {source or 'rule set'}: {sorted(unknown)}")

        for key in self.__dataclass_fields__.keys():
            if key in config_dict:
                value = config_dict[key]
            elif defaults is not None and key in defaults:
                value = defaults[key]
            else:
                raise ValueError(f"Required rule section '{key}' not found in {source or 'rule set'}")
            if value is None:
                value = []
            if key == 'uncountables':
                object.__setattr__(self, key, _words(key, value))
            else:
                object.__setattr__(self, key, _pairs(key, value))

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> InflectionConfig:
        """
        Load a rule set from a specific YAML file.

        Sections missing from the file fall back to the bundled defaults.

        Args:
            yaml_path: Path to YAML rule-set file.

        Returns:
            InflectionConfig: Rule set loaded from YAML.
        """
        config_dict = _load_yaml(Path(yaml_path))
        logger.info(f"Loaded inflection rules from {yaml_path}")
        return cls.from_dict(config_dict, yaml_path=Path(yaml_path))

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any], yaml_path: Optional[Path] = None) -> InflectionConfig:
        """
        Create a rule set from a dictionary.

        Args:
            config_dict (Dict[str, Any]): Sections keyed by name ('plurals',
                'singulars', 'irregulars', 'uncountables').
            yaml_path: Optional source path, used in error messages.

        Returns:
            InflectionConfig: Rule set; missing sections use the bundled defaults.
        """
        instance = object.__new__(cls)
        missing = [key for key in cls.__dataclass_fields__ if key not in config_dict]
        defaults = _load_yaml(DEFAULT_RULES_PATH) if missing else None
        instance._apply(config_dict, source=yaml_path, defaults=defaults)
        return instance

    @classmethod
    def empty(cls) -> InflectionConfig:
        """A rule set with no rules at all."""
        return cls.from_dict({key: [] for key in cls.__dataclass_fields__})

    def to_dict(self) -> Dict[str, Any]:
        return {
            'plurals': [list(pair) for pair in self.plurals],
            'singulars': [list(pair) for pair in self.singulars],
            'irregulars': [list(pair) for pair in self.irregulars],
            'uncountables': list(self.uncountables),
        }
