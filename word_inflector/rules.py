"""
rules.py - Pattern/replacement rules and the matcher that applies them.

A rule pattern may be given as a raw regex source string or as an already
compiled pattern. Either way it is normalized once, when the Rule is built,
into a case-insensitive compiled pattern. Replacement templates use
positional captures ($1, $2, ...) and are translated into Python re
templates at the same time.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Union

PatternLike = Union[str, re.Pattern]

# Raised by the re module for malformed rule patterns; never caught here.
PatternCompileError = re.error

_TEMPLATE_TOKEN_RE = re.compile(r"\$(\$|&|\d{1,2})")


def compile_pattern(pattern: PatternLike) -> re.Pattern:
    """
    Normalize a rule pattern to a compiled, case-insensitive regex.

    Args:
        pattern: Regex source text, or a compiled pattern whose source and
            flags are reused with IGNORECASE forced on.

    Returns:
        re.Pattern: Compiled pattern.

    Raises:
        TypeError: If pattern is neither str nor a compiled pattern.
        re.error: If the pattern source is malformed.
    """
    if isinstance(pattern, re.Pattern):
        return re.compile(pattern.pattern, pattern.flags | re.IGNORECASE)
    if isinstance(pattern, str):
        return re.compile(pattern, re.IGNORECASE)
    raise TypeError(f"Rule pattern must be str or re.Pattern, not {type(pattern).__name__}")


def translate_template(replacement: str, group_count: int) -> str:
    """
    Translate a $-style replacement template into an re template.

    $n becomes \\g<n>, $& the whole match and $$ a literal dollar. A two digit
    reference falls back to one digit plus a literal when the pattern has
    fewer groups; references to groups that do not exist stay literal text.

    Args:
        replacement: Template such as '$1ies' or '$1$2ves'.
        group_count: Number of capture groups in the rule pattern.

    Returns:
        str: Template usable with re.sub.
    """
    if not isinstance(replacement, str):
        raise TypeError(f"Rule replacement must be str, not {type(replacement).__name__}")

    def _token(match: re.Match) -> str:
        token = match.group(1)
        if token == '$':
            return '$'
        if token == '&':
            return r'\g<0>'
        if len(token) == 2 and 0 < int(token) <= group_count:
            return rf'\g<{int(token)}>'
        if 0 < int(token[0]) <= group_count:
            return rf'\g<{token[0]}>' + token[1:]
        return '$' + token

    # Literal backslashes in the template must survive re's template parser.
    escaped = replacement.replace('\\', '\\\\')
    return _TEMPLATE_TOKEN_RE.sub(_token, escaped)


@dataclass(frozen=True)
class Rule:
    """
    An immutable pattern/replacement pair.

    Attributes:
        pattern (str | re.Pattern): Pattern as supplied by the caller.
        replacement (str): $-style replacement template as supplied.
        compiled (re.Pattern): Case-insensitive compiled pattern.
        template (str): Replacement translated for re.subn.
    """
    pattern: PatternLike
    replacement: str
    compiled: re.Pattern = field(init=False, repr=False, compare=False)
    template: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        compiled = compile_pattern(self.pattern)
        object.__setattr__(self, 'compiled', compiled)
        object.__setattr__(self, 'template', translate_template(self.replacement, compiled.groups))

    @property
    def source(self) -> str:
        """Regex source text of the rule pattern."""
        return self.compiled.pattern

    def apply(self, word: str) -> Optional[str]:
        """
        Replace every occurrence of the pattern in word.

        Args:
            word (str): Word to transform.

        Returns:
            Optional[str]: The transformed word, or None when the pattern does
            not occur in word.
        """
        # subn tests and replaces in one pass from position zero
        result, count = self.compiled.subn(self.template, word)
        if count == 0:
            return None
        return result


def gsub(word: str, pattern: PatternLike, replacement: str) -> Optional[str]:
    """
    Apply a single pattern/replacement to word, globally and case-insensitively.

    Args:
        word (str): Word to transform.
        pattern (str | re.Pattern): Pattern source or compiled pattern.
        replacement (str): $-style replacement template.

    Returns:
        Optional[str]: Transformed word, or None if nothing matched.

    Example:
        >>> gsub('bus', '(bu)s$', '$1ses')
        'buses'
        >>> gsub('cat', '(x)$', '$1es') is None
        True
    """
    return Rule(pattern, replacement).apply(word)
