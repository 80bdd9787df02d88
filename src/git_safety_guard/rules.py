"""Ordered rule tables with optional exception patterns.

A table is a plain tuple of :class:`Rule` records evaluated by linear scan. The
first rule whose pattern matches, and whose exception pattern (if any) does not,
wins. An excepted rule is skipped and the scan continues with the next rule.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from .exceptions import RuleTableError

# Global options that consume the following token when written without "=".
GIT_GLOBAL_OPTIONS_WITH_ARG = (
    "-c",
    "--git-dir",
    "--work-tree",
    "--namespace",
    "--super-prefix",
    "--config-env",
)

# Matches "git" plus any global options, leaving the position at the subcommand.
# Compiled case-insensitively, so "-c" also covers "-C <path>".
GIT_PREFIX = r"\bgit\s+(?:(?:(?:" + "|".join(GIT_GLOBAL_OPTIONS_WITH_ARG) + r")\s+\S+|-\S+)\s+)*"

# Commands that run their first argument as another command.
COMMAND_WRAPPERS = r"(?:sudo|nohup|exec|env|command|time|nice|xargs)\s+(?:-\S+\s+)*|timeout\s+(?:-\S+\s+)*\S+\s+"

# Start of a simple command: beginning of input, after a chain separator, command
# substitution or an opening quote (as in bash -c 'reboot'), past leading VAR=value
# assignments and wrappers such as sudo or nohup.
COMMAND_START = r"(?:^|[;&|(`'\"]|\$\()\s*(?:\w+=\S*\s+|" + COMMAND_WRAPPERS + r")*(?:\S*/)?"

# Zero or more arguments that stay within one simple command.
SAME_COMMAND_ARGS = r"(?:[^\s;&|]+\s+)*?"


@dataclass(frozen=True)
class Rule:
    """A named pattern, optionally suppressed by an exception pattern."""

    name: str
    pattern: re.Pattern[str]
    exception: re.Pattern[str] | None = None

    def matches(self, command: str) -> bool:
        return self.pattern.search(command) is not None

    def is_exception(self, command: str) -> bool:
        return self.exception is not None and self.exception.search(command) is not None

    def fires(self, command: str) -> bool:
        """True when the rule matches and is not excepted."""
        return self.matches(command) and not self.is_exception(command)


def _compile(name: str, pattern: str, flags: int) -> re.Pattern[str]:
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise RuleTableError(f"Invalid pattern for rule {name!r}: {e}") from e


def rule(name: str, pattern: str, exception: str | None = None, *, ignore_case: bool = True) -> Rule:
    """Build a :class:`Rule`, compiling both patterns.

    Args:
        name: Human readable rule name, reported as the block reason.
        pattern: Regex searched anywhere in the command.
        exception: Optional regex that, when it also matches, suppresses the rule.
        ignore_case: Compile with ``re.IGNORECASE`` (the default).

    Raises:
        RuleTableError: If the name is empty or a pattern does not compile.
    """
    if not name or not name.strip():
        raise RuleTableError(f"Rule with pattern {pattern!r} has no name")
    flags = re.IGNORECASE if ignore_case else 0
    compiled_exception = _compile(name, exception, flags) if exception is not None else None
    return Rule(name=name, pattern=_compile(name, pattern, flags), exception=compiled_exception)


def build_table(rules: Iterable[Rule]) -> tuple[Rule, ...]:
    """Freeze an ordered rule table, rejecting empty tables."""
    table = tuple(rules)
    if not table:
        raise RuleTableError("Rule table is empty")
    return table


def first_match(rules: Iterable[Rule], command: str) -> Rule | None:
    """Return the first rule that fires for ``command``, or None."""
    for candidate in rules:
        if candidate.fires(command):
            return candidate
    return None
