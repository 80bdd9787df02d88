"""Recognize git invocations inside a raw command string.

This is text matching, not shell parsing: ``echo 'git status'`` is reported as a
git invocation with subcommand ``status'``. That false positive is accepted in
exchange for never missing a real invocation hidden behind quoting.
"""

import re
from dataclasses import dataclass

from .rules import GIT_PREFIX

_GIT_INVOCATION = re.compile(GIT_PREFIX + r"(?P<subcommand>[^\s;&|]+)(?P<args>.*)", re.IGNORECASE | re.DOTALL)


@dataclass(frozen=True)
class GitInvocation:
    """The first git invocation found in a command."""

    subcommand: str  # lower-cased
    args: str  # everything after the subcommand token, unparsed

    @property
    def text(self) -> str:
        """Subcommand and arguments with the global options stripped."""
        return f"{self.subcommand}{self.args}"


def extract_git_invocation(command: str) -> GitInvocation | None:
    """Return the first git invocation in ``command``, or None if there is none.

    Global options are skipped before the subcommand is read: any ``-``-prefixed
    token is an option, and ``-C``/``-c``/``--git-dir``/``--work-tree`` and
    friends consume the following token when written without ``=``.
    """
    match = _GIT_INVOCATION.search(command)
    if match is None:
        return None
    return GitInvocation(subcommand=match.group("subcommand").lower(), args=match.group("args"))
