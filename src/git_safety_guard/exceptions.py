"""Custom exceptions for git-safety-guard."""


class GitSafetyGuardError(Exception):
    """Base exception for git-safety-guard errors."""

    pass


class RuleTableError(GitSafetyGuardError):
    """Raised when a rule table or the subcommand whitelist is malformed.

    This is a programmer error: tables are built at import time, so it surfaces
    when the hook process starts rather than while classifying a command.
    """

    pass


class HookInputError(GitSafetyGuardError):
    """Raised when the hook payload on stdin cannot be parsed."""

    pass
