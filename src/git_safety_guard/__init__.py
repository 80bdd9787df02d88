"""Command safety classifier for coding-agent PreToolUse hooks."""

from .classifier import Decision, Stage, classify_bypass, classify_destructive, classify_whitelist, decide
from .config import settings
from .exceptions import GitSafetyGuardError, HookInputError, RuleTableError
from .hook import main, run_hook
from .hook_input import extract_command
from .invocation import GitInvocation, extract_git_invocation

__all__ = [
    "main",
    "run_hook",
    "decide",
    "classify_destructive",
    "classify_bypass",
    "classify_whitelist",
    "Decision",
    "Stage",
    "extract_command",
    "extract_git_invocation",
    "GitInvocation",
    "settings",
    "GitSafetyGuardError",
    "HookInputError",
    "RuleTableError",
]
