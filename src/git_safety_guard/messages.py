"""Messages written to stderr when the hook blocks a command.

The agent reads this text, so each stage explains what to do instead.
"""

from .classifier import NOT_ALLOWED_SUFFIX, Decision, Stage

_DESTRUCTIVE = """BLOCKED: {reason}

This command is blocked because it can cause catastrophic data loss or system damage.
{command_line}
If you need to run this command, ask the user to do it manually.
"""

_BYPASS = """BLOCKED: {reason}

Skipping pre-commit hooks or checks is not allowed.
{command_line}
Pre-commit hooks exist to maintain code quality. If checks are failing:
1. Fix the underlying issues (lint errors, type errors, test failures)
2. If the issues are unrelated to your changes, ask the user to run the commit manually

Do not bypass hooks - ask the user to do it if absolutely necessary.
"""

_NOT_WHITELISTED = """BLOCKED: {reason}

Only the following git commands are permitted: add, commit, push, pull,
status, diff, log, show, branch, fetch, merge, blame, describe, shortlog,
reflog, remote (list), tag (list), grep, and read-only plumbing commands.
{command_line}
If you need to run this command, ask the user to do it manually.
"""

_MODIFYING = """BLOCKED: {reason}

This git subcommand modification is not allowed.
{command_line}
If you need to run this command, ask the user to do it manually.
"""

_INVALID_INPUT = """BLOCKED: failed to parse hook input: {error}

Blocking by default when input cannot be parsed.
"""

_TEMPLATES = {
    Stage.DESTRUCTIVE: _DESTRUCTIVE,
    Stage.BYPASS: _BYPASS,
}


def format_block_message(decision: Decision, command: str, *, show_command: bool = True) -> str:
    """Render the stderr message for a blocking decision."""
    if not decision.blocked or decision.stage is None:
        raise ValueError("format_block_message() requires a blocking decision")

    if decision.stage is Stage.WHITELIST:
        template = _NOT_WHITELISTED if decision.reason.endswith(NOT_ALLOWED_SUFFIX) else _MODIFYING
    else:
        template = _TEMPLATES[decision.stage]

    command_line = f"\nBlocked command: {command}\n" if show_command else ""
    return template.format(reason=decision.reason, command_line=command_line)


def format_invalid_input_message(error: Exception) -> str:
    return _INVALID_INPUT.format(error=error)
