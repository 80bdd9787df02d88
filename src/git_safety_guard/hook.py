"""PreToolUse hook process: stdin payload in, exit status and stderr message out.

Exit codes:
    0: allow the command (nothing is printed)
    2: block the command (the reason is printed to stderr for the agent)
"""

import sys
from dataclasses import dataclass

from .classifier import ALLOWED, Decision, decide
from .config import GuardSettings, settings
from .exceptions import HookInputError
from .hook_input import command_from_document, parse_hook_input
from .messages import format_block_message, format_invalid_input_message
from .observability import bind_hook_context, clear_hook_context, get_guard_logger, setup_structured_logging

EXIT_ALLOW = 0
EXIT_BLOCK = 2


@dataclass(frozen=True)
class HookResult:
    """What the hook process should do after classifying one payload."""

    exit_code: int
    message: str
    command: str
    decision: Decision


def run_hook(payload: str, guard: GuardSettings | None = None) -> HookResult:
    """Classify the command carried by a hook payload.

    Unparseable input is allowed unless ``guard.block_on_invalid_input`` is set;
    positively recognized dangerous content is always blocked.
    """
    guard = guard or settings.guard
    log = get_guard_logger()

    try:
        document = parse_hook_input(payload)
    except HookInputError as e:
        log.info("hook_input_invalid", error=str(e), fail_closed=guard.block_on_invalid_input)
        if guard.block_on_invalid_input:
            decision = Decision(blocked=True, reason=f"invalid hook input: {e}")
            return HookResult(EXIT_BLOCK, format_invalid_input_message(e), "", decision)
        return HookResult(EXIT_ALLOW, "", "", ALLOWED)

    session_id = document.get("session_id")
    tool_name = document.get("tool_name")
    bind_hook_context(
        session_id if isinstance(session_id, str) else None,
        tool_name if isinstance(tool_name, str) else None,
    )
    try:
        command = command_from_document(document)
        if not command:
            log.debug("hook_input_without_command")
            return HookResult(EXIT_ALLOW, "", "", ALLOWED)

        decision = decide(command)
        if not decision.blocked:
            log.debug("command_classified", blocked=False, command=command)
            return HookResult(EXIT_ALLOW, "", command, decision)

        log.info(
            "command_classified",
            blocked=True,
            stage=decision.stage.value if decision.stage else None,
            reason=decision.reason,
            command=command,
        )
        message = format_block_message(decision, command, show_command=guard.show_command_in_message)
        return HookResult(EXIT_BLOCK, message, command, decision)
    finally:
        clear_hook_context()


def main() -> int:
    """Read one payload from stdin, print any block message to stderr, return the exit code."""
    setup_structured_logging(
        level=settings.logging.level,
        log_file=settings.logging.file,
        json_format=settings.logging.json_format,
    )
    result = run_hook(sys.stdin.read())
    if result.message:
        sys.stderr.write(result.message)
    return result.exit_code
