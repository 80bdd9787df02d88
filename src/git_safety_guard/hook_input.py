"""Extract the proposed command from a PreToolUse hook payload.

Two shapes are tolerated::

    {"tool_name": "Bash", "tool_input": {"command": "git status"}}   # what Claude Code sends
    {"command": "git status"}                                         # flat form, handy for testing
"""

import json
from typing import Any

from .exceptions import HookInputError


def parse_hook_input(payload: str) -> dict[str, Any]:
    """Decode the hook payload into a JSON object.

    Raises:
        HookInputError: If the payload is empty, not JSON, or not a JSON object.
    """
    if not payload or not payload.strip():
        raise HookInputError("empty hook input")
    try:
        obj = json.loads(payload)
    except json.JSONDecodeError as e:
        raise HookInputError(f"invalid JSON: {e}") from e
    if not isinstance(obj, dict):
        raise HookInputError(f"expected a JSON object, got {type(obj).__name__}")
    return obj


def command_from_document(document: dict[str, Any]) -> str:
    """Return ``tool_input.command``, falling back to top-level ``command``, else ''."""
    tool_input = document.get("tool_input")
    if isinstance(tool_input, dict):
        command = tool_input.get("command")
        if isinstance(command, str) and command:
            return command

    command = document.get("command")
    if isinstance(command, str) and command:
        return command
    return ""


def extract_command(payload: str) -> str:
    """Lenient variant of the two functions above: any parse failure yields ''."""
    try:
        document = parse_hook_input(payload)
    except HookInputError:
        return ""
    return command_from_document(document)
