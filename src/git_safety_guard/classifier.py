"""Allow/block decision for a single shell command.

Three independent stages run in a fixed order: destructive commands, hook
bypass attempts, then the git subcommand whitelist. The first stage that blocks
decides the outcome and its reason; a command that passes all three is allowed.
Every function here is pure, so the module is safe to share across threads.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .bypass import BYPASS_RULES
from .destructive import DESTRUCTIVE_RULES
from .invocation import extract_git_invocation
from .rules import Rule, first_match
from .whitelist import MODIFYING_RULES, is_allowed_subcommand


class Stage(str, Enum):
    """Classifier stage that produced a blocking decision."""

    DESTRUCTIVE = "destructive"
    BYPASS = "bypass"
    WHITELIST = "whitelist"


@dataclass(frozen=True)
class Decision:
    """Outcome of classifying a command.

    ``blocked`` and ``reason`` are the stable contract; ``stage`` tells the
    caller which message to show and is None when the command is allowed.
    """

    blocked: bool
    reason: str = ""
    stage: Stage | None = None


ALLOWED = Decision(blocked=False)

NOT_ALLOWED_SUFFIX = "(not in allowed git commands)"


def _classify_table(command: str, table: tuple[Rule, ...], stage: Stage) -> Decision:
    matched = first_match(table, command)
    if matched is None:
        return ALLOWED
    return Decision(blocked=True, reason=matched.name, stage=stage)


def classify_destructive(command: str) -> Decision:
    """Block commands that irreversibly lose work, history or repository data."""
    return _classify_table(command, DESTRUCTIVE_RULES, Stage.DESTRUCTIVE)


def classify_bypass(command: str) -> Decision:
    """Block attempts to skip pre-commit hooks or checks."""
    return _classify_table(command, BYPASS_RULES, Stage.BYPASS)


def classify_whitelist(command: str) -> Decision:
    """Block git subcommands that are not explicitly allowed.

    Non-git commands always pass. Whitelisted subcommands are further checked
    against the modifying-pattern table (``remote add``, ``tag -d`` ...).
    """
    invocation = extract_git_invocation(command)
    if invocation is None:
        return ALLOWED

    if not is_allowed_subcommand(invocation.subcommand):
        return Decision(
            blocked=True,
            reason=f"git {invocation.subcommand} {NOT_ALLOWED_SUFFIX}",
            stage=Stage.WHITELIST,
        )

    return _classify_table(invocation.text, MODIFYING_RULES, Stage.WHITELIST)


STAGES: tuple[Callable[[str], Decision], ...] = (
    classify_destructive,
    classify_bypass,
    classify_whitelist,
)


def decide(command: str) -> Decision:
    """Run every stage in precedence order and return the first block, or allow."""
    for classify in STAGES:
        decision = classify(command)
        if decision.blocked:
            return decision
    return ALLOWED
