"""Default-deny list of git subcommands, and the argument shapes that re-block them."""

from .exceptions import RuleTableError
from .rules import build_table, rule

_ALLOWED_GIT_SUBCOMMANDS = (
    # Core workflow
    "add",
    "commit",  # --amend caught by the destructive table
    "push",  # --force caught by the destructive table
    "pull",
    "fetch",
    "merge",  # --abort caught by the destructive table
    # Read-only / informational
    "status",
    "diff",
    "log",
    "show",
    "branch",  # -D caught by the destructive table
    "blame",
    "describe",
    "shortlog",
    "reflog",  # expire/delete caught by the destructive table
    "remote",  # modifications caught below
    "tag",  # create/delete caught below
    "grep",
    "name-rev",
    "verify-commit",
    "verify-tag",
    # Plumbing, read-only
    "ls-files",
    "ls-tree",
    "ls-remote",
    "rev-parse",
    "rev-list",
    "cat-file",
    "for-each-ref",
    "merge-base",
    "diff-tree",
    "diff-files",
    "diff-index",
    "hash-object",
    "var",
    # Every mutating form of these is already in the destructive table
    "stash",  # only list/show get this far
    "rm",  # only --cached gets this far
    "gc",  # --prune caught by the destructive table
    "symbolic-ref",  # write form caught by the destructive table
)


def _build_whitelist(names: tuple[str, ...]) -> frozenset[str]:
    seen: set[str] = set()
    for name in names:
        if not name or name != name.strip().lower() or any(c.isspace() for c in name):
            raise RuleTableError(f"Whitelisted git subcommand must be a lower-case token: {name!r}")
        if name in seen:
            raise RuleTableError(f"Duplicate whitelisted git subcommand: {name!r}")
        seen.add(name)
    return frozenset(seen)


ALLOWED_GIT_SUBCOMMANDS = _build_whitelist(_ALLOWED_GIT_SUBCOMMANDS)


def is_allowed_subcommand(subcommand: str) -> bool:
    """Case-insensitive membership test against the whitelist."""
    return subcommand.lower() in ALLOWED_GIT_SUBCOMMANDS


# Matched against GitInvocation.text, i.e. "<subcommand> <args>" with global
# options already stripped, so "git -C repo remote add" is caught as well.
MODIFYING_RULES = build_table(
    (
        rule(
            "git remote modification (only listing allowed)",
            r"^remote\s+(?:add|remove|rm|rename|set-url|set-head|prune)\b",
        ),
        rule("git tag delete", r"^tag\b[^;&|]*\s(?:-d|--delete)\b"),
        rule("git tag create", r"^tag\b[^;&|]*\s(?:-a|--annotate|-s|--sign|-f|--force)\b"),
        # A positional argument right after "tag" is a tag name, with or without a commit
        rule("git tag create", r"^tag\s+[^-\s;&|]"),
    )
)
