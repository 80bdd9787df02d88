"""Attempts to disable the pre-commit safety and quality hooks."""

from .rules import GIT_PREFIX, build_table, rule

G = GIT_PREFIX

# Env assignments that switch off hooks or checks. The leading \b keeps
# MY_SKIP_HOOKS=1 from matching; unrelated assignments like FOO=bar never do.
ENV_BYPASS_RULES = (
    rule("SKIP_PRECOMMIT_CHECKS", r"\bSKIP_PRECOMMIT_CHECKS\s*="),
    rule("SKIP_PRE_COMMIT", r"\bSKIP_PRE_COMMIT\s*="),
    rule("SKIP_HOOK(S)", r"\bSKIP_HOOKS?\s*="),
    rule("SKIP_TESTS", r"\bSKIP_TESTS\s*="),
    rule("HUSKY=0", r"\bHUSKY\s*=\s*0\b"),
    rule("HUSKY_SKIP_HOOKS", r"\bHUSKY_SKIP_HOOKS\s*="),
    rule("PRE_COMMIT_ALLOW_NO_CONFIG", r"\bPRE_COMMIT_ALLOW_NO_CONFIG\s*="),
)

FLAG_BYPASS_RULES = (
    rule("git commit --no-verify", G + r"commit\b.*\s--no-verify\b"),
    # -n alone or inside a short-flag cluster such as -an
    rule("git commit -n", G + r"commit\b[^;&|]*(?<!\S)-[a-z]*n[a-z]*\b"),
    rule("git push --no-verify", G + r"push\b.*\s--no-verify\b"),
    rule("git merge --no-verify", G + r"merge\b.*\s--no-verify\b"),
)

BYPASS_RULES = build_table(ENV_BYPASS_RULES + FLAG_BYPASS_RULES)
