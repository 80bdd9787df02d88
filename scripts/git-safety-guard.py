#!/usr/bin/env python3
"""PreToolUse safety guard for Claude Code hooks.

Blocks destructive git and filesystem commands, hook bypass attempts and git
subcommands outside the allowed list. Reads the hook JSON from stdin; exit code
0 = allow, exit code 2 = deny with the reason on stderr.

Install:
  1) pip install . (or: uv tool install .) to get the git_safety_guard package
  2) Wire in .claude/settings.json:
       {"hooks": {"PreToolUse": [{"matcher": "Bash",
         "hooks": [{"type": "command", "command": "git-safety-guard check"}]}]}}
     or point "command" at this script.
"""

from git_safety_guard.hook import main

if __name__ == "__main__":
    raise SystemExit(main())
