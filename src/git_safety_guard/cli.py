"""CLI interface for git-safety-guard."""

import json

import typer

from .bypass import BYPASS_RULES
from .classifier import Stage, decide
from .config import CONFIG_FILE, settings
from .destructive import DESTRUCTIVE_RULES
from .hook import main as hook_main
from .whitelist import ALLOWED_GIT_SUBCOMMANDS, MODIFYING_RULES

app = typer.Typer(help="PreToolUse guard that blocks destructive git and shell commands")


@app.command()
def check() -> None:
    """Hook mode: read the PreToolUse JSON payload from stdin, exit 2 to block."""
    raise typer.Exit(code=hook_main())


@app.command()
def explain(
    command: str = typer.Argument(..., help="Shell command to classify"),
) -> None:
    """Show the decision for a command without running it."""
    decision = decide(command)
    payload = {
        "command": command,
        "blocked": decision.blocked,
        "stage": decision.stage.value if decision.stage else None,
        "reason": decision.reason,
    }
    print(json.dumps(payload, indent=2))


@app.command()
def rules(
    stage: Stage = typer.Option(None, "--stage", "-s", help="Only list one stage"),
) -> None:
    """List rule names in evaluation order, and the allowed git subcommands."""
    if stage in (None, Stage.DESTRUCTIVE):
        print("Destructive rules:")
        for r in DESTRUCTIVE_RULES:
            print(f"  {r.name}")
    if stage in (None, Stage.BYPASS):
        print("Hook bypass rules:")
        for r in BYPASS_RULES:
            print(f"  {r.name}")
    if stage in (None, Stage.WHITELIST):
        print("Allowed git subcommands:")
        print(f"  {', '.join(sorted(ALLOWED_GIT_SUBCOMMANDS))}")
        print("Modifying patterns:")
        for r in MODIFYING_RULES:
            print(f"  {r.name}")


@app.command()
def config(
    save: bool = typer.Option(False, "--save", help="Write the effective settings (env included) to the config file"),
) -> None:
    """Show current configuration."""
    if save:
        print(f"Saved: {settings.save()}")
    print(f"Config file: {CONFIG_FILE}")
    print(f"Block on invalid input: {settings.guard.block_on_invalid_input}")
    print(f"Show command in message: {settings.guard.show_command_in_message}")
    print(f"Log level: {settings.logging.level}")
    print(f"Log file: {settings.logging.file or '(stderr)'}")
    print(f"JSON logs: {settings.logging.json_format}")


if __name__ == "__main__":
    app()
