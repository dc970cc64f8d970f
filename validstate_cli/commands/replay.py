"""
Replay command: replay an action log through a validated reducer
"""

import json
import os
import sys
from typing import Any, Dict, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from validstate.core import ValidateOptions, iter_errors, get_errors, validate_reducer
from validstate.core.errors import ValidStateError
from validstate.replay import read_actions, replay as replay_actions

from ..loader import LoadError, load_callable
from ..logging_config import get_logger

console = Console()


def _load_preloaded(path: Optional[str]) -> Optional[Dict[str, Any]]:
    if path is None:
        return None
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValidStateError(f"Preloaded state must be a JSON object: {path}")
    return data


def replay_command(
    reducer_ref: str = typer.Option(..., "--reducer", "-r", help="Reducer reference (module:attr)"),
    validator_ref: str = typer.Option(..., "--validator", "-v", help="Validator reference (module:attr)"),
    actions_path: str = typer.Option(..., "--actions", "-a", help="Path to JSONL action log"),
    preloaded_path: Optional[str] = typer.Option(
        None, "--preloaded", "-p", help="Path to JSON file with preloaded state"
    ),
    error_key: str = typer.Option(
        "errors",
        "--error-key",
        "-k",
        envvar="VALIDSTATE_ERROR_KEY",
        help="State field that carries the validation report",
    ),
    show_state: bool = typer.Option(False, "--show-state", "-s", help="Show final state"),
    strict: bool = typer.Option(False, "--strict", help="Exit 1 if the final state has errors"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replay an action log through a validated reducer and report errors.

    Examples:
        validstate replay -r app.reducers:root -v app.rules:validate -a actions.jsonl
        validstate replay -r app.reducers:root -v app.rules:validate -a actions.jsonl --json
        validstate replay ... --strict

    Exit codes: 0 ok, 1 errors remain with --strict, 2 load or IO failure,
    3 reducer or validator raised.
    """
    logger = get_logger(__name__, trace_id=actions_path)

    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    try:
        reducer = load_callable(reducer_ref)
        validate = load_callable(validator_ref)
        preloaded = _load_preloaded(preloaded_path)
        actions = list(read_actions(actions_path))
    except OSError as e:
        _fail(json_output, f"Cannot read file ({e.strerror or e})", path=e.filename)
    except (LoadError, ValidStateError, ValueError) as e:
        _fail(json_output, str(e))

    validated = validate_reducer(validate, ValidateOptions(error_key=error_key))(reducer, preloaded)
    logger.info("Replaying %d actions", len(actions))
    try:
        result = replay_actions(validated, actions, preloaded)
    except Exception as e:
        logger.debug("Reducer or validator failed", exc_info=True)
        _fail(json_output, f"Reducer or validator failed: {e!r}", code=3)

    report = get_errors(result.state, error_key)
    errors = list(iter_errors(report))
    logger.info("Replayed %d actions, %d errors", result.applied, len(errors))

    if json_output:
        output: Dict[str, Any] = {
            "success": True,
            "actions_replayed": result.applied,
            "error_key": error_key,
            "valid": not errors,
            "errors": report,
        }
        if show_state:
            output["state"] = result.state
        print(json.dumps(output, indent=2, sort_keys=True))
    else:
        console.print(f"[green]✓ Replayed {result.applied} actions[/green]")

        if errors:
            table = Table(title="Validation Errors")
            table.add_column("Field", style="yellow")
            table.add_column("Message", style="red")
            for path, message in errors:
                table.add_row(Text(path), Text(message))
            console.print(table)
        else:
            console.print("[green]No validation errors[/green]")

        if show_state:
            from rich.syntax import Syntax

            console.print("\n[bold]Final State:[/bold]")
            syntax_str = json.dumps(result.state, indent=2, sort_keys=True)
            console.print(Syntax(syntax_str, "json", theme="monokai"))

    if strict and errors:
        raise typer.Exit(1)


def _fail(json_output: bool, message: str, code: int = 2, **extra: Any) -> NoReturn:
    if json_output:
        print(json.dumps({"error": message, **extra}))
    else:
        detail = f" {extra['path']}" if extra.get("path") else ""
        console.print(f"[red]Error:[/red] {escape(message + detail)}")
    raise typer.Exit(code)
