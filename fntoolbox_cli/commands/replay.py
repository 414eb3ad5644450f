"""
Replay command: fold an action log through a reducer and show the result
"""

import json
import sys
from collections import Counter
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from fntoolbox.core.errors import ActionLogError, ReducerLoadError
from fntoolbox.replay import load_reducer, read_actions, replay

console = Console()


def _fail(message: str, json_output: bool, **fields) -> None:
    if json_output:
        print(json.dumps({"error": message, **fields}))
    else:
        console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(2)


def replay_command(
    actions_path: str = typer.Option(..., "--actions", "-a", help="Path to JSON-lines action log"),
    reducer_path: str = typer.Option(..., "--reducer", "-r", help="Reducer as module:attribute"),
    initial_state: Optional[str] = typer.Option(None, "--state", "-s", help="Initial state as JSON"),
    until: Optional[int] = typer.Option(None, "--until", "-u", help="Replay only the first N actions"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    import_path: str = typer.Option(".", "--path", "-p", help="Directory prepended to sys.path before importing the reducer"),
):
    """
    Replay an action log through a reducer.

    Examples:
        fntoolbox replay -a actions.jsonl -r myapp.state:counter
        fntoolbox replay -a actions.jsonl -r myapp.state:counter --until 10
        fntoolbox replay -a actions.jsonl -r state:counter --path src
        fntoolbox replay -a actions.jsonl -r myapp.state:counter --state '{"n": 3}' --json
    """
    if import_path:
        root = str(Path(import_path).resolve())
        if root not in sys.path:
            sys.path.insert(0, root)

    try:
        reducer = load_reducer(reducer_path)
    except ReducerLoadError as e:
        _fail(str(e), json_output)
    except Exception as e:
        _fail(f"Cannot load reducer {reducer_path!r}: {e}", json_output)

    try:
        actions = read_actions(actions_path)
    except FileNotFoundError:
        _fail("Action log not found", json_output, path=actions_path)
    except ActionLogError as e:
        _fail(str(e), json_output)

    state = None
    if initial_state is not None:
        try:
            state = json.loads(initial_state)
        except json.JSONDecodeError as e:
            _fail(f"Invalid --state JSON: {e.msg}", json_output)

    try:
        result = replay(reducer, actions, state=state, until=until, source=actions_path)
    except Exception as e:
        _fail(f"Reducer failed: {e}", json_output)

    counts = Counter(str(action.type) for action in actions[:result.applied])

    if json_output:
        output = {
            "success": True,
            "actions_replayed": result.applied,
            "action_counts": dict(sorted(counts.items())),
            "state": result.state,
        }
        print(json.dumps(output, indent=2, default=str))
        raise typer.Exit(0)

    console.print(f"[green]✓ Replayed {result.applied} actions[/green]")

    table = Table(title="Action Counts")
    table.add_column("Action Type", style="green")
    table.add_column("Count", style="cyan", justify="right")
    for name in sorted(counts):
        table.add_row(name, str(counts[name]))
    console.print(table)

    console.print("\n[bold]Final State:[/bold]")
    console.print(Syntax(json.dumps(result.state, indent=2, default=str), "json", theme="monokai"))
    raise typer.Exit(0)
