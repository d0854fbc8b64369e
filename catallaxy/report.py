"""
Preference Report — Inspect an actor's hierarchy and preference queues.

Loads an actor scenario from a JSON file, optionally uses items against
it in order, and prints the resulting goal hierarchy and per-item
preference queues.

Usage:
    python -m catallaxy.report scenario.json
    python -m catallaxy.report scenario.json --use berries --use berries
    python -m catallaxy.report scenario.json --log-format json
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import structlog
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from catallaxy.agents.actor import Actor
from catallaxy.observability import configure_logging
from catallaxy.preferences.schema import ActorScenario

console = Console()


def load_scenario(path: str | Path) -> ActorScenario:
    """Read and validate a scenario file."""
    return ActorScenario.model_validate_json(Path(path).read_text(encoding="utf-8"))


def render_actor(actor: Actor, out: Console | None = None) -> None:
    """Print the actor's goal hierarchy and preference queues."""
    out = out or console
    out.print(f"\n[bold blue]═══ Preferences of {actor.name} ═══[/bold blue]\n")

    hierarchy = Table(title="Goal Hierarchy", show_lines=False)
    hierarchy.add_column("Rank", style="cyan", width=6)
    hierarchy.add_column("Goal", style="green")
    hierarchy.add_column("Recurring", width=10)
    hierarchy.add_column("Satisfied by", style="yellow")
    for goal, rank in sorted(actor.goal_hierarchy.items(), key=lambda kv: kv[1]):
        items = actor.satisfactions.get(goal, [])
        hierarchy.add_row(
            str(rank),
            str(goal),
            "yes" if goal in actor.recurring_goals else "—",
            ", ".join(str(i) for i in items) or "—",
        )
    out.print(hierarchy)

    queues = Table(title="Preference List", show_lines=True)
    queues.add_column("Item", style="yellow")
    queues.add_column("Best goal", style="green")
    queues.add_column("Queue (best first)")
    queues.add_column("Progress", style="dim")
    for item, queue in actor.preference_list.items():
        top = queue.peek()
        queues.add_row(
            str(item),
            str(top.goal) if top else "—",
            ", ".join(str(g) for g in queue.goals()) or "—",
            f"{top.record.units}/{top.record.units_required}" if top else "—",
        )
    out.print(queues)


def run_report(path: str | Path, uses: list[str] | None = None, out: Console | None = None) -> bool:
    """
    Load a scenario, apply item uses, and render the result.

    Returns:
        True if the scenario loaded, False otherwise.
    """
    out = out or console
    log = structlog.get_logger()

    try:
        scenario = load_scenario(path)
    except (OSError, ValidationError) as e:
        log.error("catallaxy.report.invalid_scenario", path=str(path), error=str(e))
        out.print(f"[bold red]✗ Could not load scenario {path}[/bold red]")
        out.print(f"  Reason: {e}")
        return False

    actor = Actor.from_scenario(scenario)
    log.info("catallaxy.report.loaded", actor=actor.name, goals=len(actor.goal_hierarchy))

    for item in uses or []:
        satisfied = actor.use_item(item)
        if satisfied is not None:
            out.print(f"  Used [yellow]{item}[/yellow] → satisfied [green]{satisfied.goal}[/green]")
        else:
            out.print(f"  Used [yellow]{item}[/yellow] → no goal satisfied")

    render_actor(actor, out)
    return True


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Render an actor's goal hierarchy and preference queues"
    )
    parser.add_argument("scenario", help="Path to a scenario JSON file")
    parser.add_argument(
        "--use",
        action="append",
        default=[],
        metavar="ITEM",
        help="Use an item before rendering (repeatable, applied in order)",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    parser.add_argument(
        "--log-format", choices=["json", "console"], default=None, help="Override LOG_FORMAT"
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_level, args.log_format)
    ok = run_report(args.scenario, uses=args.use)
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
