"""Main CLI interface using Typer."""

from pathlib import Path
from typing import Optional

import typer
from prometheus_client import write_to_textfile
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..core import PlanService, PrometheusObserver, format_plan, load_matrix
from ..exporters import get_exporter
from ..model.export import PlanFormat
from ..model.matrix import Platform
from ..model.plan import UpgradePlan
from ..utils.logger import get_logger, set_verbose

# Create CLI app
app = typer.Typer(
    name="rancher-upgrade-planner",
    help="Plan Rancher Manager and Kubernetes upgrade paths",
    add_completion=True,
)

console = Console()
logger = get_logger(__name__)

MATRIX_OPTION_HELP = "Compatibility matrix file (default: $UPGRADE_PLANNER_MATRIX or bundled data)"
CONFIG_OPTION_HELP = "Planner policy file (default: $UPGRADE_PLANNER_CONFIG or built-in rules)"
PLATFORM_ARGUMENT_HELP = f"Kubernetes platform ({', '.join(p.value for p in Platform)})"


def _print_plan_table(plan: UpgradePlan) -> None:
    """Print the plan as a table, one row per step."""
    if plan.is_empty:
        console.print("[yellow]No upgrade path found for the provided input.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta", title="Upgrade Plan")
    table.add_column("#", style="dim")
    table.add_column("Type", style="cyan")
    table.add_column("Platform", style="green")
    table.add_column("From", style="white")
    table.add_column("To", style="white")

    for i, step in enumerate(plan.upgrade_path, 1):
        style = "bold" if step.is_rancher else None
        table.add_row(
            str(i), step.type, step.platform or "", step.from_version, step.to_version, style=style
        )

    console.print(table)
    console.print(
        f"Final versions: Rancher [green]{plan.final_rancher}[/green], "
        f"Kubernetes [green]{plan.final_kubernetes}[/green]"
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Plan Rancher Manager and Kubernetes upgrade paths."""
    if verbose:
        set_verbose(True)


@app.command()
def plan(
    platform: str = typer.Argument(help=PLATFORM_ARGUMENT_HELP),
    rancher: str = typer.Argument(help="Current Rancher Manager version"),
    kubernetes: str = typer.Argument(help="Current Kubernetes version"),
    matrix: Optional[Path] = typer.Option(None, "--matrix", "-m", help=MATRIX_OPTION_HELP),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_OPTION_HELP),
    format: PlanFormat = typer.Option(
        PlanFormat.TEXT, "--format", "-f", help="Output format for the plan"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Directory to save the plan to"
    ),
    metrics_file: Optional[Path] = typer.Option(
        None, "--metrics-file", help="Write request metrics in Prometheus text format to this file"
    ),
):
    """Plan the upgrade from the current Rancher and Kubernetes versions."""
    observer = PrometheusObserver() if metrics_file else None
    try:
        service = PlanService.from_files(matrix, config, observer)
        logger.debug(f"Known Rancher versions: {', '.join(service.known_versions)}")
        upgrade_plan = service.plan(platform, rancher, kubernetes)

        if format == PlanFormat.TEXT:
            console.print(
                f"Planning [cyan]{upgrade_plan.platform}[/cyan] upgrade from "
                f"Rancher [cyan]{rancher}[/cyan], Kubernetes [cyan]{kubernetes}[/cyan]"
            )
            _print_plan_table(upgrade_plan)
        else:
            typer.echo(format_plan(upgrade_plan, format))

        if output:
            exporter = get_exporter(format, output)
            name = f"upgrade-plan-{upgrade_plan.platform}-{rancher}"
            path = exporter.export(upgrade_plan, name)
            console.print(f"[green]✓[/green] Plan saved to: [cyan]{path}[/cyan]", highlight=False)

    except Exception as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    finally:
        if observer is not None:
            write_to_textfile(str(metrics_file), observer.registry)
            logger.info(f"Wrote request metrics to {metrics_file}")


@app.command()
def checkpoints(
    matrix: Optional[Path] = typer.Option(None, "--matrix", "-m", help=MATRIX_OPTION_HELP),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_OPTION_HELP),
):
    """List the Rancher releases every upgrade must pass through."""
    try:
        service = PlanService.from_files(matrix, config)
        versions = service.checkpoints()

        if not versions:
            console.print("[yellow]No checkpoint versions found in the matrix[/yellow]")
            return

        console.print(f"[bold]Checkpoint versions ({len(versions)}):[/bold]")
        for version in versions:
            console.print(f"  • {version}", highlight=False)

    except Exception as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def platforms(
    rancher: str = typer.Argument(help="Rancher Manager version"),
    matrix: Optional[Path] = typer.Option(None, "--matrix", "-m", help=MATRIX_OPTION_HELP),
):
    """Show the Kubernetes versions a Rancher release supports."""
    try:
        compatibility = load_matrix(matrix)
        supported = compatibility.platforms_for(rancher)

        if not supported:
            console.print(f"[yellow]No compatibility data for Rancher {rancher}[/yellow]")
            raise typer.Exit(1)

        table = Table(show_header=True, header_style="bold magenta", title=f"Rancher {rancher}")
        table.add_column("Platform", style="cyan")
        table.add_column("Min Version", style="green")
        table.add_column("Max Version", style="green")
        table.add_column("Notes", style="white")

        for support in supported:
            table.add_row(
                support.platform, support.min_version, support.max_version, support.notes or ""
            )

        console.print(table)

    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def version():
    """Show version information."""
    console.print(f"[bold]rancher-upgrade-planner[/bold] version {__version__}", highlight=False)
    console.print("Plans Rancher Manager and Kubernetes upgrade paths from a compatibility matrix")


if __name__ == "__main__":
    app()
