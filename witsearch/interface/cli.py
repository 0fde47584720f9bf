# witsearch/interface/cli.py

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.prompt import Prompt
from rich import box

from witsearch.domain.models import SearchOutcome


console = Console()


def display_welcome_banner() -> None:
    console.print(Panel.fit(
        "[bold cyan]🔍 Inventory Search[/bold cyan]\n"
        "[dim]Synonyms + BM25 text index + typo-tolerant fuzzy fallback[/dim]",
        box=box.DOUBLE,
        border_style="cyan",
    ))


def display_catalog_status(num_items: int, num_groups: int) -> None:
    console.print(
        f"\n[green]✓[/green] Catalog ready — [bold]{num_items}[/bold] items, "
        f"[bold]{num_groups}[/bold] synonym groups.\n"
    )


def prompt_for_query() -> str:
    return Prompt.ask("\n[bold yellow]❓ What are you looking for[/bold yellow]")


def display_outcome(query: str, outcome: SearchOutcome) -> None:
    console.print(
        f"\n[bold]Results for:[/bold] [italic]\"{query}\"[/italic] "
        f"[dim]({outcome.search_method}, {outcome.fuzzy_matches} fuzzy)[/dim]\n"
    )

    if outcome.synonyms_used:
        console.print(f"[dim]Also searched:[/dim] {', '.join(outcome.synonyms_used)}")

    if outcome.items:
        table = Table(box=box.ROUNDED, show_lines=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Item", style="bold white")
        table.add_column("Location")
        table.add_column("Matched on")
        table.add_column("Source")
        table.add_column("Score", justify="right")

        for rank, result in enumerate(outcome.items, start=1):
            color = _score_to_color(result.score)
            table.add_row(
                str(rank),
                result.record.name,
                result.record.location_id or "—",
                result.matched_field or "text index",
                result.source,
                f"[{color}]{result.score:.2f}[/{color}]",
            )
        console.print(table)
    else:
        console.print("[yellow]No items found.[/yellow]")

    if outcome.suggestions:
        console.print(f"\n[bold]Did you mean:[/bold] {', '.join(outcome.suggestions)}?")


def display_error(message: str) -> None:
    console.print(f"\n[bold red]✗ Error:[/bold red] {message}\n")


def ask_continue() -> bool:
    answer = Prompt.ask(
        "\n[dim]Search again?[/dim]",
        choices=["y", "n"],
        default="y",
    )
    return answer.lower() == "y"


def _score_to_color(score: float) -> str:
    if score >= 0.75:
        return "green"
    elif score >= 0.50:
        return "yellow"
    else:
        return "red"
