import logging
from typing import List, Optional
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from .checks import benchmark, run_checks
from .config import CheckConfig
from .specs import ALL_ALGORITHMS, Algorithm


app = typer.Typer(
    name="graphalgo",
    help="Graph algorithms property checker and benchmark",
    add_completion=False,
    pretty_exceptions_show_locals=False
)

console = Console()


def _config(algos: List[Algorithm], sizes: List[int], num_samples: int, seed: int,
            p: Optional[List[float]], low: Optional[float], high: Optional[float]) -> CheckConfig:
    try:
        return CheckConfig(algorithms=algos, sizes=sizes, num_samples=num_samples,
                           seed=seed, p=p or None, low=low, high=high)
    except ValueError as e:
        raise typer.BadParameter(str(e))


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging", is_flag=True, flag_value=True),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


@app.command("verify")
def verify(
    algos: List[Algorithm] = typer.Option(ALL_ALGORITHMS, "--algos", "-a", help="Algorithms to check"),
    sizes: List[int] = typer.Option([4, 7, 11, 13, 16], "--sizes", "-s", help="Graph sizes to sample"),
    num_samples: int = typer.Option(20, "--num-samples", "-n", help="Samples per algorithm and size"),
    seed: int = typer.Option(42, "--seed", help="Seed"),
    p: Optional[List[float]] = typer.Option(None, "--prob", "-p", help="Edge probabilities to draw from"),
    low: Optional[float] = typer.Option(None, "--low", help="Lowest edge weight"),
    high: Optional[float] = typer.Option(None, "--high", help="Highest edge weight"),
    no_progress: bool = typer.Option(False, "--no-progress", help="Hide the progress bar", is_flag=True, flag_value=True),
) -> None:
    """Checks every algorithm's properties on sampled graphs."""
    config = _config(algos, sizes, num_samples, seed, p, low, high)
    results = run_checks(config, progress=not no_progress)

    table = Table(
        title="\nProperty checks",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Algorithm", style="dim")
    table.add_column("Size", justify="right")
    table.add_column("Samples", justify="right")
    table.add_column("Failures", justify="right")
    table.add_column("Status")

    for r in results:
        status = "[green]ok[/green]" if r.passed else f"[red]{escape(r.errors[0])}[/red]"
        table.add_row(r.algorithm.value, str(r.size), str(r.samples), str(r.failures), status)
    console.print(table)

    if not all(r.passed for r in results):
        raise typer.Exit(code=1)


@app.command("bench")
def bench(
    algos: List[Algorithm] = typer.Option(ALL_ALGORITHMS, "--algos", "-a", help="Algorithms to time"),
    sizes: List[int] = typer.Option([16, 32, 64], "--sizes", "-s", help="Graph sizes to sample"),
    num_samples: int = typer.Option(10, "--num-samples", "-n", help="Samples per algorithm and size"),
    seed: int = typer.Option(42, "--seed", help="Seed"),
    p: Optional[List[float]] = typer.Option(None, "--prob", "-p", help="Edge probabilities to draw from"),
    no_progress: bool = typer.Option(False, "--no-progress", help="Hide the progress bar", is_flag=True, flag_value=True),
) -> None:
    """Times every algorithm on sampled graphs."""
    config = _config(algos, sizes, num_samples, seed, p, None, None)
    results = benchmark(config, progress=not no_progress)

    table = Table(
        title="\nTimings",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Algorithm", style="dim")
    table.add_column("Size", justify="right")
    table.add_column("Samples", justify="right")
    table.add_column("Mean (ms)", justify="right", style="green")
    table.add_column("Max (ms)", justify="right", style="yellow")

    for r in results:
        table.add_row(r.algorithm.value, str(r.size), str(r.samples), f"{r.mean_ms:.3f}", f"{r.max_ms:.3f}")
    console.print(table)


if __name__ == "__main__":
    app()
