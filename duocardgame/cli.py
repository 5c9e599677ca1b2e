"""CLI entry point."""

from __future__ import annotations

import logging
from typing import List, Optional

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Duo card game simulator")


def _configure_logging(level: str, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else level.upper(),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _parse_names(names: Optional[str]) -> Optional[List[str]]:
    if names is None:
        return None
    parsed = [n.strip() for n in names.split(",") if n.strip()]
    if len(parsed) < 2:
        raise typer.BadParameter("Give at least two comma-separated player names.")
    return parsed


def _check_seats(players: Optional[int], names: Optional[str]) -> None:
    if players is not None and names is not None:
        raise typer.BadParameter("Use either --players or --names, not both.")


def _load_settings():
    from duocardgame.config import Settings

    try:
        return Settings.from_env()
    except ValueError as exc:
        raise typer.BadParameter(str(exc))


def _make_strategy(kind: str):
    from duocardgame.agents import STRATEGIES

    try:
        return STRATEGIES[kind.strip().lower()]()
    except KeyError:
        raise typer.BadParameter(
            f"Unknown strategy: {kind}. Use one of: {', '.join(sorted(STRATEGIES))}."
        )


@app.command()
def play(
    players: Optional[int] = typer.Option(
        None, "--players", "-n", help="Number of players (random 2-4 when omitted)"
    ),
    names: Optional[str] = typer.Option(
        None, "--names", help="Comma-separated player names, e.g. Ann,Bob,Cy"
    ),
    strategy: str = typer.Option("heuristic", "--strategy", help="heuristic or random"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    csv: bool = typer.Option(True, "--csv/--no-csv", help="Export round scores as CSV"),
    csv_path: Optional[str] = typer.Option(None, "--csv-path", help="CSV output file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every game event"),
) -> None:
    """Run a single game to completion."""
    from duocardgame.export import CsvSnapshotSink
    from duocardgame.orchestration.game_runner import GameRunner

    _check_seats(players, names)
    settings = _load_settings()
    _configure_logging(settings.log_level, verbose)
    sink = CsvSnapshotSink(csv_path or settings.csv_path) if csv else None

    try:
        runner = GameRunner(
            _parse_names(names),
            num_players=players,
            settings=settings,
            seed=seed,
            strategy=_make_strategy(strategy),
            sink=sink,
        )
        result = runner.run()
    except ValueError as exc:
        raise typer.BadParameter(str(exc))
    for name, score in result.scores:
        typer.echo(f"  {name}: {score}")
    typer.echo(f"Winner: {result.winner or 'None'} with {result.winner_score} points")
    typer.echo(f"Rounds: {result.rounds}")


@app.command()
def tournament(
    games: int = typer.Option(100, "--games", "-g", help="Number of games"),
    players: Optional[int] = typer.Option(None, "--players", "-n", help="Number of players"),
    names: Optional[str] = typer.Option(None, "--names", help="Comma-separated player names"),
    strategy: str = typer.Option("heuristic", "--strategy", help="heuristic or random"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every game event"),
) -> None:
    """Run many games and report win counts."""
    from duocardgame.orchestration.tournament import run_tournament

    _check_seats(players, names)
    settings = _load_settings()
    _configure_logging(settings.log_level, verbose)
    try:
        wins = run_tournament(
            num_games=games,
            player_names=_parse_names(names),
            num_players=players,
            seed=seed,
            settings=settings,
            strategy=_make_strategy(strategy),
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc))
    typer.echo("Tournament results:")
    for name, w in sorted(wins.items(), key=lambda x: -x[1]):
        typer.echo(f"  {name}: {w} wins")


if __name__ == "__main__":
    app()
