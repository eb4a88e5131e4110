"""Command-line interface for the rating ledger."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer

from db import create_db_engine, create_session_factory
from domain.common import MatchRecord, ParticipantRecord
from domain.config import LedgerConfig, load_ledger_config
from domain.errors import InvalidArgumentError, LedgerError, NotFoundError
from logging_setup import setup_logging
from repositories.repository import ensure_ledger_schema
from services import MatchService, ParticipantService, StatsService

EXIT_NOT_FOUND = 1
EXIT_INVALID_ARGUMENT = 3

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Record head-to-head matches and query Elo ratings.",
)


@dataclass(frozen=True)
class LedgerContext:
    config: LedgerConfig
    participants: ParticipantService
    matches: MatchService
    stats: StatsService


def _exit_code(exc: LedgerError) -> int:
    if isinstance(exc, NotFoundError):
        return EXIT_NOT_FOUND
    if isinstance(exc, InvalidArgumentError):
        return EXIT_INVALID_ARGUMENT
    return 1


def _fail(exc: LedgerError) -> NoReturn:
    typer.echo(f"error: {exc}", err=True)
    raise typer.Exit(code=_exit_code(exc))


def _format_participant(participant: ParticipantRecord) -> str:
    return (
        f"id={participant.id} username={participant.username} "
        f"rating={participant.rating} created_at={participant.created_at.isoformat()}"
    )


def _format_match(match: MatchRecord) -> str:
    return (
        f"id={match.id} "
        f"a={match.participant_a.username}({match.participant_a.id}) "
        f"b={match.participant_b.username}({match.participant_b.id}) "
        f"winner={match.winner.username}({match.winner.id}) "
        f"played_at={match.played_at.isoformat()}"
    )


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", help="Ledger TOML config file."),
    ] = None,
    db_url: Annotated[
        Optional[str],
        typer.Option(
            "--db-url",
            envvar="KFACTOR_DB_URL",
            help="Database URL. Overrides [database].url from --config.",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", envvar="KFACTOR_LOG_LEVEL", help="Root log level."),
    ] = "WARNING",
) -> None:
    """Open the ledger database and make sure its schema exists."""
    setup_logging(log_level)

    config = load_ledger_config(config_path) if config_path is not None else LedgerConfig.default()
    engine = create_db_engine(db_url or config.db_url)
    ensure_ledger_schema(engine)
    session_factory = create_session_factory(engine)

    ctx.obj = LedgerContext(
        config=config,
        participants=ParticipantService(session_factory, config),
        matches=MatchService(session_factory, config),
        stats=StatsService(session_factory),
    )


@app.command("init-db")
def init_db(ctx: typer.Context) -> None:
    """Create the ledger tables if they are missing and print the active settings."""
    ledger: LedgerContext = ctx.obj
    for key, value in ledger.config.as_config_json().items():
        typer.echo(f"{key}={value}")
    typer.echo("schema ready")


@app.command("register")
def register(
    ctx: typer.Context,
    username: Annotated[str, typer.Argument(help="Unique username, 3-20 characters.")],
) -> None:
    """Register a participant at the initial rating."""
    ledger: LedgerContext = ctx.obj
    try:
        participant = ledger.participants.register(username)
    except LedgerError as exc:
        _fail(exc)
    typer.echo(_format_participant(participant))


@app.command("record-match")
def record_match(
    ctx: typer.Context,
    participant_a_id: Annotated[int, typer.Argument(help="First participant id.")],
    participant_b_id: Annotated[int, typer.Argument(help="Second participant id.")],
    winner_id: Annotated[int, typer.Argument(help="Id of the participant who won.")],
) -> None:
    """Record a match result and update both ratings."""
    ledger: LedgerContext = ctx.obj
    try:
        match = ledger.matches.record_match(participant_a_id, participant_b_id, winner_id)
    except LedgerError as exc:
        _fail(exc)
    typer.echo(_format_match(match))
    typer.echo(_format_participant(match.participant_a))
    typer.echo(_format_participant(match.participant_b))


@app.command("show-participant")
def show_participant(
    ctx: typer.Context,
    participant_id: Annotated[Optional[int], typer.Option("--id", help="Participant id.")] = None,
    username: Annotated[Optional[str], typer.Option("--username", help="Exact username.")] = None,
) -> None:
    """Show one participant by id or username."""
    if (participant_id is None) == (username is None):
        raise typer.BadParameter("pass exactly one of --id or --username")

    ledger: LedgerContext = ctx.obj
    try:
        if participant_id is not None:
            participant = ledger.participants.get(participant_id)
        else:
            participant = ledger.participants.get_by_username(username)
    except LedgerError as exc:
        _fail(exc)
    typer.echo(_format_participant(participant))


@app.command("list-participants")
def list_participants(ctx: typer.Context) -> None:
    ledger: LedgerContext = ctx.obj
    participants = ledger.participants.list_all()
    if not participants:
        typer.echo("No participants registered.")
        return
    for participant in participants:
        typer.echo(_format_participant(participant))


@app.command("delete-participant")
def delete_participant(
    ctx: typer.Context,
    participant_id: Annotated[int, typer.Argument(help="Participant id.")],
) -> None:
    """Delete a participant with no recorded matches."""
    ledger: LedgerContext = ctx.obj
    try:
        ledger.participants.delete(participant_id)
    except LedgerError as exc:
        _fail(exc)
    typer.echo(f"deleted participant id={participant_id}")


@app.command("leaderboard")
def leaderboard(
    ctx: typer.Context,
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", help="Number of participants to return. Defaults to config."),
    ] = None,
) -> None:
    """Print the top participants by rating."""
    ledger: LedgerContext = ctx.obj
    participants = ledger.participants.get_leaderboard(limit)
    if not participants:
        typer.echo("No participants to rank.")
        return
    for index, participant in enumerate(participants, start=1):
        typer.echo(f"{index:2d}. {participant.username:<20} rating={participant.rating:5d}")


@app.command("stats")
def stats(
    ctx: typer.Context,
    participant_id: Annotated[int, typer.Argument(help="Participant id.")],
) -> None:
    """Print win/loss totals for one participant."""
    ledger: LedgerContext = ctx.obj
    try:
        summary = ledger.stats.get_stats(participant_id)
    except LedgerError as exc:
        _fail(exc)
    typer.echo(
        f"participant_id={summary.participant_id} username={summary.username} "
        f"rating={summary.rating} total_matches={summary.total_matches} "
        f"wins={summary.wins} losses={summary.losses} win_rate={summary.win_rate:.2f}"
    )


@app.command("list-matches")
def list_matches(ctx: typer.Context) -> None:
    ledger: LedgerContext = ctx.obj
    matches = ledger.matches.list_matches()
    if not matches:
        typer.echo("No matches recorded.")
        return
    for match in matches:
        typer.echo(_format_match(match))


@app.command("show-match")
def show_match(
    ctx: typer.Context,
    match_id: Annotated[int, typer.Argument(help="Match id.")],
) -> None:
    ledger: LedgerContext = ctx.obj
    try:
        match = ledger.matches.get_match(match_id)
    except LedgerError as exc:
        _fail(exc)
    typer.echo(_format_match(match))


@app.command("participant-matches")
def participant_matches(
    ctx: typer.Context,
    participant_id: Annotated[int, typer.Argument(help="Participant id.")],
) -> None:
    """List one participant's matches, newest first."""
    ledger: LedgerContext = ctx.obj
    try:
        matches = ledger.matches.list_matches_for_participant(participant_id)
    except LedgerError as exc:
        _fail(exc)
    if not matches:
        typer.echo(f"No matches recorded for participant id={participant_id}.")
        return
    for match in matches:
        typer.echo(_format_match(match))


if __name__ == "__main__":
    app()
