"\"\"\"Typer CLI entrypoint for the talent network.\"\"\""

from __future__ import annotations

import json
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Optional

import typer
import yaml
from pydantic import ValidationError

from .board import PipelineBoard
from .config import load_settings, read_yaml
from .container import TalentContainer, create_container
from .core.states import PIPELINE_STAGES, STATUS_LABELS, is_forward_status_move, stage_title
from .dashboard import Dashboard
from .db import init_db
from .errors import CandidateNotFound, NotAuthenticated, ValidationFailed
from .intake import COMPLETION_MESSAGE, QUESTION_KEYS, IntakeConversation, name_parts_from_email
from .logging import configure_logging
from .resume_text import extract_resume_text
from .schemas import CandidateRecord
from .service import CandidateService
from .session import login

app = typer.Typer(help="Talent network candidate screening and pipeline CLI.")


@app.callback()
def main_options(
    ctx: typer.Context,
    database_url: Optional[str] = typer.Option(
        None,
        envvar="TALENT_NETWORK_DATABASE_URL",
        help="SQLAlchemy database URL; overrides the config file.",
    ),
    config: Optional[Path] = typer.Option(
        None, exists=True, readable=True, dir_okay=False, help="YAML config path."
    ),
    log_level: str = typer.Option("WARNING", help="Log level for structured logging."),
) -> None:
    """Load configuration and build the service container."""
    configure_logging(log_level)

    try:
        app_config = load_settings(config)
    except (ValidationError, yaml.YAMLError) as exc:
        raise typer.BadParameter(f"Invalid config file: {exc}", param_hint="--config") from exc

    if database_url:
        database = app_config.database.model_copy(update={"url": database_url})
        app_config = app_config.model_copy(update={"database": database})

    ctx.obj = create_container(settings=app_config)


@contextmanager
def _reported_errors() -> Iterator[None]:
    try:
        yield
    except ValidationFailed as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    except (CandidateNotFound, NotAuthenticated) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


def _container(ctx: typer.Context) -> TalentContainer:
    return ctx.obj


def _service(ctx: typer.Context) -> CandidateService:
    container = _container(ctx)
    init_db(container.db_engine())
    return container.candidate_service()


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _record_json(record: CandidateRecord) -> dict[str, Any]:
    return record.model_dump(mode="json", by_alias=True)


def _summary_line(record: CandidateRecord) -> str:
    stage = record.pipeline_stage.value if record.pipeline_stage else "-"
    return "\t".join(
        (str(record.id), record.display_name, str(record.ai_score), record.status.value, stage)
    )


@app.command("init-db")
def init_database(ctx: typer.Context) -> None:
    """Create database tables."""
    init_db(_container(ctx).db_engine())
    typer.echo("Database initialized.")


@app.command()
def screen(
    ctx: typer.Context,
    resume: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Resume file."),
    signals: bool = typer.Option(False, "--signals", help="Include per-evaluator signals."),
) -> None:
    """Screen a resume without storing anything."""
    engine = _container(ctx).screening_engine()
    result = engine.screen(extract_resume_text(resume))
    _echo_json(result.to_dict(include_signals=signals))


@app.command()
def submit(
    ctx: typer.Context,
    email: str = typer.Option(..., help="Candidate email address."),
    resume: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Resume file."),
    first_name: Optional[str] = typer.Option(None, help="First name; derived from email if omitted."),
    last_name: Optional[str] = typer.Option(None, help="Last name; derived from email if omitted."),
) -> None:
    """Submit a candidate: screen the resume and store the result."""
    if first_name is None and last_name is None:
        first_name, last_name = name_parts_from_email(email)

    with _reported_errors():
        record = _service(ctx).create_candidate(
            {
                "email": email,
                "first_name": first_name,
                "last_name": last_name,
                "resume_text": extract_resume_text(resume),
                "resume_file_name": resume.name,
            }
        )
    _echo_json(_record_json(record))


@app.command("list")
def list_candidates(
    ctx: typer.Context,
    stage: Optional[str] = typer.Option(None, help="Only candidates in this pipeline stage."),
) -> None:
    """List candidates, newest first."""
    with _reported_errors():
        service = _service(ctx)
        records = (
            service.list_candidates_by_stage(stage) if stage else service.list_candidates()
        )
    for record in records:
        typer.echo(_summary_line(record))


@app.command()
def show(ctx: typer.Context, candidate_id: str = typer.Argument(..., help="Candidate id.")) -> None:
    """Show a candidate with their intake responses."""
    with _reported_errors():
        service = _service(ctx)
        record = service.get_candidate(candidate_id)
        responses = service.list_intake_responses(record.id)
    payload = _record_json(record)
    payload["statusLabel"] = STATUS_LABELS[record.status]
    payload["stageTitle"] = stage_title(record.pipeline_stage) if record.pipeline_stage else None
    payload["intakeResponses"] = [
        response.model_dump(mode="json", by_alias=True) for response in responses
    ]
    _echo_json(payload)


@app.command("set-status")
def set_status(
    ctx: typer.Context,
    candidate_id: str = typer.Argument(..., help="Candidate id."),
    status: str = typer.Argument(..., help="New status."),
) -> None:
    """Change a candidate's status.

    Any status may be set; ``forward`` in the output tells whether the change
    followed the usual progression.
    """
    with _reported_errors():
        service = _service(ctx)
        previous = service.get_candidate(candidate_id).status
        record = service.update_status(candidate_id, status)
    payload = _record_json(record)
    payload["previousStatus"] = previous.value
    payload["forward"] = is_forward_status_move(previous, record.status)
    _echo_json(payload)


@app.command()
def move(
    ctx: typer.Context,
    candidate_id: str = typer.Argument(..., help="Candidate id."),
    stage: str = typer.Argument(..., help="Target pipeline stage."),
    admin: str = typer.Option(..., help="Admin email to log in with."),
) -> None:
    """Move a candidate across the pipeline board."""
    with _reported_errors():
        board = PipelineBoard(_service(ctx), login(admin))
        result = board.move(candidate_id, stage)
        if result.error is not None:
            typer.echo(f"Move rolled back to {result.stage.value}.", err=True)
            raise result.error
    if result.changed:
        typer.echo(f"Moved {result.candidate_id} to {result.stage.value}.")
    else:
        typer.echo(f"{result.candidate_id} is already in {result.stage.value}.")


@app.command()
def rescreen(ctx: typer.Context, candidate_id: str = typer.Argument(..., help="Candidate id.")) -> None:
    """Re-run screening over a stored resume."""
    with _reported_errors():
        record = _service(ctx).rescreen_candidate(candidate_id)
    _echo_json(_record_json(record))


@app.command()
def intake(ctx: typer.Context, candidate_id: str = typer.Argument(..., help="Candidate id.")) -> None:
    """Run the intake conversation interactively, resuming if already started."""
    with _reported_errors():
        conversation = IntakeConversation.resume(_service(ctx), candidate_id)
        if conversation.is_complete:
            typer.echo(COMPLETION_MESSAGE)
            return
        if conversation.answered == 0:
            typer.echo(conversation.greeting())
        message = conversation.current_question.text
        while not conversation.is_complete:
            response = typer.prompt(message)
            _, message = conversation.answer(response)
        typer.echo(message)


@app.command()
def search(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Name or email to look for."),
    admin: str = typer.Option(..., help="Admin email to log in with."),
) -> None:
    """Search candidates by name or email."""
    with _reported_errors():
        records = Dashboard(_service(ctx), login(admin)).search(query)
    for record in records:
        typer.echo(_summary_line(record))


@app.command()
def stats(
    ctx: typer.Context,
    admin: str = typer.Option(..., help="Admin email to log in with."),
) -> None:
    """Print dashboard statistics."""
    with _reported_errors():
        summary = Dashboard(_service(ctx), login(admin)).stats()
    payload = summary.model_dump(mode="json", by_alias=True)
    payload["byStage"] = {
        title: summary.by_stage.get(stage, 0) for stage, title in PIPELINE_STAGES
    }
    _echo_json(payload)


@app.command()
def seed(
    ctx: typer.Context,
    file: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Seed YAML path."),
) -> None:
    """Submit candidates, and optionally their intake answers, from a YAML file."""
    try:
        loaded = read_yaml(file) or {}
    except yaml.YAMLError as exc:
        raise typer.BadParameter(f"Invalid seed file: {exc}", param_hint="--file") from exc
    entries = loaded.get("candidates") if isinstance(loaded, dict) else None
    if not isinstance(entries, list):
        raise typer.BadParameter("Seed file must contain a 'candidates' list", param_hint="--file")

    with _reported_errors():
        service = _service(ctx)
        for entry in entries:
            record = _seed_candidate(service, dict(entry), base_dir=file.parent)
            typer.echo(_summary_line(record))
    typer.echo(f"Seeded {len(entries)} candidates.")


def _seed_candidate(
    service: CandidateService, entry: dict[str, Any], *, base_dir: Path
) -> CandidateRecord:
    answers = entry.pop("intake", None) or {}
    unknown = sorted(set(answers) - QUESTION_KEYS)
    if unknown:
        raise ValidationFailed.single("intake", f"Unknown intake questions: {', '.join(unknown)}")

    resume_file = entry.pop("resume_file", None)
    if resume_file is not None:
        path = base_dir / resume_file
        entry.setdefault("resume_text", extract_resume_text(path))
        entry.setdefault("resume_file_name", path.name)

    if "first_name" not in entry and "last_name" not in entry and "email" in entry:
        entry["first_name"], entry["last_name"] = name_parts_from_email(str(entry["email"]))

    record = service.create_candidate(entry)
    if not answers:
        return record

    conversation = IntakeConversation.resume(service, record.id)
    while not conversation.is_complete and conversation.current_question.key in answers:
        conversation.answer(str(answers[conversation.current_question.key]))
    return record


def main() -> None:
    app()


if __name__ == "__main__":
    main()
