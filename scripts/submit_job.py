#!/usr/bin/env python3
"""
Compile Request Submission CLI

Builds a compile request from a resume file and a job description (URL or text
file), validates it, and prints the resulting job descriptor as JSON. Accepted
jobs are recorded in the job event log for the dispatch side to pick up.

Examples:\n

    submit_job.py --resume data/resume.json --jd https://jobs.example.com/123

    submit_job.py --resume data/resume.yaml --jd-text data/jd.txt --target-role "ML Engineer"
"""

import json
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from dossier.contexts.intake import accept_compile_request, build_compile_request
from dossier.contexts.intake.logger import setup_intake_logger
from dossier.contexts.schema.request import ScoringModel, TemplateName
from dossier.utils.event_logging import log_job_event
from dossier.utils.report_formatter import format_field_errors

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(help="Validate a compile request and emit a queued job descriptor.", add_completion=False)


@app.command()
def main(
    resume: Annotated[
        Path, typer.Option("--resume", "-r", help="Path to resume document (.json, .yaml)")
    ],
    jd_url: Annotated[
        Optional[str], typer.Option("--jd", help="Job description URL")
    ] = None,
    jd_text: Annotated[
        Optional[Path], typer.Option("--jd-text", help="Path to file containing job description text")
    ] = None,
    target_role: Annotated[
        Optional[str], typer.Option("--target-role", help="Role the resume is being targeted at")
    ] = None,
    template: Annotated[
        Optional[str],
        typer.Option("--template", help=f"Template name (e.g. {TemplateName.ONE_PAGE_V1.value})"),
    ] = None,
    scoring_model: Annotated[
        Optional[str],
        typer.Option(
            "--scoring-model", help=f"Scoring model (e.g. {ScoringModel.KEYWORD_ALIGNMENT_V1.value})"
        ),
    ] = None,
    log_dir: Annotated[
        Optional[Path], typer.Option("--log-dir", help="Directory for the session log")
    ] = None,
):
    """Submit a compile request and print the job descriptor."""
    if log_dir is None:
        log_dir = LOGS_PATH / "submit"
    log_file = setup_intake_logger(
        log_dir,
        phase="submit",
        resume_path=resume,
        jd_source=jd_url or (str(jd_text) if jd_text else None),
    )

    # Only pass what the user set; validation fills the rest
    prefs = {
        key: value
        for key, value in {
            "targetRole": target_role,
            "template": template,
            "scoringModel": scoring_model,
        }.items()
        if value is not None
    }

    try:
        raw_request = build_compile_request(resume, jd_url=jd_url, jd_text_path=jd_text, prefs=prefs)
    except (ValueError, FileNotFoundError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    result = accept_compile_request(raw_request)

    if not result.ok:
        typer.echo(format_field_errors(result.error.field_errors), err=True)
        typer.echo(json.dumps(result.to_dict(), indent=2))
        raise typer.Exit(1)

    log_job_event(
        event_type="job_created",
        job_id=result.job.job_id,
        source="cli",
        input_hash=result.job.input_hash,
        jd_type=result.request.jd.type,
        log_file=str(log_file),
    )
    typer.echo(json.dumps(result.to_dict(), indent=2))


if __name__ == "__main__":
    app()
