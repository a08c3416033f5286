#!/usr/bin/env python3
"""
Validate a resume (or normalized job description) document.

Usage:
    python scripts/validate_resume.py data/resume.json
    python scripts/validate_resume.py data/jd_normalized.yaml --jd
"""

from pathlib import Path

import typer

from dossier.contexts.intake import load_document
from dossier.contexts.schema import ValidationError, parse_normalized_jd, parse_resume
from dossier.utils.report_formatter import format_field_errors

app = typer.Typer(help="Validate resume and job description documents.")


@app.command()
def main(
    document_path: Path = typer.Argument(..., help="Path to the document (.json, .yaml)"),
    jd: bool = typer.Option(False, "--jd", help="Validate as a normalized job description"),
):
    """Validate a document and print a field-error report."""
    try:
        raw = load_document(document_path)
    except (ValueError, FileNotFoundError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    try:
        if jd:
            document = parse_normalized_jd(raw)
        else:
            document = parse_resume(raw)
    except ValidationError as e:
        typer.echo(format_field_errors(e.field_errors, title=f"INVALID {e.document.upper()}"))
        raise typer.Exit(1)

    typer.echo(f"Loaded {document_path.name}")
    if jd:
        typer.echo(f"  source: {document.source.source_type.value} ({document.source.source_value})")
        typer.echo(f"  title: {document.title or '(none)'}")
        typer.echo(f"  text: {len(document.text)} chars")
    else:
        typer.echo(f"  name: {document.basics.full_name}")
        typer.echo(f"  experience: {len(document.experience)} entries")
        typer.echo(f"  projects: {len(document.projects)} entries")
        typer.echo(f"  education: {len(document.education)} entries")
        typer.echo(f"  skills: {len(document.skills)}")
        bullets = list(document.iter_bullets())
        claimed = sum(1 for _, bullet in bullets if bullet.claims)
        typer.echo(f"  bullets: {len(bullets)} ({claimed} with claims)")

    typer.secho("\n✓ Validation successful", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
