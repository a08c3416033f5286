"""
Intake Context

Responsibilities:
- Accepts raw compile requests and turns them into queued job descriptors
- Builds raw requests from resume / job description files for the CLI

Owns: The inbound boundary (acceptCompileRequest)
Never: Fetches job descriptions, schedules or executes jobs
"""

from dossier.contexts.intake.acceptance import AcceptanceResult, accept_compile_request
from dossier.contexts.intake.request_builder import build_compile_request, load_document

__all__ = [
    "AcceptanceResult",
    "accept_compile_request",
    "build_compile_request",
    "load_document",
]
