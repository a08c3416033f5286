"""
DOSSIER - Document Orchestration for Structured Submissions, Intake, Evaluation and Rendering

The contract boundary of a resume compilation pipeline. Accepts a structured
resume and a job description reference, validates them against a strict schema,
and emits a deterministic job descriptor for downstream stages.

Architecture:
- Schema Context: Primitive validators, resume / job description documents, compile requests
- Jobs Context: Canonical input hashing and the job descriptor lifecycle model
- Intake Context: Inbound boundary that turns raw input into a queued job descriptor
"""

__version__ = "0.1.0"
