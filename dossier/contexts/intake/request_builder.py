"""
Build raw compile requests from files on disk.

Used by scripts/submit_job.py. The output is an untyped mapping meant to be
passed to accept_compile_request(), which does all the validation.
"""

import json
from pathlib import Path
from typing import Optional

import yaml
from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

YAML_SUFFIXES = {".yaml", ".yml"}


def load_document(path: Path) -> dict:
    """
    Load a JSON or YAML document into a plain dict.

    Args:
        path: .json, .yaml or .yml file

    Returns:
        Top-level mapping

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file cannot be decoded, has an unsupported suffix,
            or its top level is not a mapping
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"{path.name} is not valid JSON: {e}") from e
    elif suffix in YAML_SUFFIXES:
        try:
            config = OmegaConf.load(path)
        except (yaml.YAMLError, OmegaConfBaseException) as e:
            raise ValueError(f"{path.name} is not valid YAML: {e}") from e
        if not isinstance(config, DictConfig):
            raise ValueError(f"{path.name} must contain a mapping at the top level")
        data = OmegaConf.to_container(config, resolve=True)
    else:
        raise ValueError(f"Unsupported document type '{suffix}' (expected .json, .yaml or .yml)")

    if not isinstance(data, dict):
        raise ValueError(f"{path.name} must contain a mapping at the top level")
    return data


def build_compile_request(
    resume_path: Path,
    jd_url: Optional[str] = None,
    jd_text_path: Optional[Path] = None,
    prefs: Optional[dict] = None,
) -> dict:
    """
    Assemble a raw compile request.

    Exactly one job description source is required: a URL (fetched later by
    another stage) or a text file whose content is sent inline.

    Args:
        resume_path: Resume document (.json / .yaml)
        jd_url: Job description URL
        jd_text_path: File containing job description text
        prefs: Wire-format preferences (camelCase keys); omitted when empty

    Returns:
        Raw request mapping

    Raises:
        ValueError: If zero or two job description sources are given, or the
            resume cannot be decoded
        FileNotFoundError: If an input file does not exist

    Example:
        >>> build_compile_request(Path("resume.json"), jd_url="https://jobs.example.com/42")
        {'resume': {...}, 'jd': {'type': 'url', 'url': 'https://jobs.example.com/42'}}
    """
    if not jd_url and not jd_text_path:
        raise ValueError("Either a job description URL or a job description text file is required")
    if jd_url and jd_text_path:
        raise ValueError("Provide only one of a job description URL or a job description text file")

    resume = load_document(resume_path)

    if jd_url:
        jd = {"type": "url", "url": jd_url}
    else:
        jd = {"type": "text", "text": Path(jd_text_path).read_text(encoding="utf-8")}

    request = {"resume": resume, "jd": jd}
    if prefs:
        request["prefs"] = prefs
    return request
