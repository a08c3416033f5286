"""
Canonical serialization and hashing of compile requests.

The digest is advisory metadata for caching and deduplication. It is never a
job identifier and is not meant as a security primitive.
"""

import hashlib
import json

from dossier.contexts.schema.request import CompileRequest


def canonicalize(request: CompileRequest) -> bytes:
    """
    Serialize a validated request to its canonical byte form.

    Keys are sorted, separators are compact, text is UTF-8 without ASCII
    escaping, and absent optional fields are omitted (so an explicit null and
    a missing key serialize identically). Defaults are already filled in by
    validation.

    Args:
        request: Validated compile request

    Returns:
        Canonical UTF-8 JSON bytes
    """
    return json.dumps(
        request.to_wire(),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    ).encode("utf-8")


def compute_input_hash(request: CompileRequest) -> str:
    """
    SHA-256 of the canonical request, as 64 lowercase hex characters.

    Preferences are part of the hashed content, so requests differing only in
    prefs.template hash differently.

    Example:
        >>> compute_input_hash(request)
        '3f4b0c...'
    """
    return hashlib.sha256(canonicalize(request)).hexdigest()
