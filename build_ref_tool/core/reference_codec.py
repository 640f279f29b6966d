"""Encoding and decoding of stored build references"""

import json
import logging

from ..models.reference import BuildReference

logger = logging.getLogger(__name__)

STRUCTURED_PREFIX = "{"


def decode_reference(raw: str) -> BuildReference:
    """Parse a stored build reference

    Text starting with ``{`` is read as a structured (JSON) record.
    Anything else is the legacy form: whitespace separated commit
    and tag. Unreadable content yields an empty reference instead of
    an error.

    Args:
        raw: Record content

    Returns:
        Decoded reference
    """
    raw = raw or ""
    if not raw.lstrip().startswith(STRUCTURED_PREFIX):
        parts = raw.split()
        return BuildReference(
            commit=parts[0] if len(parts) > 0 else None,
            tag=parts[1] if len(parts) > 1 else None,
        )

    try:
        data = json.loads(raw)
    except ValueError as e:
        logger.warning(f"Ignoring malformed build reference: {e}")
        return BuildReference()

    if not isinstance(data, dict):
        return BuildReference()

    return BuildReference.from_dict(data)


def encode_reference(reference: BuildReference) -> str:
    """Serialize a build reference to the structured form

    Args:
        reference: Reference with a commit

    Returns:
        Record content

    Raises:
        ValueError: If the commit is unset
    """
    return json.dumps(reference.to_dict())
