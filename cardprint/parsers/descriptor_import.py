"""
Descriptor import from ingestion records.

Ingestion sources hand over loosely keyed records: camelCase from the
web client and marketplace imports, snake_case from internal jobs, and
short aliases such as "certNumber" and "grader". This module maps those
keys onto the fixed CardDescriptor fields and drops everything else.

Supported text formats for parse_descriptors():
    - JSON array of objects
    - Single JSON object
    - JSON Lines (one object per line)
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

from cardprint.models.descriptor import CardDescriptor

logger = logging.getLogger(__name__)

# Record key -> CardDescriptor field
FIELD_ALIASES: dict[str, str] = {
    "certification_number": "certification_number",
    "certificationNumber": "certification_number",
    "cert_number": "certification_number",
    "certNumber": "certification_number",
    "player_name": "player_name",
    "playerName": "player_name",
    "set_name": "set_name",
    "setName": "set_name",
    "year": "year",
    "card_number": "card_number",
    "cardNumber": "card_number",
    "variant": "variant",
    "grade": "grade",
    "grading_authority": "grading_authority",
    "gradingAuthority": "grading_authority",
    "grader": "grading_authority",
}


class DescriptorImportError(Exception):
    """Raised when descriptor input cannot be parsed."""


def _coerce_value(key: str, value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise DescriptorImportError(
            f"Field '{key}' must be a string or integer, got {type(value).__name__}"
        )
    return str(value)


def descriptor_from_record(record: Mapping[str, Any]) -> CardDescriptor:
    """
    Build a CardDescriptor from a loosely keyed record.

    Args:
        record: Mapping with snake_case or camelCase field names

    Returns:
        CardDescriptor; unknown keys are ignored, missing keys are None

    Raises:
        DescriptorImportError: If a known field holds something other than
            a string or integer, or two aliases give conflicting values
    """
    values: dict[str, str | None] = {}
    ignored: list[str] = []

    for key, raw in record.items():
        field = FIELD_ALIASES.get(key)
        if field is None:
            ignored.append(key)
            continue

        value = _coerce_value(key, raw)
        if field in values and values[field] != value:
            raise DescriptorImportError(
                f"Conflicting values for '{field}': {values[field]!r} and {value!r}"
            )
        values[field] = value

    if ignored:
        logger.debug("Ignored unknown descriptor keys: %s", ", ".join(sorted(ignored)))

    return CardDescriptor(**values)


def _load_json_lines(text: str) -> list[tuple[str, Any]]:
    """Load one JSON value per non-blank line, labelled with its line number."""
    entries: list[tuple[str, Any]] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            entries.append((f"Line {line_number}", json.loads(line)))
        except json.JSONDecodeError as exc:
            raise DescriptorImportError(f"Line {line_number}: invalid JSON: {exc.msg}") from exc
    return entries


def parse_descriptors(text: str) -> list[CardDescriptor]:
    """
    Parse descriptors from JSON or JSON Lines text.

    Args:
        text: JSON array, single JSON object, or JSON Lines

    Returns:
        List of CardDescriptor objects. Empty list if input is empty/whitespace.

    Raises:
        DescriptorImportError: On malformed JSON or non-object entries
    """
    if not text or not text.strip():
        return []

    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        # Not a single JSON document, try one object per line
        entries = _load_json_lines(text)
    else:
        items = data if isinstance(data, list) else [data]
        entries = [(f"Entry {index}", item) for index, item in enumerate(items)]

    descriptors: list[CardDescriptor] = []
    for label, entry in entries:
        if not isinstance(entry, Mapping):
            raise DescriptorImportError(
                f"{label}: expected a JSON object, got {type(entry).__name__}"
            )
        try:
            descriptors.append(descriptor_from_record(entry))
        except DescriptorImportError as exc:
            raise DescriptorImportError(f"{label}: {exc}") from exc

    logger.debug("Parsed %d descriptors", len(descriptors))
    return descriptors
