"""Text rendering of settings documents (JSON or YAML)."""

from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from .errors import SettingsFormatError

JSON = "json"
YAML = "yaml"
FORMATS = (JSON, YAML)


def _check_format(fmt: str) -> str:
    normalized = str(fmt).strip().lower()
    if normalized == "yml":
        normalized = YAML
    if normalized not in FORMATS:
        raise ValueError(f"Unknown settings format: {fmt!r}")
    return normalized


def dumps(doc: Dict[str, Any], fmt: str = JSON) -> str:
    """Render ``doc`` keeping its field order."""

    if _check_format(fmt) == YAML:
        return yaml.safe_dump(doc, allow_unicode=False, sort_keys=False)
    return json.dumps(doc, ensure_ascii=False, indent=2) + "\n"


def loads(text: str, fmt: str = JSON) -> Dict[str, Any]:
    """Parse ``text`` into a document mapping.

    Raises :class:`SettingsFormatError` when the text cannot be parsed or its
    root is not an object.
    """

    if _check_format(fmt) == YAML:
        try:
            payload = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise SettingsFormatError(f"Invalid YAML settings document: {exc}") from exc
        if payload is None:
            payload = {}
    else:
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SettingsFormatError(f"Invalid JSON settings document: {exc}") from exc
    if not isinstance(payload, dict):
        raise SettingsFormatError(f"Settings document must be an object, got {type(payload).__name__}")
    return payload
