"""
Response Schemas

JSON Schema (draft 4) documents for the v2 API responses, and helpers to
validate parsed response bodies against them.

Schemas reference each other by file name (``definitions.json#/uuid``) and by
short alias (``notification.json``, ``template.json``, ``receivedText.json``);
all of them are resolved from this package, never fetched.
"""

from __future__ import annotations

import copy
import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft4Validator
from referencing import Registry, Resource
from referencing.jsonschema import DRAFT4

SCHEMA_DIR = Path(__file__).parent / "v2"

SCHEMA_ALIASES = {
    "notification.json": "GET_notification_response.json",
    "template.json": "GET_template_by_id.json",
    "receivedText.json": "GET_received_text_response.json",
}


def schema_names() -> list[str]:
    """Names of all bundled schema documents."""
    return sorted(path.name for path in SCHEMA_DIR.glob("*.json"))


def load_schema(name: str) -> dict[str, Any]:
    """
    Load a bundled schema by file name or alias.

    Args:
        name: e.g. "GET_notification_response.json" or "notification.json"

    Raises:
        FileNotFoundError: If no such schema is bundled
    """
    return copy.deepcopy(_read_schema(name))


@lru_cache(maxsize=None)
def _read_schema(name: str) -> dict[str, Any]:
    path = SCHEMA_DIR / SCHEMA_ALIASES.get(name, name)
    if not path.is_file():
        raise FileNotFoundError(f"Unknown response schema: {name}")
    with path.open(encoding="utf-8") as f:
        return json.load(f)


@lru_cache(maxsize=None)
def build_registry() -> Registry:
    """Registry holding every bundled schema under its file name and aliases."""
    resources = [
        (name, Resource.from_contents(_read_schema(name), default_specification=DRAFT4))
        for name in [*schema_names(), *SCHEMA_ALIASES]
    ]
    return Registry().with_resources(resources)


def get_validator(name: str) -> Draft4Validator:
    return Draft4Validator(_read_schema(name), registry=build_registry())


def validate_response(body: Any, name: str) -> None:
    """
    Validate a parsed response body.

    Args:
        body: Parsed JSON returned by a client method
        name: Schema file name or alias

    Raises:
        jsonschema.ValidationError: If the body does not match the schema
    """
    get_validator(name).validate(body)


def iter_errors(body: Any, name: str) -> list[str]:
    """Human readable validation errors, empty when the body is valid."""
    return [
        f"{'/'.join(str(p) for p in error.absolute_path) or '<root>'}: {error.message}"
        for error in get_validator(name).iter_errors(body)
    ]
