from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Type

from pydantic import BaseModel, ValidationError

from sitemap_hub.canonical.registry import resolve_schema


@dataclass(frozen=True)
class CanonicalValidationResult:
    ok: bool
    model: BaseModel | None
    errors: list[dict[str, Any]]


def validate_url_payload(
    *,
    schema: str,
    schema_version: str,
    payload: dict[str, Any],
) -> CanonicalValidationResult:
    """
    Validate one sitemap URL payload against a registered schema.
    Errors are returned, not raised, so callers can report every bad entry.
    """
    try:
        Model: Type[BaseModel] = resolve_schema(schema, schema_version)
    except KeyError as e:
        return CanonicalValidationResult(
            ok=False,
            model=None,
            errors=[{"type": "schema_not_supported", "message": str(e)}],
        )

    try:
        obj = Model.model_validate(payload)
    except ValidationError as e:
        # ctx may hold exception objects; keep the error list JSON-safe
        return CanonicalValidationResult(
            ok=False,
            model=None,
            errors=e.errors(include_url=False, include_context=False),
        )

    return CanonicalValidationResult(ok=True, model=obj, errors=[])
