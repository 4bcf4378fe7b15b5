"""Projection of raw JSON objects onto requested attributes."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..models import AttributeConfig

_MISSING = object()


def _lookup(obj: dict[str, Any], external_id: str) -> Any:
    # "$.a.b" walks nested objects; anything else is a top-level key.
    if not external_id.startswith("$."):
        return obj.get(external_id, _MISSING)

    current: Any = obj
    for part in external_id[2:].split("."):
        if not isinstance(current, dict) or part not in current:
            return _MISSING
        current = current[part]
    return current


def project_objects(
    objects: Iterable[dict[str, Any]], attributes: Iterable[AttributeConfig]
) -> list[dict[str, Any]]:
    """Keep only the requested attributes of each object, keyed by external ID.

    Attributes absent from an object are omitted rather than set to None.
    """
    external_ids = [attr.external_id for attr in attributes]
    out: list[dict[str, Any]] = []
    for obj in objects:
        projected = {}
        for external_id in external_ids:
            value = _lookup(obj, external_id)
            if value is not _MISSING:
                projected[external_id] = value
        out.append(projected)
    return out
