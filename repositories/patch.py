"""Partial-update helpers.

A patch is a plain dict holding only the fields a client actually supplied,
keyed by model attribute. Keys that are absent, null or blank are left out,
so applying the patch never touches them.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from utils.request_validation import is_blank


def collect_patch(
    data: Mapping[str, Any],
    fields: Mapping[str, str],
    converters: Mapping[str, Callable[[Any], Any]] | None = None,
) -> dict[str, Any]:
    """Map supplied request keys onto model attributes.

    ``fields`` maps request keys (``agendaUrl``) to attribute names
    (``agenda_url``). ``converters`` optionally parse a raw value per request key.
    """

    converters = converters or {}
    patch: dict[str, Any] = {}
    for key, attribute in fields.items():
        value = data.get(key)
        if is_blank(value):
            continue
        if isinstance(value, str):
            value = value.strip()
        convert = converters.get(key)
        patch[attribute] = convert(value) if convert else value
    return patch


def apply_patch(instance: object, patch: Mapping[str, Any]) -> list[str]:
    """Set every patched attribute on ``instance`` and return the changed names."""

    changed = []
    for attribute, value in patch.items():
        if getattr(instance, attribute) != value:
            setattr(instance, attribute, value)
            changed.append(attribute)
    return changed
