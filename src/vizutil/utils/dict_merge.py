from __future__ import annotations

from copy import deepcopy
from typing import Any, Mapping


def deep_update(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict:
    """Merge ``override`` into a fresh copy of ``base``.

    Sections present on both sides as mappings are merged key by key, so a
    user file can change ``legend.title`` without restating the rest of
    ``legend``.  Anything else in ``override`` (scalars, lists such as
    ``origin: [0, 0]``) replaces the old value outright.
    """
    merged = {k: deepcopy(v) for k, v in base.items()}
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            merged[key] = deep_update(current, value)
        else:
            merged[key] = deepcopy(value)
    return merged
