"""Immutable option structures for configurable chart components.

Components take a single options object instead of exposing one setter per
setting.  Defaults live on the model fields; a configured copy is produced with
:meth:`Options.replace` (chainable) or :meth:`Options.merged` (nested mapping,
e.g. a section of the YAML configuration).
"""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict

from .utils.dict_merge import deep_update

__all__ = ["Options", "coerce_options"]

O = TypeVar("O", bound="Options")


class Options(BaseModel):
    """Frozen, validated base for component options."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    def replace(self: O, **changes: Any) -> O:
        """Return a validated copy with ``changes`` applied."""
        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)

    def merged(self: O, overrides: Mapping[str, Any] | None) -> O:
        """Return a validated copy with ``overrides`` deep-merged in."""
        if not overrides:
            return self
        return type(self).model_validate(deep_update(self.model_dump(), overrides))


def coerce_options(cls: type[O], options: O | Mapping[str, Any] | None) -> O:
    """Accept an instance of ``cls``, a mapping of its fields or ``None``."""
    if options is None:
        return cls()
    if isinstance(options, cls):
        return options
    if isinstance(options, Mapping):
        return cls.model_validate(dict(options))
    raise TypeError(
        f"options must be {cls.__name__}, a mapping or None, got {type(options).__name__}"
    )
