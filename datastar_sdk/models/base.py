"""Base model with camelCase aliases matching the Datastar wire names."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

M = TypeVar("M", bound="CamelModel")


class CamelModel(BaseModel):
    """Base for option and result models; accepts snake_case or camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @classmethod
    def coerce(
        cls: type[M],
        options: M | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> M:
        """Build an instance from a model, a mapping and/or keyword overrides.

        Keyword overrides win over values carried by ``options``.
        """
        if options is None:
            data: dict[str, Any] = {}
        elif isinstance(options, BaseModel):
            if not overrides and type(options) is cls:
                return options
            data = options.model_dump(exclude_unset=True)
        else:
            data = dict(options)
        data.update(overrides)
        return cls.model_validate(data)
