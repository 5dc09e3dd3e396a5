"""Factory function returning cost objects by model name."""

from __future__ import annotations

from typing import Any

from ..base import BaseCost


def _registered_costs() -> dict[str, type[BaseCost]]:
    registry: dict[str, type[BaseCost]] = {}
    pending = list(BaseCost.__subclasses__())
    while pending:
        subclass = pending.pop(0)
        pending.extend(subclass.__subclasses__())
        model = subclass.__dict__.get("model")
        if isinstance(model, str):
            registry.setdefault(model, subclass)
    return registry


def cost_factory(model: str, *args: Any, **kwargs: Any) -> BaseCost:
    """Return an instance of the cost registered under ``model``.

    Any subclass of :class:`BaseCost` defining a string ``model`` attribute is
    registered, including user-defined costs.
    """

    registry = _registered_costs()
    if model not in registry:
        raise ValueError(f"Unknown cost model {model!r}, expected one of {sorted(registry)}")
    return registry[model](*args, **kwargs)
