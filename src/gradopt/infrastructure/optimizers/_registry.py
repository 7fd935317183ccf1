"""
Optimizer registry and dictionary configuration.

Strategies are configured once, at construction. To build them from
declarative settings (e.g., a JSON experiment file), each strategy registers
itself here and exposes ``get_config`` / ``from_config``.

Node format
-----------
{
  "type": "StochasticGD",
  "config": {"alpha": 0.1, "mu": 0.1, "iters": 20}
}
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Dict, Optional, Type

_OPTIMIZER_REGISTRY: dict[str, Type[Any]] = {}


def register_optimizer(
    name: Optional[str] = None,
) -> Callable[[Type[Any]], Type[Any]]:
    """
    Decorator to register an optimizer class for config deserialization.
    """

    def deco(cls: Type[Any]) -> Type[Any]:
        key = name or cls.__name__
        _OPTIMIZER_REGISTRY[key] = cls
        return cls

    return deco


def registered_optimizers() -> list[str]:
    """
    Return the names of all registered optimizer types, sorted.
    """
    return sorted(_OPTIMIZER_REGISTRY)


def optimizer_to_config(opt: Any) -> dict[str, Any]:
    """
    Convert an optimizer into a JSON-serializable configuration node.
    """
    get_cfg = getattr(opt, "get_config", None)
    cfg = get_cfg() if callable(get_cfg) else {}
    return {"type": opt.__class__.__name__, "config": cfg}


def optimizer_from_config(node: Dict[str, Any]) -> Any:
    """
    Rebuild an optimizer from a configuration node.

    Raises
    ------
    ValueError
        If the node names an optimizer type that was never registered.
    """
    type_name = str(node["type"])
    if type_name not in _OPTIMIZER_REGISTRY:
        raise ValueError(
            f"Unknown optimizer type '{type_name}'. "
            f"Register it via @register_optimizer."
        )

    cls = _OPTIMIZER_REGISTRY[type_name]
    cfg = node.get("config", {}) or {}

    from_cfg = getattr(cls, "from_config", None)
    if callable(from_cfg):
        return from_cfg(cfg)
    return cls(**cfg)


def validate_iters(iters: Any) -> int:
    """
    Validate an iteration count and return it as a plain ``int``.

    Raises
    ------
    TypeError
        If `iters` is not an integer (booleans are rejected).
    ValueError
        If `iters` is negative.
    """
    if isinstance(iters, bool):
        raise TypeError("iters must be an integer, got bool")
    try:
        value = operator.index(iters)
    except TypeError:
        raise TypeError(
            f"iters must be an integer, got {type(iters).__name__}"
        ) from None
    if value < 0:
        raise ValueError(f"iters must be >= 0, got {value}")
    return value
