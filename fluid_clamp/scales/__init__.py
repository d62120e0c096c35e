from .registry import (
    EXCLUDED_PAIR_KEYS,
    ScaleKind,
    ScaleRegistry,
    generate_fluid_keys,
    get_registry,
)

__all__ = [
    "ScaleKind",
    "ScaleRegistry",
    "EXCLUDED_PAIR_KEYS",
    "generate_fluid_keys",
    "get_registry",
]
