"""
Loader registry - Maps stage names to loader classes.
"""

from typing import Callable, Dict, List, Optional, Type

from services.importer.base import BaseLoader


# Global registry of loaders
_REGISTRY: Dict[str, Type[BaseLoader]] = {}

# Stages always run in this order: each one reads what the previous wrote
STAGE_ORDER = ["countries", "facilities", "cities", "hotels"]

# Stages that share HotelLookup and one lookup key sequence always run together
LINKED_STAGES = [{"cities", "hotels"}]


def register(name: str) -> Callable[[Type[BaseLoader]], Type[BaseLoader]]:
    """
    Decorator to register a loader class.

    Usage:
        @register("countries")
        class CountryLoader(BaseLoader):
            ...
    """

    def decorator(cls: Type[BaseLoader]) -> Type[BaseLoader]:
        if name in _REGISTRY:
            raise ValueError(f"Loader '{name}' is already registered")
        _REGISTRY[name] = cls
        return cls

    return decorator


def get_loader(name: str) -> Type[BaseLoader]:
    """
    Get a loader class by stage name.

    Raises:
        ValueError: If loader is not registered
    """
    if name not in _REGISTRY:
        available = ", ".join(_REGISTRY.keys()) or "(none)"
        raise ValueError(f"Unknown stage: '{name}'. Available: {available}")
    return _REGISTRY[name]


def list_stages() -> List[str]:
    """Registered stage names in run order."""
    ordered = [name for name in STAGE_ORDER if name in _REGISTRY]
    return ordered + [name for name in _REGISTRY if name not in STAGE_ORDER]


def resolve_stages(names: Optional[List[str]] = None) -> List[str]:
    """
    Validate requested stages and put them in run order.

    Returns every registered stage when names is empty. Asking for one
    stage of a linked group runs the whole group.
    """
    if not names:
        return list_stages()
    requested = set(names)
    for name in names:
        get_loader(name)
    for group in LINKED_STAGES:
        if requested & group:
            requested |= group
    return [name for name in list_stages() if name in requested]
