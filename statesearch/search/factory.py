"""
Searcher Factory Module - Registry and factory for searcher instantiation.
"""

from typing import Any, Dict, List, Type

from .base import Searcher
from .node import Node


# Global registry of searchers
_SEARCHERS: Dict[str, Type[Searcher]] = {}

DEFAULT_SEARCHER = "depth_first"


def register_searcher(cls: Type[Searcher]) -> Type[Searcher]:
    """
    Decorator to register a searcher class under its name attribute.

    Usage:
        @register_searcher
        class MySearch(Searcher):
            name = "my_search"
            ...
    """
    _SEARCHERS[cls.name] = cls
    return cls


def create_searcher(name: str, start: Node, **kwargs: Any) -> Searcher:
    """
    Create a searcher instance by name.

    Args:
        name: Searcher name (e.g., "depth_first", "backtrack")
        start: Start node of the search
        **kwargs: Additional arguments passed to searcher constructor

    Returns:
        Searcher instance

    Raises:
        ValueError: If searcher name not found
    """
    if name not in _SEARCHERS:
        available = ", ".join(_SEARCHERS.keys())
        raise ValueError(f"Unknown searcher: {name}. Available: {available}")
    return _SEARCHERS[name](start, **kwargs)


def get_searcher_names() -> List[str]:
    """Get list of registered searcher names."""
    return list(_SEARCHERS.keys())


def get_searcher_info() -> List[Dict[str, str]]:
    """
    Get name and description for all registered searchers.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _SEARCHERS.values()
    ]


def get_default_searcher_name() -> str:
    """
    Get the default searcher name.

    Returns:
        "depth_first" if registered, else first registered name
    """
    if DEFAULT_SEARCHER in _SEARCHERS:
        return DEFAULT_SEARCHER
    if _SEARCHERS:
        return next(iter(_SEARCHERS.keys()))
    return ""
