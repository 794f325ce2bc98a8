"""Lazy-loading service registry for the scoring pipeline.

Global singleton per service name, created and loaded on first use.
"""

import logging

from services.pipeline.base import BaseModelService

logger = logging.getLogger(__name__)

_registry: dict[str, BaseModelService] = {}


def _create_model(name: str) -> BaseModelService:
    """Factory: create a service by name with deferred imports."""
    if name == "competency_heatmap":
        from services.pipeline.competency_heatmap import CompetencyHeatmapService
        return CompetencyHeatmapService()
    else:
        raise ValueError(f"Unknown model: {name}")


def get_model(name: str) -> BaseModelService:
    """Get a service by name, creating and loading it on first access."""
    if name not in _registry:
        _registry[name] = _create_model(name)
    svc = _registry[name]
    svc.ensure_loaded()
    return svc


def preload(*names: str) -> None:
    """Pre-load multiple services (e.g. at startup)."""
    for name in names:
        get_model(name)


def clear() -> None:
    """Drop all services. Useful for testing."""
    _registry.clear()
