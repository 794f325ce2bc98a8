"""Abstract base class for all pipeline scoring services."""

from abc import ABC, abstractmethod
from typing import Any
import logging

logger = logging.getLogger(__name__)


class BaseModelService(ABC):
    """Base class for pipeline scoring services.

    Subclasses must implement:
        - model_name: identifier used in model_registry
        - load(): prepare static state (tables, lookups) before first use
        - predict(**kwargs): score inputs and return a typed schema
    """

    model_name: str = ""
    _loaded: bool = False

    @abstractmethod
    def load(self) -> None:
        """Prepare the service. Called once by model_registry."""

    @abstractmethod
    def predict(self, **kwargs: Any) -> Any:
        """Run scoring. Returns a Pydantic schema defined per service."""

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def ensure_loaded(self) -> None:
        """Load service if not already loaded.

        A failed load is logged and re-raised; the service stays unloaded so
        the next call retries.
        """
        if not self._loaded:
            logger.info("Loading service: %s", self.model_name)
            try:
                self.load()
            except Exception:
                logger.exception("Service failed to load: %s", self.model_name)
                raise
            self._loaded = True
            logger.info("Service loaded: %s", self.model_name)
