from __future__ import annotations

from typing import Dict, Iterable
from threading import RLock
import logging

from .base import ExecutionConnector

logger = logging.getLogger(__name__)


class ConnectorManager:
    """Named execution backends, resolved by the executor per call."""

    def __init__(self) -> None:
        self._connectors: Dict[str, ExecutionConnector] = {}
        self._lock = RLock()

    # ==========================================================
    # Registration
    # ==========================================================

    def register(self, name: str, connector: ExecutionConnector) -> None:
        self._validate(name, connector)

        with self._lock:
            if name in self._connectors:
                raise ValueError(f"Connector '{name}' already registered.")

            self._connectors[name] = connector
            logger.info("[CONNECTOR] Registered '%s'", name)

    # ==========================================================
    # Lookup
    # ==========================================================

    def get(self, name: str) -> ExecutionConnector:
        with self._lock:
            if name not in self._connectors:
                raise KeyError(f"Connector '{name}' is not registered.")

            return self._connectors[name]

    def is_registered(self, name: str) -> bool:
        with self._lock:
            return name in self._connectors

    def list_connectors(self) -> Iterable[str]:
        with self._lock:
            return sorted(self._connectors)

    # ==========================================================
    # Observability
    # ==========================================================

    def health(self) -> Dict[str, bool]:
        status = {}

        with self._lock:
            for name, conn in self._connectors.items():
                try:
                    status[name] = conn.health()
                except Exception:
                    logger.warning("[CONNECTOR] Health check failed for '%s'", name)
                    status[name] = False

        return status

    def __len__(self) -> int:
        with self._lock:
            return len(self._connectors)

    # ==========================================================
    # Validation
    # ==========================================================

    def _validate(self, name: str, connector: ExecutionConnector) -> None:
        if not name or not isinstance(name, str):
            raise ValueError("Connector must have a valid string name.")

        if not isinstance(connector, ExecutionConnector):
            raise TypeError(
                "Connector must implement ExecutionConnector."
            )
