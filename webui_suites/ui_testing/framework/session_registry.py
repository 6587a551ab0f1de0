"""
================================================================================
Session Registry
================================================================================

Maps each test worker to at most one live browser session.

A worker is a pytest-xdist process plus the thread running the test, so
parallel workers never address the same slot.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
import threading
from typing import Any, Dict, List, Optional

from loguru import logger

from .exceptions import DoubleBindError


def current_worker_id() -> str:
    """Identity of the calling worker: '<xdist worker>/<thread id>'."""
    xdist_worker = os.environ.get("PYTEST_XDIST_WORKER", "master")
    return f"{xdist_worker}/{threading.get_ident()}"


class SessionRegistry:
    """
    Worker-keyed storage of browser sessions.

    Usage:
        registry = SessionRegistry()
        registry.bind(worker_id, factory.create(config))
        session = registry.current(worker_id)
        registry.release(worker_id)
    """

    def __init__(self) -> None:
        self._sessions: Dict[str, Any] = {}
        # Guards the mapping only; sessions themselves are never shared
        self._lock = threading.Lock()

    def bind(self, worker_id: str, session: Any) -> None:
        """
        Bind a session to a worker.

        Raises:
            DoubleBindError: Worker already holds a session
        """
        with self._lock:
            if worker_id in self._sessions:
                raise DoubleBindError(worker_id)
            self._sessions[worker_id] = session
        logger.debug(f"Session bound to worker {worker_id}: {session!r}")

    def current(self, worker_id: str) -> Optional[Any]:
        """Session bound to the worker, or None."""
        with self._lock:
            return self._sessions.get(worker_id)

    def release(self, worker_id: str) -> None:
        """
        Close the worker's session and clear its slot.

        Idempotent. The slot is cleared even if closing fails.
        """
        with self._lock:
            session = self._sessions.get(worker_id)
        if session is None:
            logger.trace(f"Nothing to release for worker {worker_id}")
            return

        try:
            session.close()
        except Exception as e:
            logger.warning(f"Failed to close session for worker {worker_id}: {e}")
        finally:
            with self._lock:
                self._sessions.pop(worker_id, None)
        logger.debug(f"Session released for worker {worker_id}")

    def workers(self) -> List[str]:
        """Worker ids that currently hold a session."""
        with self._lock:
            return list(self._sessions)

    def release_all(self) -> None:
        """Release every remaining session (end-of-run leak guard)."""
        leftover = self.workers()
        if leftover:
            logger.warning(f"Releasing {len(leftover)} leaked session(s): {leftover}")
        for worker_id in leftover:
            self.release(worker_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, worker_id: object) -> bool:
        with self._lock:
            return worker_id in self._sessions


__all__ = [
    "current_worker_id",
    "SessionRegistry",
]
