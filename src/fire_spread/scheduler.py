"""Background scheduler that steps a running model at its configured interval."""

from __future__ import annotations

import logging
import threading
from typing import Optional

from .model import FireModel

logger = logging.getLogger(__name__)


class StepScheduler:
    """Calls ``model.tick()`` every ``model.step_interval_ms`` while it runs.

    The scheduler follows the model's ``running`` flag: ``model.start()``
    launches a daemon thread, ``model.stop()`` tells it to exit after the
    tick in progress. The interval is read again before every wait, so a new
    value applies from the next tick.

    Attributes:
        model: The FireModel being stepped.
    """

    def __init__(self, model: FireModel) -> None:
        self.model = model
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None
        self._stop_event: Optional[threading.Event] = None
        self._attached = False

    @property
    def is_active(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive()

    def attach(self) -> "StepScheduler":
        """Start following the model. Starts stepping at once if it already runs."""
        if not self._attached:
            self.model.on_state_changed(self._on_state_changed)
            self._attached = True
        if self.model.running:
            self._launch()
        return self

    def detach(self, timeout: Optional[float] = None) -> None:
        """Stop following the model and wait for the stepping thread to exit."""
        if self._attached:
            self.model.remove_state_listener(self._on_state_changed)
            self._attached = False
        self._halt()
        self.join(timeout)

    def join(self, timeout: Optional[float] = None) -> None:
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

    def __enter__(self) -> "StepScheduler":
        return self.attach()

    def __exit__(self, *exc_info) -> None:
        self.detach()

    def _on_state_changed(self, model: FireModel, change: str) -> None:
        if change != "running":
            return
        if model.running:
            self._launch()
        else:
            self._halt()

    def _launch(self) -> None:
        with self._lock:
            if self._thread is not None and self._thread.is_alive():
                if self._stop_event is not None and not self._stop_event.is_set():
                    return
            stop_event = threading.Event()
            thread = threading.Thread(
                target=self._run,
                args=(stop_event,),
                name="fire-spread-scheduler",
                daemon=True,
            )
            self._stop_event = stop_event
            self._thread = thread
        thread.start()

    def _halt(self) -> None:
        with self._lock:
            if self._stop_event is not None:
                self._stop_event.set()

    def _run(self, stop_event: threading.Event) -> None:
        logger.info(f"Step scheduler started ({self.model.step_interval_ms} ms)")
        while not stop_event.wait(self.model.step_interval_ms / 1000):
            if not self.model.running:
                break
            try:
                self.model.tick()
            except Exception:
                logger.warning("Scheduled step failed", exc_info=True)
        logger.info("Step scheduler stopped")
