from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer, Signal

from runedrakraft.config import SUCCESS_BANNER_S
from runedrakraft.model.calculator import ResultRecord
from runedrakraft.model.session import InfusionSession, Scheduler, SessionState
from runedrakraft.model.variants import all_variants

logger = logging.getLogger(__name__)


def qt_scheduler(delay_s: float, callback: Callable[[], None]) -> None:
    """Run `callback` on the Qt event loop after `delay_s` seconds."""
    QTimer.singleShot(int(delay_s * 1000), callback)


class Store(QObject):
    """
    Central state store: one InfusionSession per registered variant,
    with signals for panel sync. Every signal carries the variant key first.
    """
    state_changed = Signal(str, str)          # (key, SessionState value)
    computation_finished = Signal(str, object)  # (key, ResultRecord), banner phase
    result_changed = Signal(str, object)      # (key, ResultRecord | None)
    params_reset = Signal(str)
    alert_raised = Signal(str, object)        # (key, Alert)

    def __init__(self, scheduler: Optional[Scheduler] = None, banner_s: float = SUCCESS_BANNER_S) -> None:
        super().__init__()
        self._scheduler = scheduler or qt_scheduler
        self._banner_s = banner_s
        self.sessions: dict[str, InfusionSession] = {}
        for variant in all_variants():
            session = InfusionSession(variant, scheduler=self._scheduler)
            session.add_state_listener(
                lambda state, key=variant.key: self.state_changed.emit(key, state.value)
            )
            self.sessions[variant.key] = session

    def session(self, key: str) -> InfusionSession:
        if key not in self.sessions:
            raise KeyError(f"No session for variant '{key}'")
        return self.sessions[key]

    def keys(self) -> list[str]:
        return list(self.sessions.keys())

    # ---- actions ----

    def submit(self, key: str) -> None:
        session = self.session(key)
        if session.state == SessionState.COMPUTING:
            logger.warning(f"[{key}] Ignoring submit while computing.")
            return
        alert = session.submit(on_ready=lambda result: self._on_ready(key, result))
        if alert is not None:
            self.alert_raised.emit(key, alert)

    def _on_ready(self, key: str, result: ResultRecord) -> None:
        self.computation_finished.emit(key, result)
        session = self.session(key)

        def reveal() -> None:
            # A reset during the banner phase discards the result
            if session.result is not result:
                return
            self.result_changed.emit(key, result)
            # Rejected input since completion already raised its own warning
            if session.state == SessionState.READY:
                self.alert_raised.emit(key, session.success_alert())

        self._scheduler(self._banner_s, reveal)

    def reset(self, key: str) -> None:
        session = self.session(key)
        alert = session.reset()
        self.params_reset.emit(key)
        self.result_changed.emit(key, None)
        self.alert_raised.emit(key, alert)

    def copy_results(self, key: str, sink: Callable[[str], None]) -> bool:
        """Hand the share text to `sink` (e.g. the clipboard). False if there is no result."""
        session = self.session(key)
        text = session.share_text()
        if not text:
            return False
        sink(text)
        self.alert_raised.emit(key, session.copy_alert())
        return True

    def show_help(self, key: str) -> None:
        self.alert_raised.emit(key, self.session(key).help_alert())
