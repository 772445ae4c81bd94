"""
Calculator Session (Screen State)
=================================
One session per calculator screen: the editable ParameterSet, the live
ResultRecord and an explicit workflow state.

    IDLE -> VALIDATING -> IDLE                    (invalid input)
    IDLE -> VALIDATING -> COMPUTING -> READY      (valid input)
    READY -> VALIDATING -> ...                    (run again)
    any  -> IDLE                                  (reset)

The "processing" delay is purely cosmetic. It is delegated to an injected
scheduler; the default one runs the computation immediately.
"""
from __future__ import annotations

from enum import StrEnum
import logging
from typing import Callable, Optional, TYPE_CHECKING

from runedrakraft.model.alerts import Alert, AlertType
from runedrakraft.model.calculator import InfusionCalculator, ResultRecord
from runedrakraft.model.parameters import ParameterSet

if TYPE_CHECKING:
    from datetime import datetime
    from runedrakraft.model.variants import VariantConfig

logger = logging.getLogger(__name__)

Scheduler = Callable[[float, Callable[[], None]], None]
StateListener = Callable[["SessionState"], None]


class SessionState(StrEnum):
    IDLE = "idle"
    VALIDATING = "validating"
    COMPUTING = "computing"
    READY = "ready"


class SessionBusyError(RuntimeError):
    """Raised when a computation is requested while one is pending."""


def run_immediately(delay_s: float, callback: Callable[[], None]) -> None:
    callback()


class InfusionSession:
    def __init__(
        self,
        variant: VariantConfig,
        scheduler: Optional[Scheduler] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.variant = variant
        self.calculator = InfusionCalculator(variant, clock=clock)
        self.params = ParameterSet.defaults_for(variant)
        self.result: Optional[ResultRecord] = None
        self._state = SessionState.IDLE
        self._scheduler = scheduler or run_immediately
        self._listeners: list[StateListener] = []
        # Bumped on reset so a pending computation can tell it is stale
        self._generation = 0

    # ---- state ----

    @property
    def state(self) -> SessionState:
        return self._state

    def add_state_listener(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def _set_state(self, state: SessionState) -> None:
        if state == self._state:
            return
        logger.debug(f"[{self.variant.key}] {self._state} -> {state}")
        self._state = state
        for listener in self._listeners:
            listener(state)

    # ---- alerts ----

    def alert(self, alert_type: AlertType, message: str) -> Alert:
        title = self.variant.messages.alert_titles[alert_type]
        return Alert(type=alert_type, title=title, message=message)

    def success_alert(self) -> Alert:
        return self.alert(AlertType.SUCCESS, self.variant.messages.success)

    def copy_alert(self) -> Alert:
        return self.alert(AlertType.SUCCESS, self.variant.messages.copied)

    def help_alert(self) -> Alert:
        return self.alert(AlertType.INFO, self.variant.messages.help)

    def banner_detail(self) -> str:
        template = self.variant.messages.banner_detail
        return template.format(primary=int(self.params.primary_value)) if template else ""

    # ---- actions ----

    def submit(self, on_ready: Optional[Callable[[ResultRecord], None]] = None) -> Optional[Alert]:
        """
        Validate and, if valid, schedule the computation.

        Returns a warning Alert when the input is invalid, otherwise None.
        `on_ready` receives the new ResultRecord once it is computed.
        """
        if self._state == SessionState.COMPUTING:
            raise SessionBusyError(f"A computation for '{self.variant.key}' is already running.")

        self._set_state(SessionState.VALIDATING)
        validation = self.calculator.validate(self.params)
        if not validation.is_valid:
            logger.info(f"[{self.variant.key}] Input rejected: {validation.error}")
            self._set_state(SessionState.IDLE)
            return self.alert(AlertType.WARNING, str(validation.error))

        self._set_state(SessionState.COMPUTING)
        # The result reflects the values that passed validation
        params = self.params.copy()
        logger.debug(f"[{self.variant.key}] Computing with {params.to_dict()}")
        generation = self._generation

        def finish() -> None:
            if generation != self._generation:
                logger.debug(f"[{self.variant.key}] Discarding computation cancelled by reset.")
                return
            self.result = self.calculator.compute(params)
            self._set_state(SessionState.READY)
            if on_ready is not None:
                on_ready(self.result)

        self._scheduler(self.variant.processing_delay_s, finish)
        return None

    def reset(self) -> Alert:
        """Restore default parameters and discard any result."""
        self._generation += 1
        self.params.reset(self.variant)
        self.result = None
        self._set_state(SessionState.IDLE)
        logger.info(f"[{self.variant.key}] Session reset.")
        return self.alert(AlertType.INFO, self.variant.messages.reset)

    # ---- derived output ----

    def share_text(self) -> str:
        if self.result is None:
            return ""
        return self.calculator.render_share_text(self.result)

    def recommendations(self) -> list[str]:
        if self.result is None:
            return []
        return self.calculator.recommendations(self.result)
