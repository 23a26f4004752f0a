"""
Drying-line device control.

``DeviceToggle`` is the on/off switch as a state machine::

    OFF --request on--> TURNING_ON --ok--> ON
    ON --request off--> TURNING_OFF --ok--> OFF
    TURNING_* --failure--> ERROR --compensate--> prior state

The tentative state is shown immediately; a failed device call walks back
through ERROR to the state the switch had before, so the displayed state
never contradicts the last known device state.

``DevicePoller`` reads the sensor report on a fixed interval in its own
thread.  Its failures go to a callback and never reach weather state.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from clothesline.errors import DeviceUnreachable, InvalidTransition
from clothesline.schemas import DeviceState, DeviceStatus

if TYPE_CHECKING:
    from clothesline.datasources.device import DeviceClient

logger = logging.getLogger(__name__)

UNREACHABLE_MESSAGE = "⚠ Failed to reach ESP32. Check device or network."

_TRANSITIONS: dict[DeviceState, frozenset[DeviceState]] = {
    DeviceState.OFF: frozenset({DeviceState.TURNING_ON}),
    DeviceState.TURNING_ON: frozenset({DeviceState.ON, DeviceState.ERROR}),
    DeviceState.ON: frozenset({DeviceState.TURNING_OFF}),
    DeviceState.TURNING_OFF: frozenset({DeviceState.OFF, DeviceState.ERROR}),
    DeviceState.ERROR: frozenset({DeviceState.OFF, DeviceState.ON}),
}

StateListener = Callable[[DeviceState, DeviceState], None]


@dataclass(frozen=True)
class ToggleOutcome:
    """Result of one toggle request, ready for the status popup."""

    ok: bool
    state: DeviceState
    message: str


class DeviceToggle:
    """On/off switch with optimistic update and compensation on failure."""

    def __init__(self, client: DeviceClient, initial: DeviceState = DeviceState.OFF) -> None:
        if initial not in (DeviceState.OFF, DeviceState.ON):
            raise InvalidTransition(f"Cannot start in {initial}")
        self.client = client
        self._state = initial
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> DeviceState:
        return self._state

    @property
    def is_on(self) -> bool:
        return self._state is DeviceState.ON

    def subscribe(self, listener: StateListener) -> None:
        """Call ``listener(old, new)`` on every transition."""
        self._listeners.append(listener)

    def _transition(self, new: DeviceState) -> None:
        old = self._state
        if new not in _TRANSITIONS[old]:
            raise InvalidTransition(f"{old} -> {new}")
        self._state = new
        logger.debug("Device toggle %s -> %s", old, new)
        for listener in self._listeners:
            listener(old, new)

    def switch(self, on: bool) -> ToggleOutcome:
        """
        Ask the device to turn on or off.

        Never raises for device failures: the outcome carries the popup text
        and the state the switch settled in.
        """
        target = DeviceState.ON if on else DeviceState.OFF
        if self._state is target:
            return ToggleOutcome(ok=True, state=target, message=f"ESP32 already {target.upper()}")
        if self._state not in (DeviceState.ON, DeviceState.OFF):
            raise InvalidTransition(f"Toggle busy in {self._state}")

        prior = self._state
        self._transition(DeviceState.TURNING_ON if on else DeviceState.TURNING_OFF)
        try:
            self.client.switch(on)
        except DeviceUnreachable as exc:
            logger.error("Device communication error: %s", exc)
            self._transition(DeviceState.ERROR)
            self._transition(prior)
            return ToggleOutcome(ok=False, state=prior, message=UNREACHABLE_MESSAGE)

        self._transition(target)
        return ToggleOutcome(ok=True, state=target, message=f"ESP32 turned {target.upper()}")


class DevicePoller:
    """Fixed-interval reader of the device's sensor report."""

    def __init__(
        self,
        client: DeviceClient,
        interval: float = 10.0,
        on_status: Callable[[DeviceStatus], None] | None = None,
        on_error: Callable[[DeviceUnreachable], None] | None = None,
    ) -> None:
        self.client = client
        self.interval = interval
        self.on_status = on_status
        self.on_error = on_error
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def poll_once(self) -> DeviceStatus | None:
        """One read; never raises.

        Device failures are logged and handed to ``on_error``.  Errors raised by
        either callback are logged, so the poller thread keeps running.
        """
        try:
            status = self.client.fetch_status()
        except DeviceUnreachable as exc:
            logger.warning("Device data fetch error: %s", exc)
            if self.on_error:
                try:
                    self.on_error(exc)
                except Exception:
                    logger.exception("Device error handler failed")
            return None
        if self.on_status:
            try:
                self.on_status(status)
            except Exception:
                logger.exception("Device status handler failed")
        return status

    def run(self, max_polls: int | None = None) -> int:
        """Poll immediately, then every ``interval`` seconds until stopped.

        Returns the number of polls made.
        """
        polls = 0
        while not self._stop.is_set():
            self.poll_once()
            polls += 1
            if max_polls is not None and polls >= max_polls:
                break
            self._stop.wait(self.interval)
        return polls

    def start(self) -> None:
        """Run in a daemon thread."""
        if self._thread and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self.run, name="device-poller", daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        self._stop.set()
        if self._thread:
            self._thread.join(timeout)
            self._thread = None
