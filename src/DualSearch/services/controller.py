"""Mode controller: owns the active mode and the transient notification."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum

from DualSearch.core.classifier import Verdict, classify
from DualSearch.core.models import Mode, Notification
from DualSearch.services.timer import DeferredTimer
from DualSearch.utils.log import log

NOTIFICATION_TEXT = {
    Mode.AI: "Switched to AI Q&A mode",
    Mode.KEYWORD: "Switched to Traditional mode",
}
DEFAULT_NOTIFICATION_SECONDS = 3.0


class Detection(str, Enum):
    """When the classifier runs."""

    KEYSTROKE = "keystroke"
    SUBMIT = "submit"


class ModeController:
    """State machine over ``Mode.AI`` / ``Mode.KEYWORD``.

    The mode only changes through ``on_query_change``/``on_submit``
    (classifier-driven) or ``on_explicit_toggle``. After a toggle the mode is
    pinned until the query text changes; an unchanged query is never
    reclassified, so the toggle is not reverted by re-renders.
    """

    def __init__(
        self,
        *,
        default_mode: Mode = Mode.KEYWORD,
        detection: Detection = Detection.KEYSTROKE,
        notification_seconds: float = DEFAULT_NOTIFICATION_SECONDS,
        timer: DeferredTimer | None = None,
    ) -> None:
        if notification_seconds <= 0:
            raise ValueError("notification_seconds must be positive")
        self._mode = default_mode
        self._detection = detection
        self._notification_seconds = notification_seconds
        self._timer = timer or DeferredTimer()
        self._notification: Notification | None = None
        self._query = ""
        self._pinned = False
        self._is_open = False
        self._last_verdict: Verdict | None = None

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def detection(self) -> Detection:
        return self._detection

    @property
    def query(self) -> str:
        return self._query

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def pinned(self) -> bool:
        """True while an explicit toggle overrides the classifier."""
        return self._pinned

    @property
    def last_verdict(self) -> Verdict | None:
        return self._last_verdict

    @property
    def notification(self) -> Notification | None:
        """Currently visible notification, or None once expired."""
        self._timer.poll()
        if self._notification is None or not self._notification.visible:
            return None
        return self._notification

    @property
    def last_notification(self) -> Notification | None:
        """Most recent notification, including an expired one."""
        return self._notification

    def on_query_change(self, text: str) -> Mode:
        """Handle a text-change event.

        Args:
            text: The full current query text.

        Returns:
            The active mode after the event.
        """
        self._timer.poll()
        if self._pinned and text == self._query:
            return self._mode
        self._pinned = False
        self._query = text
        if text.strip():
            self._is_open = True
            if self._detection is Detection.KEYSTROKE:
                self._apply(classify(text))
        return self._mode

    def on_submit(self) -> Mode:
        """Classify the current query as a discrete event."""
        self._timer.poll()
        if self._pinned or not self._query.strip():
            return self._mode
        self._apply(classify(self._query))
        return self._mode

    def on_explicit_toggle(self) -> Mode:
        """Flip the mode unconditionally and pin it for the current query."""
        self._timer.poll()
        self._pinned = True
        self._transition(self._mode.flipped(), cause="toggle")
        return self._mode

    def on_focus(self) -> None:
        self._timer.poll()
        self._is_open = True

    def on_close(self) -> None:
        """Clear the query and close the results surface; the mode persists."""
        self._timer.poll()
        self._query = ""
        self._pinned = False
        self._is_open = False

    def _apply(self, verdict: Verdict) -> None:
        self._last_verdict = verdict
        log.debug(
            "Classified query: natural_language=%s reason=%s signals=%s",
            verdict.is_natural_language,
            verdict.reason.value,
            ",".join(verdict.signals) or "-",
        )
        if verdict.mode is not self._mode:
            self._transition(verdict.mode, cause=verdict.reason.value)

    def _transition(self, mode: Mode, *, cause: str) -> None:
        self._mode = mode
        deadline = self._timer.schedule(self._notification_seconds, self._expire_notification)
        self._notification = Notification(text=NOTIFICATION_TEXT[mode], mode=mode, expires_at=deadline)
        log.info("Mode switched: mode=%s cause=%s", mode.value, cause)

    def _expire_notification(self) -> None:
        if self._notification is not None:
            log.debug("Notification expired: %s", self._notification.text)
            self._notification = replace(self._notification, visible=False)
