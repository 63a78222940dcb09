"""
4-digit PIN challenge.

Digits are typed one position at a time; focus advances automatically and the
fourth digit submits without a confirm step. A rejected PIN clears every
position and puts focus back on the first one.
"""
import logging
import re
from enum import Enum
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

PIN_LENGTH = 4
WRONG_PIN_MESSAGE = "PIN incorrecto"

_DIGIT = re.compile(r"^[0-9]$")


class PinState(str, Enum):
    IDLE = "idle"
    ENTERING = "entering"
    COMPLETE = "complete"
    VALIDATING = "validating"
    SUCCESS = "success"
    ERROR = "error"


class PinEntry:
    """
    State machine behind the PIN modal.

    `submit` receives the full PIN and returns True when activation worked.
    Listeners are called with every new state, so a UI can show its spinner
    while VALIDATING.
    """

    def __init__(self, submit: Callable[[str], bool], on_success: Optional[Callable[[], None]] = None):
        self._submit = submit
        self._on_success = on_success
        self._listeners: List[Callable[[PinState], None]] = []
        self.digits: List[str] = [""] * PIN_LENGTH
        self.focus = 0
        self.error = ""
        self.state = PinState.IDLE

    def subscribe(self, listener: Callable[[PinState], None]) -> None:
        self._listeners.append(listener)

    def _set_state(self, state: PinState) -> None:
        self.state = state
        for listener in self._listeners:
            listener(state)

    @property
    def pin(self) -> str:
        return "".join(self.digits)

    @property
    def locked(self) -> bool:
        """Inputs are disabled while validating and after success."""
        return self.state in (PinState.VALIDATING, PinState.SUCCESS)

    def enter_digit(self, index: int, value: str) -> None:
        """
        Handle input at one position. Only the last character typed counts;
        anything but a single digit is ignored. An empty value clears the position.
        """
        if self.locked or not 0 <= index < PIN_LENGTH:
            return
        digit = value[-1:] if value else ""
        if digit and not _DIGIT.match(digit):
            return

        self.digits[index] = digit
        self.error = ""
        if digit and index < PIN_LENGTH - 1:
            self.focus = index + 1

        if digit and index == PIN_LENGTH - 1 and all(self.digits):
            self._set_state(PinState.COMPLETE)
            self.submit(self.pin)
        else:
            self._set_state(PinState.ENTERING if any(self.digits) else PinState.IDLE)

    def backspace(self, index: int) -> None:
        """Backspace on an empty position moves focus back one; on a filled one it clears it."""
        if self.locked or not 0 <= index < PIN_LENGTH:
            return
        if self.digits[index]:
            self.enter_digit(index, "")
        elif index > 0:
            self.focus = index - 1

    def submit(self, pin: str) -> bool:
        self.error = ""
        self._set_state(PinState.VALIDATING)
        if self._submit(pin):
            self._set_state(PinState.SUCCESS)
            if self._on_success is not None:
                self._on_success()
            return True

        logger.info("PIN rejected")
        self.error = WRONG_PIN_MESSAGE
        self._set_state(PinState.ERROR)
        self.reset(keep_error=True)
        return False

    def reset(self, keep_error: bool = False) -> None:
        self.digits = [""] * PIN_LENGTH
        self.focus = 0
        if not keep_error:
            self.error = ""
        self._set_state(PinState.IDLE)
