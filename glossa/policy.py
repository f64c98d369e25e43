"""Continue / retry / abort decisions for failed phrases."""

from __future__ import annotations

from enum import Enum
from typing import Callable, List, Optional

from .errors import (
    AbortRequested,
    ErrorCategory,
    ErrorRecord,
    ErrorTracker,
    NonInteractiveAbort,
)


class PolicyAction(str, Enum):
    CONTINUE = "continue"
    RETRY = "retry"


_ANSWERS = {
    "continue": PolicyAction.CONTINUE,
    "c": PolicyAction.CONTINUE,
    "retry": PolicyAction.RETRY,
    "r": PolicyAction.RETRY,
}


class ErrorPolicy:
    """Records failures and escalates once the tracker threshold is hit.

    Below the threshold every error is reported and processing continues.
    Past it, an interactive session is asked what to do; a non-interactive
    one stops with :class:`NonInteractiveAbort`.
    """

    def __init__(
        self,
        *,
        interactive: bool,
        prompt: Callable[[str], str] = input,
    ) -> None:
        self.interactive = interactive
        self.prompt = prompt
        self.records: List[ErrorRecord] = []
        self.tracker = ErrorTracker()

    def record_success(self) -> None:
        self.tracker.reset_consecutive()

    def handle_error(
        self,
        category: ErrorCategory,
        message: str,
        phrase: Optional[str] = None,
    ) -> PolicyAction:
        self.records.append(ErrorRecord(category=category, message=message, phrase=phrase))
        consecutive, _total, threshold = self.tracker.register(category)

        print(message)

        if not threshold:
            return PolicyAction.CONTINUE

        if not self.interactive:
            raise NonInteractiveAbort(
                "Error threshold exceeded in non-interactive mode. Stopping."
            )

        question = (
            f"The same problem occurred {consecutive} times in a row. "
            "Continue, retry, or abort?"
            if consecutive >= self.tracker.CONSECUTIVE_LIMIT
            else f"{self.tracker.TOTAL_LIMIT} or more errors so far. Continue, retry, or abort?"
        )
        while True:
            answer = self.prompt(f"{question} ").strip().lower()
            if answer in _ANSWERS:
                return _ANSWERS[answer]
            if answer in {"abort", "a"}:
                raise AbortRequested("Abort requested by user.")
            print("Please respond with Continue, Retry, or Abort (c/r/a).")
