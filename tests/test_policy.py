import pytest

from glossa.errors import (
    AbortRequested,
    ErrorCategory,
    ErrorTracker,
    NonInteractiveAbort,
)
from glossa.policy import ErrorPolicy, PolicyAction


def test_tracker_counts_consecutive_errors_per_category():
    tracker = ErrorTracker()

    assert tracker.register(ErrorCategory.NETWORK) == (1, 1, False)
    assert tracker.register(ErrorCategory.NETWORK) == (2, 2, False)
    assert tracker.register(ErrorCategory.EXTRACTION) == (1, 3, False)
    tracker.reset_consecutive()
    assert tracker.register(ErrorCategory.EXTRACTION) == (1, 4, False)


def test_tracker_total_limit():
    tracker = ErrorTracker()
    categories = [ErrorCategory.NETWORK, ErrorCategory.EXTRACTION] * 5
    outcomes = [tracker.register(category)[2] for category in categories]

    assert outcomes[-1] is True
    assert not any(outcomes[:-1])


def test_policy_continues_below_threshold(capsys):
    policy = ErrorPolicy(interactive=False)

    action = policy.handle_error(ErrorCategory.NETWORK, "endpoint down", phrase="hi")

    assert action is PolicyAction.CONTINUE
    assert policy.records[0].phrase == "hi"
    assert "endpoint down" in capsys.readouterr().out


def test_policy_non_interactive_threshold_raises():
    policy = ErrorPolicy(interactive=False)
    policy.handle_error(ErrorCategory.NETWORK, "one")
    policy.handle_error(ErrorCategory.NETWORK, "two")

    with pytest.raises(NonInteractiveAbort):
        policy.handle_error(ErrorCategory.NETWORK, "three")


def test_policy_prompts_until_valid_answer():
    answers = iter(["maybe", "R"])
    policy = ErrorPolicy(interactive=True, prompt=lambda _question: next(answers))
    for _ in range(2):
        policy.handle_error(ErrorCategory.NETWORK, "down")

    assert policy.handle_error(ErrorCategory.NETWORK, "down") is PolicyAction.RETRY


def test_policy_abort_answer():
    policy = ErrorPolicy(interactive=True, prompt=lambda _question: "abort")
    for _ in range(2):
        policy.handle_error(ErrorCategory.NETWORK, "down")

    with pytest.raises(AbortRequested):
        policy.handle_error(ErrorCategory.NETWORK, "down")
