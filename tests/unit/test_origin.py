# tests/unit/test_origin.py
"""
Synthetic Origin Tests - singleton failures with a one-frame label
"""

import pytest

from failnorm import (
    SyntheticOrigin,
    assign_synthetic_origin,
    failure_details,
    stack_trace_text,
    synthetic_origin,
)


class Poller:
    pass


def deep(n):
    if n == 0:
        raise TimeoutError("Timeout")
    deep(n - 1)


def raised_deep():
    try:
        deep(5)
    except TimeoutError as e:
        return e


def test_assign_returns_same_object():
    failure = TimeoutError("Timeout")
    assert assign_synthetic_origin(failure, Poller, "poll") is failure


def test_trace_shows_exactly_one_synthetic_frame():
    failure = raised_deep()
    assert stack_trace_text(failure).count('File "') > 1

    assign_synthetic_origin(failure, Poller, "poll")
    text = stack_trace_text(failure)

    assert text.count('File "') == 1
    assert f"{Poller.__module__}.Poller" in text
    assert "in poll" in text
    assert "deep" not in text
    assert text.rstrip().endswith("TimeoutError: Timeout")


def test_assign_drops_real_traceback():
    failure = raised_deep()
    assign_synthetic_origin(failure, Poller, "poll")
    assert failure.__traceback__ is None


def test_label_is_last_writer_wins():
    failure = TimeoutError("Timeout")
    assign_synthetic_origin(failure, Poller, "poll")
    assign_synthetic_origin(failure, "workers.Dispatcher", "dispatch")

    assert synthetic_origin(failure) == SyntheticOrigin("workers.Dispatcher", "dispatch")
    text = stack_trace_text(failure)
    assert "workers.Dispatcher" in text
    assert "in dispatch" in text
    assert "Poller" not in text


def test_singleton_reused_across_raise_sites():
    timeout = assign_synthetic_origin(TimeoutError("Timeout"), Poller, "poll")

    for _ in range(3):
        with pytest.raises(TimeoutError) as exc_info:
            raise timeout
        assert exc_info.value is timeout

    assert stack_trace_text(timeout).count('File "') == 1


def test_builtin_declaring_type_is_unqualified():
    failure = assign_synthetic_origin(ValueError("x"), dict, "get")
    assert str(synthetic_origin(failure)) == "dict.get"


def test_origin_in_details():
    failure = assign_synthetic_origin(ValueError("x"), "jobs.Queue", "put")
    assert failure_details(failure)["origin"] == "jobs.Queue.put"


def test_unlabeled_failure_has_no_origin():
    assert synthetic_origin(ValueError("x")) is None
    assert synthetic_origin(None) is None


def test_labeled_cause_renders_synthetic_frame():
    cause = assign_synthetic_origin(raised_deep(), Poller, "poll")
    try:
        raise RuntimeError("wrapped") from cause
    except RuntimeError as e:
        text = stack_trace_text(e)

    assert "in poll" in text
    assert "in deep" not in text
    assert "test_labeled_cause_renders_synthetic_frame" in text
