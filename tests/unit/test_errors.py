from shortlink.core.errors import (
    BackendError,
    BackendUnavailableError,
    CounterIncrementError,
    InvalidCodeError,
    LinkStoreError,
)


def test_backend_errors_are_retryable_kind():
    assert issubclass(BackendUnavailableError, BackendError)
    assert issubclass(CounterIncrementError, BackendError)
    assert not issubclass(InvalidCodeError, BackendError)


def test_error_kinds():
    assert BackendUnavailableError().kind == "backend_unavailable"
    assert CounterIncrementError().kind == "counter_increment_failed"
    assert InvalidCodeError("bad").kind == "invalid_code"


def test_default_messages():
    assert str(BackendUnavailableError()) == "Backend unavailable"
    assert str(CounterIncrementError()) == "Counter increment failed"
    assert isinstance(CounterIncrementError(), LinkStoreError)
