import pytest

from acffields.core.exceptions import (
    AcfFieldsException,
    InvalidArgumentError,
    ProviderError,
    ProviderErrorPolicy,
    ProviderFailureHandler,
)


def test_invalid_argument_error_message_includes_details():
    err = InvalidArgumentError("bad term", details={"term": ["category"]})

    assert str(err) == "bad term - {'term': ['category']}"
    assert isinstance(err, AcfFieldsException)
    assert isinstance(err, ValueError)


def test_fail_policy_wraps_error():
    handler = ProviderFailureHandler(policy=ProviderErrorPolicy.FAIL)

    with pytest.raises(ProviderError, match="user_1") as exc:
        handler.handle(RuntimeError("down"), details={"key": "user_1"})

    assert isinstance(exc.value.__cause__, RuntimeError)


def test_fail_policy_reraises_provider_error_unchanged():
    handler = ProviderFailureHandler(policy=ProviderErrorPolicy.FAIL)
    original = ProviderError("HTTP 500")

    with pytest.raises(ProviderError) as exc:
        handler.handle(original)

    assert exc.value is original


def test_warn_policy_without_logger_emits_warning():
    handler = ProviderFailureHandler(policy=ProviderErrorPolicy.WARN)

    with pytest.warns(UserWarning, match="down"):
        handler.handle(RuntimeError("down"))


def test_allow_policy_is_silent(recwarn):
    ProviderFailureHandler(policy=ProviderErrorPolicy.ALLOW).handle(RuntimeError("down"))

    assert len(recwarn) == 0
