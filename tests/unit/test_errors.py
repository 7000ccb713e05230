import pytest
from pydantic import ValidationError

from zipf_sampler.config import SamplerConfig  # type: ignore
from zipf_sampler.errors import (  # type: ignore
    ElementsZeroError,
    InvalidExponentError,
    SourceExhaustedError,
    ZipfConfigError,
    reason_code,
)


def test_error_messages_carry_code_and_detail():
    err = ElementsZeroError("num_elements must be >= 1; got 0")
    assert err.code == "ELEMENTS_ZERO"
    assert str(err) == "ELEMENTS_ZERO:num_elements must be >= 1; got 0"
    assert str(InvalidExponentError()) == "INVALID_EXPONENT"


@pytest.mark.parametrize(
    "exc,code",
    [
        (ElementsZeroError(), "ELEMENTS_ZERO"),
        (InvalidExponentError("x"), "INVALID_EXPONENT"),
        (ZipfConfigError("NON_FINITE_CONSTANTS"), "NON_FINITE_CONSTANTS"),
        (SourceExhaustedError("done"), "SOURCE_EXHAUSTED"),
        (ValueError("BAD_THING: detail"), "BAD_THING"),
        (RuntimeError("boom"), "INTERNAL_ERROR"),
    ],
)
def test_reason_code(exc, code):
    assert reason_code(exc) == code


def test_reason_code_follows_cause():
    try:
        try:
            raise InvalidExponentError("exponent must be > 0; got 0.0")
        except ZipfConfigError as inner:
            raise ValueError("Error parsing config 'x.yaml'") from inner
    except ValueError as outer:
        assert reason_code(outer) == "INVALID_EXPONENT"


def test_reason_code_unwraps_validation_error():
    with pytest.raises(ValidationError) as exc:
        SamplerConfig.model_validate({"distribution": {"num_elements": 0}})
    assert reason_code(exc.value) == "ELEMENTS_ZERO"
