"""Sampler error taxonomy and helpers."""

from __future__ import annotations


class ZipfConfigError(ValueError):
    """Stable configuration error surfaced as a reason code."""

    def __init__(self, code: str, detail: str | None = None) -> None:
        self.code = code
        self.detail = detail
        message = f"{code}:{detail}" if detail else code
        super().__init__(message)


class ElementsZeroError(ZipfConfigError):
    """The support [1, N] is empty."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__("ELEMENTS_ZERO", detail)


class InvalidExponentError(ZipfConfigError):
    """The exponent is not strictly positive."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__("INVALID_EXPONENT", detail)


class SourceExhaustedError(RuntimeError):
    """A fixed draw sequence ran out before sampling finished."""

    code = "SOURCE_EXHAUSTED"


def reason_code(exc: BaseException) -> str:
    code = getattr(exc, "code", None)
    if isinstance(code, str) and code:
        return code
    # pydantic keeps the validator's exception in each error's ctx
    errors = getattr(exc, "errors", None)
    if callable(errors):
        for item in errors():
            inner = (item.get("ctx") or {}).get("error")
            if isinstance(inner, BaseException):
                found = reason_code(inner)
                if found != "INTERNAL_ERROR":
                    return found
    if exc.__cause__ is not None:
        found = reason_code(exc.__cause__)
        if found != "INTERNAL_ERROR":
            return found
    text = str(exc or "").strip()
    if text.isupper():
        return text
    if ":" in text:
        head = text.split(":", 1)[0].strip()
        if head.isupper():
            return head
    return "INTERNAL_ERROR"
