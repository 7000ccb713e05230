import logging

import pytest

from zipf_sampler.logging_utils import configure_logging, resolve_level  # type: ignore


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("INFO") == logging.INFO
    assert resolve_level(logging.ERROR) == logging.ERROR
    with pytest.raises(ValueError):
        resolve_level("chatty")


def test_configure_logging_adjusts_level_when_handlers_exist():
    root = logging.getLogger()
    previous = root.level
    handler = logging.NullHandler()
    root.addHandler(handler)
    try:
        configure_logging("WARNING")
        assert root.level == logging.WARNING
        assert handler in root.handlers
    finally:
        root.removeHandler(handler)
        root.setLevel(previous)
