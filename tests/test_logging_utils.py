import logging

import numpy as np
import pytest

from relmap.logging_utils import apply_debug_logging, debug_log_call, safe_repr


def test_safe_repr_summarizes_large_values():
    assert safe_repr(np.zeros((100, 2))).startswith("ndarray(shape=(100, 2), dtype=float64)")
    assert "min=0" in safe_repr(np.zeros((100, 2)))
    assert "(20 items)" in safe_repr(list(range(20)))
    assert safe_repr({"a": 1}) == "{'a': 1}"


def test_debug_log_call_logs_entry_and_exit(caplog):
    logger = logging.getLogger("relmap.tests.debug")

    @debug_log_call(logger)
    def add(a, b):
        return a + b

    with caplog.at_level(logging.DEBUG, logger="relmap.tests.debug"):
        assert add(2, b=3) == 5

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Entering") and "kwargs={b=3}" in message for message in messages)
    assert any(message.endswith("-> 5") for message in messages)


def test_debug_log_call_reraises(caplog):
    logger = logging.getLogger("relmap.tests.debug")

    @debug_log_call(logger)
    def boom():
        raise ValueError("nope")

    with caplog.at_level(logging.DEBUG, logger="relmap.tests.debug"):
        with pytest.raises(ValueError):
            boom()

    assert any("Exception in" in record.getMessage() for record in caplog.records)


def test_apply_debug_logging_wraps_module_functions():
    def double(value):
        return value * 2

    def untouched(value):
        return value

    double.__module__ = "relmap.tests.fake"
    untouched.__module__ = "relmap.tests.fake"
    namespace = {"__name__": "relmap.tests.fake", "double": double, "untouched": untouched}

    apply_debug_logging(namespace, skip={"untouched"})

    assert getattr(namespace["double"], "_debug_logging_wrapped", False)
    assert namespace["double"](4) == 8
    assert namespace["untouched"] is untouched
