import json
import logging

from libs.core.settings import Settings
from libs.logging import JsonFormatter, setup_logging


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("libs.i18n.resolver", logging.WARNING, __file__, 1, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_fields_and_extras() -> None:
    formatter = JsonFormatter(service="lolomo", environment="test")
    line = formatter.format(_record("timed out", candidates=["lolomo_es.properties"]))
    data = json.loads(line)

    assert data["level"] == "WARNING"
    assert data["logger"] == "libs.i18n.resolver"
    assert data["service"] == "lolomo"
    assert data["environment"] == "test"
    assert data["message"] == "timed out"
    assert data["candidates"] == ["lolomo_es.properties"]
    assert data["timestamp"].endswith("Z")


def test_json_formatter_error_and_unserializable_extra() -> None:
    formatter = JsonFormatter(service="lolomo", environment="test")
    try:
        raise ValueError("bad")
    except ValueError:
        import sys

        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())
    record.path = object()
    data = json.loads(formatter.format(record))
    assert data["error"] == {"class": "ValueError", "message": "bad"}
    assert data["path"].startswith("<object")


def test_setup_logging_installs_json_handler() -> None:
    root = logging.getLogger()
    previous = list(root.handlers), root.level
    try:
        setup_logging(Settings(log_level="debug"))
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
    finally:
        root.handlers[:] = previous[0]
        root.setLevel(previous[1])
