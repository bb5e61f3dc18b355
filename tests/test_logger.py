import io
import json
import logging

from burovichok.logger import Logger, new_logger


def test_console_output_contains_message_and_fields():
    stream = io.StringIO()
    log = Logger(stream=stream)
    log.infow("import done", "count", 3)
    out = stream.getvalue()
    assert "INFO" in out
    assert "import done" in out
    assert '"count": 3' in out


def test_debug_suppressed_at_info_level():
    stream = io.StringIO()
    log = Logger(level=logging.INFO, stream=stream)
    log.debugw("hidden")
    log.errorw("shown", "error", "boom")
    out = stream.getvalue()
    assert "hidden" not in out
    assert "shown" in out
    assert "ERROR" in out


def test_json_output_is_parseable():
    stream = io.StringIO()
    log = Logger(json_format=True, stream=stream)
    log.errorw("failed", "error", "boom", "id", 7)
    entry = json.loads(stream.getvalue().strip())
    assert entry["msg"] == "failed"
    assert entry["level"] == "error"
    assert entry["error"] == "boom"
    assert entry["id"] == 7


def test_dangling_key_is_kept():
    stream = io.StringIO()
    log = Logger(json_format=True, stream=stream)
    log.infow("odd", "key", "value", "lonely")
    entry = json.loads(stream.getvalue().strip())
    assert entry["key"] == "value"
    assert entry["ignored"] == "lonely"


def test_loggers_do_not_share_output():
    first, second = io.StringIO(), io.StringIO()
    Logger(stream=first).infow("one")
    Logger(stream=second).infow("two")
    assert "two" not in first.getvalue()
    assert "one" not in second.getvalue()


def test_new_logger_levels_by_env():
    assert new_logger("prod").level == logging.INFO
    assert new_logger("dev").level == logging.DEBUG
    assert new_logger("").level == logging.DEBUG