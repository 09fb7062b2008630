import pytest

from tp0net.logs import TRACE, create_logger


def _close(logger):
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_writes_to_file(tmp_path):
    path = tmp_path / "tp0.log"
    logger = create_logger(path, "logs_file", False, "INFO")
    logger.info("Soy un Log")
    _close(logger)
    content = path.read_text(encoding="utf-8")
    assert "[INFO]" in content
    assert "logs_file/" in content
    assert content.rstrip().endswith("Soy un Log")


def test_level_filters(tmp_path):
    path = tmp_path / "filtered.log"
    logger = create_logger(path, "logs_filter", False, "INFO")
    logger.debug("hidden")
    logger.warning("shown")
    _close(logger)
    content = path.read_text(encoding="utf-8")
    assert "hidden" not in content
    assert "[WARNING]" in content


def test_trace_level(tmp_path):
    path = tmp_path / "trace.log"
    logger = create_logger(path, "logs_trace", False, "trace")
    logger.log(TRACE, "deep")
    _close(logger)
    assert "[TRACE]" in path.read_text(encoding="utf-8")


def test_echo_to_stdout(tmp_path, capsys):
    logger = create_logger(tmp_path / "echo.log", "logs_echo", True, "DEBUG")
    logger.info("visible")
    _close(logger)
    assert "visible" in capsys.readouterr().out


def test_recreate_replaces_handlers(tmp_path):
    create_logger(tmp_path / "a.log", "logs_again", True, "INFO")
    logger = create_logger(tmp_path / "b.log", "logs_again", False, "INFO")
    assert len(logger.handlers) == 1
    _close(logger)


def test_unknown_level(tmp_path):
    with pytest.raises(ValueError):
        create_logger(tmp_path / "x.log", "logs_bad", False, "LOUD")