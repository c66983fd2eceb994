import io

from rich.console import Console

from phraseconv.logging_utils import RichLogger


def make_logger(tmp_path, quiet=False, log_file=True):
    buffer = io.StringIO()
    console = Console(file=buffer, width=120)
    path = tmp_path / "run.log" if log_file else None
    return RichLogger(log_file=path, console=console, quiet=quiet), buffer, path


def test_messages_go_to_console_and_log_file(tmp_path):
    logger, buffer, path = make_logger(tmp_path)
    logger.log_text("plain message")
    logger.log_panel("loaded 3 phrases", "INFO", "cyan")

    output = buffer.getvalue()
    assert "plain message" in output
    assert "loaded 3 phrases" in output
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0].endswith(" - plain message")
    assert lines[1].endswith(" - INFO: loaded 3 phrases")


def test_quiet_suppresses_console_but_keeps_log_file(tmp_path):
    logger, buffer, path = make_logger(tmp_path, quiet=True)
    logger.log_text("plain message")
    logger.log_panel("loaded 3 phrases", "INFO", "cyan")

    assert buffer.getvalue() == ""
    log = path.read_text(encoding="utf-8")
    assert "plain message" in log
    assert "INFO: loaded 3 phrases" in log


def test_exceptions_are_shown_in_quiet_mode(tmp_path):
    logger, buffer, path = make_logger(tmp_path, quiet=True)
    try:
        raise FileNotFoundError("Dictionary file not found: missing.txt")
    except FileNotFoundError as error:
        logger.log_exception(error)

    assert "missing.txt" in buffer.getvalue()
    log = path.read_text(encoding="utf-8")
    assert "ERROR: Dictionary file not found: missing.txt" in log
    assert "Traceback" in log


def test_without_log_file_nothing_is_written(tmp_path):
    logger, buffer, path = make_logger(tmp_path, log_file=False)
    logger.log_text("only on console")
    assert path is None
    assert "only on console" in buffer.getvalue()
    assert list(tmp_path.iterdir()) == []
