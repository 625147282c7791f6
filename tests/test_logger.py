import re
from datetime import datetime

from routemaze.route.logger import Logger, LogLevel


def test_info_goes_to_stdout_and_file(tmp_path, capsys):
    log_file = tmp_path / "app.log"
    Logger(log_file).info("hello")
    assert capsys.readouterr().out == "\033[32m[INFO] hello\033[0m\n"
    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert lines[0].endswith("] [INFO] hello")


def test_timestamp_format(tmp_path):
    log_file = tmp_path / "app.log"
    Logger(log_file).warning("careful")
    line = log_file.read_text(encoding="utf-8").strip()
    match = re.match(r"^\[(.+?)\] \[WARNING\] careful$", line)
    assert match is not None
    stamp = datetime.strptime(match.group(1), "%Y-%m-%d %H:%M:%S")
    assert abs((datetime.now() - stamp).total_seconds()) < 60


def test_error_goes_to_stderr(tmp_path, capsys):
    Logger(tmp_path / "app.log").error("boom")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "\033[31m[ERROR] boom\033[0m\n"


def test_debug_filtered_by_default(tmp_path, capsys):
    log_file = tmp_path / "app.log"
    logger = Logger(log_file)
    logger.debug("hidden")
    assert capsys.readouterr().out == ""
    assert not log_file.exists()
    logger.set_level(LogLevel.DEBUG)
    logger.debug("shown")
    assert "[DEBUG] shown" in capsys.readouterr().out
    assert "[DEBUG] shown" in log_file.read_text(encoding="utf-8")


def test_none_level_suppresses_everything(tmp_path, capsys):
    log_file = tmp_path / "app.log"
    logger = Logger(log_file, LogLevel.NONE)
    logger.error("x")
    logger.info("y")
    captured = capsys.readouterr()
    assert captured.out == captured.err == ""
    assert not log_file.exists()


def test_messages_are_appended(tmp_path):
    log_file = tmp_path / "app.log"
    logger = Logger(log_file, LogLevel.WARNING)
    logger.info("skipped")
    logger.warning("one")
    logger.error("two")
    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert [line.split("] ", 1)[1] for line in lines] == ["[WARNING] one", "[ERROR] two"]


def test_unwritable_log_file_is_ignored(tmp_path, capsys):
    Logger(tmp_path).info("still printed")
    assert "[INFO] still printed" in capsys.readouterr().out