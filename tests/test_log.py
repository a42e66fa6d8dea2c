import io

import pytest

from ordtree import log


def _logger(level=log.LOG_WARN, colors='never'):
    f = io.StringIO()
    return log.Logger(loglevel=level, logfile=f, colors=colors), f


def test_level_filtering():
    logger, f = _logger(log.LOG_INFO)
    logger.do_log(log.LOG_INFO, "loaded ", 3, " values")
    logger.do_log(log.LOG_DEBUG1, "hidden")
    assert f.getvalue() == "loaded 3 values\n"


def test_fatal_is_always_written():
    logger, f = _logger(log.LOG_FATAL - 1)
    logger.do_log(log.LOG_FATAL, "boom")
    assert f.getvalue() == "boom\n"


def test_colors_always():
    logger, f = _logger(colors='always')
    logger.do_log(log.LOG_WARN, "careful")
    assert f.getvalue() == log.Colors.BRIGHT_YELLOW + "careful" + log.Colors.RESET + "\n"


def test_colors_auto_without_tty():
    logger, f = _logger(colors='auto')
    assert isinstance(logger.colors.colors, log.NoColors)
    assert not isinstance(logger.colors.colors, log.Colors)


def test_invalid_color_preference():
    logger, _ = _logger()
    with pytest.raises(ValueError):
        logger.set_colors('sometimes')


def test_module_functions(logfile):
    log.info("loading")
    log.debug1("loaded")
    log.debug3("detail")
    assert logfile.getvalue() == ("loading\n"
                                  "loaded\n"
                                  "detail\n")


def test_module_functions_respect_level(logfile):
    log.logger.loglevel = log.LOG_INFO
    log.info("shown")
    log.debug1("hidden")
    assert logfile.getvalue() == "shown\n"


def test_fatal_exit(logfile):
    with pytest.raises(SystemExit) as excinfo:
        log.fatal_exit(2, "giving up")
    assert excinfo.value.code == 2
    assert logfile.getvalue().endswith(": fatal: giving up\n")
