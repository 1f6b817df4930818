'''Log configuration.'''
import logging
import logging.handlers

import pytest

import p4fe_log


@pytest.fixture
def root_logger():
    '''Restore the root logger's handlers and level after a test.'''
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in root.handlers:
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


def test_for_module_names_logger_after_file():
    assert p4fe_log.for_module().name == 'test_log'


def test_defaults_without_config():
    settings = p4fe_log.read_settings(None)
    assert settings['root'] == 'WARNING'
    assert 'file' not in settings
    assert 'handler' not in settings


def test_config_file_from_environment(tmp_path, monkeypatch):
    path = tmp_path / 'log.conf'
    path.write_text('root = INFO\n')
    monkeypatch.setenv('P4FE_LOG_CONFIG_FILE', str(path))
    assert p4fe_log.config_file_path() == str(path)


def test_settings_without_section_header(tmp_path):
    path = tmp_path / 'log.conf'
    path.write_text('root = ERROR\np4fe_fisheye = DEBUG\nfilename = x.log\n')
    settings = p4fe_log.read_settings(str(path))
    assert settings['root'] == 'ERROR'
    assert settings['p4fe_fisheye'] == 'DEBUG'
    assert settings['file'] == 'x.log'


def test_unparsable_settings_fall_back(tmp_path, capsys):
    path = tmp_path / 'log.conf'
    path.write_text('[general]\nroot = INFO\n[general]\n')
    assert p4fe_log.read_settings(str(path))['root'] == 'WARNING'
    assert 'log configuration error' in capsys.readouterr().err


def test_file_handler_expands_tmp(tmp_path, monkeypatch):
    monkeypatch.setattr('tempfile.gettempdir', lambda: str(tmp_path))
    handler = p4fe_log.create_handler({'file': '%(tmp)s/p4fe.log', 'format': '%(message)s'})
    try:
        assert isinstance(handler, logging.FileHandler)
        assert handler.baseFilename == str(tmp_path / 'p4fe.log')
    finally:
        handler.close()


def test_syslog_handler():
    handler = p4fe_log.create_handler({'handler': 'syslog localhost:5514', 'file': 'ignored'})
    try:
        assert isinstance(handler, logging.handlers.SysLogHandler)
        assert handler.address == ('localhost', 5514)
        assert handler.ident == 'p4-fisheye: '
        record = logging.LogRecord('p4fe_fisheye', logging.ERROR, __file__, 1, 'bad url', None, None)
        assert handler.format(record) == 'p4fe_fisheye ERROR bad url'
    finally:
        handler.close()


def test_unknown_handler_falls_back_to_console(capsys):
    handler = p4fe_log.create_handler({'handler': 'carrier-pigeon'})
    assert type(handler) is logging.StreamHandler
    assert 'carrier-pigeon' in capsys.readouterr().err


def test_configure_applies_levels(root_logger):
    p4fe_log.configure({'root': 'info', 'handler': 'console', 'p4fe_browser': 'debug2'})
    assert root_logger.level == logging.INFO
    assert logging.getLogger('p4fe_browser').level == logging.DEBUG2
    logging.getLogger('p4fe_browser').setLevel(logging.NOTSET)


def test_exception_logger_squelches_and_records_exit_code():
    exit_code = [0]
    with p4fe_log.ExceptionLogger(exit_code):
        raise RuntimeError('boom')
    assert exit_code == [1]


def test_run_with_exception_logger_exits_with_result():
    with pytest.raises(SystemExit) as e:
        p4fe_log.run_with_exception_logger(lambda: 2)
    assert e.value.code == 2


def test_debug2_level_installed():
    assert logging.getLevelName(logging.DEBUG2) == 'DEBUG2'
    assert hasattr(logging.getLogger('p4fe_test'), 'debug3')
