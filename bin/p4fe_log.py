#! /usr/bin/env python3
"""
Logging for p4-fisheye.

Optional configuration file, /etc/p4-fisheye.log.conf or the path named by
P4FE_LOG_CONFIG_FILE:

    [general]
    root         = INFO                # level for everything
    handler      = console             # console | syslog [host:port or path]
    file         = %(tmp)s/p4fe.log    # used when no handler is named
    format       = %(asctime)s %(name)-10s %(levelname)-8s %(message)s
    p4fe_fisheye = DEBUG2              # any other key: a per-logger level

The section header may be omitted. Without a file, everything at WARNING
and above goes to stderr.
"""

import configparser
import inspect
import logging
import logging.handlers
import os
import sys
import tempfile

import p4fe_bootstrap  # pylint: disable=W0611
import p4fe_const
from   p4fe_l10n      import _, NTR

_SECTION        = NTR('general')
_SYSLOG_IDENT   = NTR('p4-fisheye: ')
_SYSLOG_FORMAT  = NTR('%(name)s %(levelname)s %(message)s')
_DEFAULTS       = NTR({
    'root'    : 'WARNING',
    'format'  : '%(asctime)s %(name)-10s %(levelname)-8s %(message)s',
    'datefmt' : '%m-%d %H:%M:%S',
})
                        # Keys that configure the handler rather than
                        # naming a logger.
_HANDLER_KEYS   = ['root', 'handler', 'file', 'filename', 'format', 'datefmt']

_configured     = False


def config_file_path():
    """
    Return path to the log config file to read, None if there is none.
    P4FE_LOG_CONFIG_FILE wins over /etc/p4-fisheye.log.conf.
    """
    for path in [ os.environ.get(p4fe_const.P4FE_LOG_CONFIG_PATH)
                , p4fe_const.P4FE_LOG_CONFIG_DEFAULT ]:
        if path and os.path.exists(path):
            return path
    return None


def read_settings(path=None):
    """
    Return a dict of log settings: defaults overlaid with the [general]
    section of the file at path, if any.
    """
    settings = dict(_DEFAULTS)
    if not path:
        return settings
    parser = configparser.ConfigParser(interpolation=None)
    with open(path, 'r') as f:
        text = f.read()
    try:
        try:
            parser.read_string(text, source=path)
        except configparser.MissingSectionHeaderError:
            parser.read_string('[{}]\n{}'.format(_SECTION, text), source=path)
    except configparser.Error as e:
        sys.stderr.write(_('p4-fisheye: log configuration error, using defaults: {}\n')
                         .format(e))
        return settings
    if parser.has_section(_SECTION):
        settings.update(parser[_SECTION])
    if 'filename' in settings and 'file' not in settings:
        settings['file'] = settings.pop('filename')
    return settings


def create_handler(settings):
    """
    Return the logging.Handler that settings ask for.

    'handler' beats 'file'. Syslog messages carry their own ident and
    ignore 'format'.
    """
    spec = settings.get('handler')
    if spec and spec.startswith(NTR('syslog')):
        words = spec.split(maxsplit=1)
        address = (NTR('localhost'), logging.handlers.SYSLOG_UDP_PORT)
        if len(words) > 1:
            host, _sep, port = words[1].partition(':')
            address = (host, int(port)) if port else words[1]
        handler = logging.handlers.SysLogHandler(address=address)
        handler.ident = _SYSLOG_IDENT
        handler.setFormatter(logging.Formatter(_SYSLOG_FORMAT))
        return handler

    if spec and spec != NTR('console'):
        sys.stderr.write(_('p4-fisheye: unrecognized log handler: {}\n').format(spec))
        handler = logging.StreamHandler()
    elif not spec and settings.get('file'):
        path = settings['file'] % { 'user' : os.path.expanduser('~')
                                  , 'tmp'  : tempfile.gettempdir() }
        handler = logging.FileHandler(path, 'a', 'utf-8')
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(settings.get('format'), settings.get('datefmt')))
    return handler


def configure(settings):
    """Attach a handler to the root logger and apply every level in settings."""
    root = logging.getLogger()
    root.addHandler(create_handler(settings))
    root.setLevel(settings['root'].upper())
    for key, val in settings.items():
        if key not in _HANDLER_KEYS:
            logging.getLogger(key).setLevel(val.upper())


def init():
    """Configure logging once per process. Never raises."""
    global _configured
    if _configured:
        return
    _configured = True
    try:
        configure(read_settings(config_file_path()))
    # pylint:disable=W0703
    except Exception as e:
    # pylint:enable=W0703
        # Unwritable log file, bad level name: carry on without a log.
        sys.stderr.write(_('p4-fisheye: Unable to configure log: {}\n').format(e))


def for_module(depth=2):
    """
    Return the logger for the calling module, named after its file:
    "p4fe_fisheye" for .../bin/p4fe_fisheye.py.

        LOG = p4fe_log.for_module()
    """
    frame = inspect.stack()[depth]
    name = os.path.splitext(os.path.basename(frame[1]))[0]
    del frame
    return logging.getLogger(name)


class ExceptionLogger:
    """
    Record any exception raised in the with block to the log instead
    of the console, and remember the exit code it implies.

    with p4fe_log.ExceptionLogger(exit_code) as dont_care:
        ... code that can raise ...
    """

    def __init__(self, exit_code_array=None, category=NTR('p4fe'), write_to_stderr_=False):
        self.category = category
        self.write_to_stderr = write_to_stderr_
        self.exit_code_array = exit_code_array if exit_code_array else [1]
        init()

    def __enter__(self):
        return None

    def __exit__(self, exc_type, exc_value, _traceback):
        if isinstance(exc_value, SystemExit):
            self.exit_code_array[0] = exc_value.code
            return True
        if exc_type:
            self.exit_code_array[0] = 1
            logging.getLogger(self.category).error("Caught exception", exc_info=True)
            if self.write_to_stderr:
                val = exc_value.args[0] if exc_value.args else exc_value
                sys.stderr.write('{}\n'.format(val))
        return True


def run_with_exception_logger(func, write_to_stderr=False):
    """
    Call func(), log anything it raises, exit with its return value
    (1 if it raised).
    """
    exit_code = [1]
    category = for_module(depth=2).name
    with ExceptionLogger(exit_code, category, write_to_stderr_=write_to_stderr):
        exit_code[0] = func()
    logging.getLogger(category).debug("exit={}".format(exit_code[0]))
    sys.exit(exit_code[0])
