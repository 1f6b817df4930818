#! /usr/bin/env python3
'''
p4-fisheye configuration files.

Files are simple INI format:

    [@browser]
    kind        = fisheye
    url         = http://deadlock.netbeans.org/fisheye/browse/netbeans/
    root-module = //depot/netbeans/

'kind' is optional and defaults to 'fisheye'. 'root-module' is optional and
defaults to empty: depot paths are appended to the url unchanged.
'''
from   collections import namedtuple
import configparser
import io
import sys
import urllib.parse

import p4fe_const
from   p4fe_l10n import _, NTR
import p4fe_log
import p4fe_util

LOG = p4fe_log.for_module()

SECTION_BROWSER             = NTR('@browser')
KEY_KIND                    = NTR('kind')
KEY_URL                     = NTR('url')
KEY_ROOT_MODULE             = NTR('root-module')


class ConfigError(RuntimeError):
    '''Configuration is missing, unreadable, or carries an illegal value.'''
    pass


class BrowserConfig(namedtuple('BrowserConfig', ['kind', 'url', 'root_module'])):
    '''
    Immutable repository browser configuration.

    Build with BrowserConfig.create(), never the bare constructor, so that
    url always ends with '/' and up to two leading slashes are gone from root_module.
    '''
    __slots__ = ()

    @staticmethod
    def create(url, root_module=None, kind=p4fe_const.BROWSER_DEFAULT):
        '''
        Normalize and return a new BrowserConfig.

        kind is lowercased. Only two leading slashes are stripped from
        root_module: '///sub' becomes '/sub' here, and '/sub' would lose
        one more if written out and read back, so such a config does not
        survive to_text()/read_file() unchanged.
        '''
        return BrowserConfig( kind        = (kind or p4fe_const.BROWSER_DEFAULT).lower()
                            , url         = p4fe_util.normalize_to_end_with_slash(url)
                            , root_module = p4fe_util.trim_head_slash(
                                            p4fe_util.trim_head_slash(root_module)))


def _require_absolute_url(url, source):
    '''Raise ConfigError unless url has both a scheme and a host.'''
    parts = urllib.parse.urlsplit(url)
    if not (parts.scheme and parts.netloc):
        msg = _("Config '{source}': [{section}] {key} '{url}' is not an absolute URL.") \
              .format( source  = source
                     , section = SECTION_BROWSER
                     , key     = KEY_URL
                     , url     = url)
        LOG.error(msg)
        raise ConfigError(msg)


def browser_config_from_fields(url, root_module=None, kind=None, source=NTR('<fields>')):
    '''
    Return a BrowserConfig built from loosely typed form/option values.

    Raises ConfigError with a descriptive message on missing or malformed
    input. Known kinds are checked by p4fe_browser, not here.
    '''
    url = url.strip() if url else ''
    if not url:
        msg = _("Config '{source}': [{section}] missing required '{key}'.") \
              .format(source=source, section=SECTION_BROWSER, key=KEY_URL)
        LOG.error(msg)
        raise ConfigError(msg)
    _require_absolute_url(url, source)
    kind = kind.strip().lower() if kind and kind.strip() else p4fe_const.BROWSER_DEFAULT
    root_module = root_module.strip() if root_module else ''
    config = BrowserConfig.create(url, root_module, kind)
    LOG.debug("browser config from {}: {}".format(source, config))
    return config


def browser_config_from_parser(parser, source=NTR('<string>')):
    '''
    Return a BrowserConfig built from the [@browser] section of a
    ConfigParser instance.
    '''
    if not parser.has_section(SECTION_BROWSER):
        msg = _("Config '{source}': missing section [{section}].") \
              .format(source=source, section=SECTION_BROWSER)
        LOG.error(msg)
        raise ConfigError(msg)
    return browser_config_from_fields(
                  url         = parser.get(SECTION_BROWSER, KEY_URL,         fallback=None)
                , root_module = parser.get(SECTION_BROWSER, KEY_ROOT_MODULE, fallback=None)
                , kind        = parser.get(SECTION_BROWSER, KEY_KIND,        fallback=None)
                , source      = source)


def _read_string(config, file_path, contents):
    '''
    If unable to parse, convert generic ParseError to one that
    also contains a path to the unparsable file.
    '''
    try:
        config.read_string(contents, source=file_path)
    except configparser.Error as e:
        msg = _("Unable to read config file '{}'.\n{}").format(file_path, e)
        LOG.error(msg)
        raise ConfigError(msg)


def read_string(contents, source=NTR('<string>')):
    '''Parse INI text into a BrowserConfig.'''
    parser = configparser.ConfigParser( interpolation  = None
                                      , allow_no_value = True)
    _read_string(parser, source, contents)
    return browser_config_from_parser(parser, source)


def read_file(file_path):
    '''Read the named file into a BrowserConfig. Raises ConfigError if
    the file cannot be read or parsed for any reason.
    '''
    try:
        with open(file_path, 'r') as f:
            contents = f.read()
    except OSError as e:
        msg = _("Unable to read config file '{}'.\n{}").format(file_path, e)
        LOG.error(msg)
        raise ConfigError(msg)
    return read_string(contents, file_path)


def to_parser(config):
    '''Return a new ConfigParser holding config's values.'''
    parser = configparser.ConfigParser(interpolation=None)
    parser.add_section(SECTION_BROWSER)
    parser.set(SECTION_BROWSER, KEY_KIND,        config.kind)
    parser.set(SECTION_BROWSER, KEY_URL,         config.url)
    parser.set(SECTION_BROWSER, KEY_ROOT_MODULE, config.root_module)
    return parser


def to_text(config, comment_header=''):
    '''
    Produce a single string with a comment header and a BrowserConfig,
    suitable for writing to file.
    '''
    out = io.StringIO()
    out.write(comment_header)
    to_parser(config).write(out)
    file_content = out.getvalue()
    out.close()
    return file_content


def main():
    '''
    Parse the command-line arguments and print the effective configuration.
    '''
    desc = _("""Display the effective repository browser configuration.
All comment lines are elided and formatting is normalized per the
default behavior of the configparser Python module.
""")
    parser = p4fe_util.create_arg_parser(desc=desc)
    parser.add_argument(NTR('config'), metavar=NTR('FILE'),
        help=_('path to the browser configuration file.'))
    args = parser.parse_args()
    sys.stdout.write(to_text(read_file(args.config)))


if __name__ == "__main__":
    main()
