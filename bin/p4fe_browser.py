#! /usr/bin/env python3
'''
Repository browser registry.

Maps a browser kind, as named in a configuration file's [@browser] kind
option, to the class that builds links for it. Each class takes a single
p4fe_config.BrowserConfig argument.
'''
import p4fe_config
from   p4fe_config  import ConfigError
import p4fe_const
from   p4fe_fisheye import FishEyeBrowser
from   p4fe_l10n    import _
import p4fe_log

LOG = p4fe_log.for_module()

_KINDS = {
    p4fe_const.BROWSER_FISHEYE : FishEyeBrowser,
}


def register(kind, constructor):
    '''Make a browser kind available to create() and from_config().'''
    LOG.debug("register browser kind {} ==> {}".format(kind, constructor))
    _KINDS[kind.lower()] = constructor


def kinds():
    '''Return sorted list of known browser kinds.'''
    return sorted(_KINDS.keys())


def from_config(config):
    '''
    Return a browser instance for an already-parsed BrowserConfig.

    Raises ConfigError for an unknown kind.
    '''
    constructor = _KINDS.get(config.kind)
    if constructor is None:
        msg = _("unknown repository browser '{kind}', expected one of: {known}") \
              .format(kind=config.kind, known=', '.join(kinds()))
        LOG.error(msg)
        raise ConfigError(msg)
    return constructor(config)


def create(kind, url, root_module=None):
    '''Return a browser instance from loosely typed field values.'''
    return from_config(p4fe_config.browser_config_from_fields( url
                                                             , root_module
                                                             , kind))


def from_file(file_path):
    '''Return a browser instance configured by an INI file.'''
    return from_config(p4fe_config.read_file(file_path))
