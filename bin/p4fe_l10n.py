#! /usr/bin/env python3
'''
Message translation.

    _(msg)   -- translate a user-visible message via gettext
    NTR(x)   -- "No Translation Required": marks literals that must never be
                translated (config keys, log formats, URL fragments). Returns
                its argument unchanged.

Message catalogs live under bin/mo/{lang}/LC_MESSAGES/p4-fisheye.mo. No
catalog is a normal condition: gettext falls back to the untranslated text.
'''
import gettext
import logging
import os

_DOMAIN = 'p4-fisheye'


def mo_dir():
    '''Return the path to the directory that holds message catalogs.'''
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), 'mo')


_TRANSLATION = gettext.translation( _DOMAIN
                                  , localedir = mo_dir()
                                  , fallback  = True)


def _(msg):
    '''Translate msg into the current locale's language.'''
    return _TRANSLATION.gettext(msg)


# pylint:disable=C0103
def NTR(x):
    '''No-op marker for strings that require no translation.'''
    return x
# pylint:enable=C0103


def log_l10n():
    '''Record which message catalog, if any, we loaded.'''
    log = logging.getLogger('p4fe_l10n')
    if isinstance(_TRANSLATION, gettext.GNUTranslations):
        log.debug("message catalog loaded from {}".format(mo_dir()))
    else:
        log.debug("no message catalog found in {}, using untranslated text"
                  .format(mo_dir()))
