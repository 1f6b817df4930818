#! /usr/bin/env python3
'''
Validation of a candidate FishEye browse URL.

Advisory only: tells an administrator editing a configuration whether the
URL looks right. Never raises for a bad URL or an unreachable server, and
never affects link construction.
'''
from   collections import namedtuple

import requests

import p4fe_const
from   p4fe_l10n import _, NTR
import p4fe_log
import p4fe_util

LOG = p4fe_log.for_module()

OK              = NTR('ok')
ERROR           = NTR('error')
NETWORK_ERROR   = NTR('network-error')


class ValidationResult(namedtuple('ValidationResult', ['kind', 'message'])):
    '''
    Outcome of validate().

    kind is OK, ERROR (the URL is wrong) or NETWORK_ERROR (could not ask
    the server). message is '' for OK, else a human-readable explanation.
    '''
    __slots__ = ()

    @staticmethod
    def ok():
        '''URL is blank, or looks like FishEye.'''
        return ValidationResult(OK, '')

    @staticmethod
    def error(message):
        '''URL shape or content is wrong.'''
        return ValidationResult(ERROR, message)

    @staticmethod
    def network_error(message):
        '''Could not reach the server to check.'''
        return ValidationResult(NETWORK_ERROR, message)

    @property
    def is_ok(self):
        '''True if OK.'''
        return self.kind == OK


def connectivity_message(url, exc):
    '''
    Return a human-readable explanation of why we could not fetch url.
    '''
    if isinstance(exc, requests.HTTPError) and exc.response is not None:
        return _("Failed to fetch '{url}': server returned {status} {reason}") \
               .format( url    = url
                      , status = exc.response.status_code
                      , reason = exc.response.reason)
    if isinstance(exc, requests.Timeout):
        return _("Timed out connecting to '{url}'").format(url=url)
    if isinstance(exc, requests.ConnectionError):
        return _("Unable to connect to '{url}': {err}").format(url=url, err=exc)
    return _("Failed to fetch '{url}': {err}").format(url=url, err=exc)


def find_text(url, text, timeout=p4fe_const.URL_CHECK_TIMEOUT):
    '''
    Fetch url with a plain HTTP GET and return True if its body contains
    text.

    Raises requests.RequestException on any transport failure or
    non-2xx status.
    '''
    LOG.debug("GET {}".format(url))
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return text in response.text


def validate(candidate_url, timeout=p4fe_const.URL_CHECK_TIMEOUT):
    '''
    Check whether candidate_url looks like a FishEye repository browse URL.

    Returns a ValidationResult.
    '''
    url = candidate_url.strip() if candidate_url else ''
    if not url:
        # Browser integration is optional.
        return ValidationResult.ok()

    url = p4fe_util.ensure_trailing_slash(url)
    if not p4fe_const.FISHEYE_URL_RE.fullmatch(url):
        return ValidationResult.error(
                    _('The URL should end like .../browse/foobar/'))

    try:
        found = find_text(url, p4fe_const.FISHEYE_MARKER_TEXT, timeout)
    except requests.RequestException as e:
        LOG.warning("URL check {} failed: {}".format(url, e))
        return ValidationResult.network_error(connectivity_message(url, e))

    if not found:
        return ValidationResult.error(
                    _("This is a valid URL but it doesn't look like FishEye"))
    return ValidationResult.ok()
