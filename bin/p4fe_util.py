#! /usr/bin/env python3
"""Some utility functions for p4-fisheye."""

import argparse
import sys
import urllib.parse

import p4fe_bootstrap  # pylint: disable=W0611
from   p4fe_l10n      import _
import p4fe_version


def create_arg_parser(desc, epilog=None, usage=None):
    """Creates and returns an instance of ArgumentParser configured
    with the options common to all p4-fisheye commands. The caller
    may further customize the parser prior to calling parse_args().

    Keyword arguments:
    desc -- the description of the command being invoked

    """
    class VersionAction(argparse.Action):
        """Custom argparse action to display version to stdout (instead
        of stderr, which seems to be the default in argparse)."""
        def __call__(self, parser, namespace, values, option_string=None):
            print(p4fe_version.as_string())
            sys.exit(0)

    parser = argparse.ArgumentParser( description = desc
                                    , epilog      = epilog
                                    , usage       = usage)
    parser.add_argument("-V", action=VersionAction, nargs=0,
                        help=_('displays version information and exits'))
    return parser


def first_dict_with_key(result_list, key):
    '''
    Return the first dict result that sets the required key.
    '''
    for e in result_list:
        if isinstance(e, dict) and key in e:
            return e
    return None


def trim_head_slash(path):
    '''Remove a single leading '/', if any. None becomes empty string.'''
    if not path:
        return ''
    if path.startswith('/'):
        return path[1:]
    return path


def ensure_trailing_slash(url):
    '''Append '/' to url unless it already ends with one.'''
    if url.endswith('/'):
        return url
    return url + '/'


def normalize_to_end_with_slash(url):
    '''
    Return url with a '/' appended to its path unless the path already
    ends with one. Query string and fragment are kept.

        http://host/browse/proj?a=b  ==>  http://host/browse/proj/?a=b
    '''
    parts = urllib.parse.urlsplit(url)
    if parts.path.endswith('/'):
        return url
    return urllib.parse.urlunsplit(parts._replace(path=parts.path + '/'))
