#! /usr/bin/env python3
"""Create a new P4.P4() instance."""

import os

import P4
import p4fe_log
import p4fe_version

LOG = p4fe_log.for_module()


def create_p4(port=None, user=None):
    """Return a new, unconnected P4.P4() instance with its prog set to
    'P4FE/2026.1/0 (2026/10/19)'

    Connect with Connector. port and user default to the P4PORT and
    P4USER environment.

    There should be NO bare calls to P4.P4().
    """
    if 'P4PORT' in os.environ:
        LOG.debug("os.environment['P4PORT'] {0}".format(os.environ['P4PORT']))
    p4 = P4.P4()
    p4.prog = p4fe_version.as_single_line()
    p4.exception_level = P4.P4.RAISE_ERRORS
    if port:
        p4.port = port
    if user:
        p4.user = user
    LOG.debug("create_p4 port={} user={}".format(p4.port, p4.user))
    return p4


class Connector:
    '''
    RAII object that connects and disconnects a P4 connection.
    '''
    def __init__(self, p4):
        self.p4 = p4

    def __enter__(self):
        if not self.p4.connected():
            self.p4.connect()
        return self.p4

    def __exit__(self, _exc_type, _exc_value, _traceback):
        if self.p4.connected():
            self.p4.disconnect()
        return False  # False == do not squelch any current exception
