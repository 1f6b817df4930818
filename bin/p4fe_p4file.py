#! /usr/bin/env python3
""" P4File class"""

import sys


class P4File:
    """A file revision, as reported by p4 describe.

    change holds the changelist number exactly as recorded: usually a
    string or int, None for legacy records that predate storing it.
    It is not converted here; link construction converts it when needed.
    """
    def __init__(self):
        self.depot_path = None
        self.action = None
        self._revision = None
        self.type = ""
        self.change = None

    @property
    def revision(self):
        """revision"""
        return self._revision

    @revision.setter
    def revision(self, value):
        """revision"""
        if not isinstance(value, int):
            value = int(value)
        self._revision = value

    @property
    def filename(self):
        """Depot path, under the name browsers use for it."""
        return self.depot_path

    @staticmethod
    def create(depot_path, action, revision, change=None):
        """Create P4File from already-known values."""
        f = P4File()
        f.depot_path = depot_path
        f.action     = action
        f.revision   = revision
        f.change     = change
        return f

    @staticmethod
    def create_from_describe(vardict, index):
        """Create P4File from p4 describe

        Describe reports the change number once for the whole changelist,
        copy it onto each file.
        """
        f = P4File()
        f.depot_path = sys.intern(vardict["depotFile"][index])
        f.type = sys.intern(vardict["type"][index])
        f.action = sys.intern(vardict["action"][index])
        f._revision = int(vardict["rev"][index])
        f.change = vardict.get("change")
        return f

    def rev_path(self):
        """return depotPath#rev"""
        return self.depot_path + "#" + str(self._revision)

    def __eq__(self, other):
        return self.depot_path == other.depot_path and self._revision == other._revision

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.depot_path, self._revision))

    def __str__(self):
        return self.depot_path

    def __repr__(self):
        return "depot_path: {0}, revision: {1}, type: {2}, action: {3}, change: {4}".format(
            self.depot_path, self._revision, self.type, self.action, self.change)
