#! /usr/bin/env python3
"""P4Changelist class"""
import p4fe_log
import p4fe_util

from p4fe_p4file import P4File

LOG = p4fe_log.for_module()


class P4Changelist:
    """a changelist, as reported by p4 describe

        Run p4 describe of a changelist and optionally filter the files
        reported against a root path, e.g. //depot/main/proj/
        """

    def __init__(self):
        self.change = None
        self.description = None
        self.user = None
        self.time = None
        self.files = []   # P4Files in this changelist

    @staticmethod
    def create(change, files=None):
        """create a P4Changelist from a known change number"""
        cl = P4Changelist()
        cl.change = int(change)
        cl.files = list(files) if files else []
        return cl

    @staticmethod
    def create_using_describe(p4, change, depot_root=None):
        """create a P4Changelist by running p4 describe"""

        result = p4.run("describe", "-s", str(change))
        vardict = p4fe_util.first_dict_with_key(result, 'change')
        if not vardict:
            raise RuntimeError("p4 describe -s {} returned no change".format(change))
        cl = P4Changelist()
        cl.change = int(vardict["change"])
        cl.description = vardict["desc"]
        cl.user = vardict["user"]
        cl.time = vardict["time"]
        for i in range(len(vardict.get("depotFile", []))):
            p4file = P4File.create_from_describe(vardict, i)
            if depot_root and not p4file.depot_path.startswith(depot_root):
                continue
            cl.files.append(p4file)
        LOG.debug("create_using_describe {} files={}".format(cl.change, len(cl.files)))
        return cl

    def __str__(self):
        return "change {0} with {1} files".format(self.change, len(self.files))

    def __repr__(self):
        files = [repr(p4file) for p4file in self.files]
        result = "\n".join(["change: " + str(self.change),
                            "description: " + str(self.description),
                            "user: " + str(self.user),
                            "time: " + str(self.time),
                            "files:",
                            ] + files)
        return result
