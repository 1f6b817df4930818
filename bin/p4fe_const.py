#! /usr/bin/env python3
"""p4-fisheye package constants."""

import re

from   p4fe_l10n import NTR

# pylint:disable=C0301
# Yep, long lines, too annoying to fix...

P4FE_PROG                           = NTR('P4FE')

# Browser kinds known to p4fe_browser. Only FishEye for now.
BROWSER_FISHEYE                     = NTR('fisheye')
BROWSER_DEFAULT                     = BROWSER_FISHEYE

# Perforce file actions, as reported by 'p4 describe' and 'p4 filelog'.
ACTION_ADD                          = NTR('add')
ACTION_EDIT                         = NTR('edit')
ACTION_DELETE                       = NTR('delete')
ACTION_BRANCH                       = NTR('branch')
ACTION_INTEGRATE                    = NTR('integrate')
ACTION_MOVE_ADD                     = NTR('move/add')
ACTION_MOVE_DELETE                  = NTR('move/delete')
ACTION_IMPORT                       = NTR('import')
ACTION_PURGE                        = NTR('purge')
ACTION_ARCHIVE                      = NTR('archive')

# FishEye URL layout:
#   http://host/fisheye/browse/{project}/{path}?r1=&r2={rev}
#   http://host/fisheye/changelog/{project}/?cs={change}
FISHEYE_CHANGELOG_PATH              = NTR('../../changelog/{project}/?cs={change}')
FISHEYE_DIFF_QUERY                  = NTR(['r1=', 'r2={rev}'])
FISHEYE_URL_RE                      = re.compile(NTR(r'.+/browse/[^/]+/'))
FISHEYE_MARKER_TEXT                 = NTR('FishEye')

# Seconds to wait for a FishEye server to answer the URL check.
URL_CHECK_TIMEOUT                   = 30

# Environment vars
# Read log config from here, not /etc/p4-fisheye.log.conf
P4FE_LOG_CONFIG_PATH                = NTR('P4FE_LOG_CONFIG_FILE')
P4FE_LOG_CONFIG_DEFAULT             = NTR('/etc/p4-fisheye.log.conf')
