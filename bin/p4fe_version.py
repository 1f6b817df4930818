#! /usr/bin/env python3
'''Functions to implement Perforce's -V version string.'''

import sys

from   p4fe_l10n import _, NTR
import p4fe_const

PRODUCT     = NTR('p4-fisheye')
RELEASE     = NTR('2026.1')
PATCHLEVEL  = NTR('0')
DATE        = NTR('2026/10/19')


def as_single_line():
    '''Return a version string suitable for p4.prog:
        'P4FE/2026.1/0 (2026/10/19)'
    '''
    return NTR('{prog}/{release}/{patch} ({date})').format( prog    = p4fe_const.P4FE_PROG
                                                          , release = RELEASE
                                                          , patch   = PATCHLEVEL
                                                          , date    = DATE)


def as_string():
    '''Return a multi-line version string for -V output.'''
    return NTR('Rev. {single}\n{product}: Perforce to FishEye link construction.\n') \
           .format(single=as_single_line(), product=PRODUCT)


if __name__ == '__main__':
    for h in ['-?', '-h', '--help']:
        if h in sys.argv:
            print(_('p4-fisheye version information.'))
    print(as_string())
    sys.exit(0)
