#! /usr/bin/env python3
'''
Print FishEye links for Perforce changelists, or check a FishEye URL.

    p4fe_links.py --config browser.conf 4242 4243
    p4fe_links.py --check http://host/fisheye/browse/proj/

Connects to Perforce using the usual P4PORT/P4USER environment.
'''
import sys

import p4fe_browser
import p4fe_create_p4
from   p4fe_l10n         import _, NTR, log_l10n
import p4fe_log
from   p4fe_p4changelist import P4Changelist
import p4fe_url_validator
import p4fe_util

LOG = p4fe_log.for_module()

                        # Exit codes for --check.
EXIT_OK             = 0
EXIT_ERROR          = 1
EXIT_NETWORK_ERROR  = 2


def parse_args(argv):
    '''Parse command line.'''
    desc = _('Print FishEye links for Perforce changelists.')
    parser = p4fe_util.create_arg_parser(desc=desc)
    parser.add_argument('--config', metavar=NTR('FILE'),
        help=_('repository browser configuration file'))
    parser.add_argument('--check', metavar=NTR('URL'),
        help=_('check that URL looks like a FishEye browse URL, then exit'))
    parser.add_argument('--port', '-p', metavar=NTR('P4PORT'),
        help=_('Perforce server, overrides P4PORT'))
    parser.add_argument('--user', '-u', metavar=NTR('P4USER'),
        help=_('Perforce user, overrides P4USER'))
    parser.add_argument(NTR('change'), metavar=NTR('CHANGE'), nargs='*', type=int,
        help=_('changelist number'))
    args = parser.parse_args(argv)
    if args.check is None and not (args.config and args.change):
        parser.error(_('either --check URL, or --config FILE and CHANGE, is required'))
    return args


def check(url):
    '''Validate url, report result, return exit code.'''
    result = p4fe_url_validator.validate(url)
    if result.is_ok:
        print(_('ok'))
        return EXIT_OK
    sys.stderr.write(_('error: {}\n').format(result.message))
    if result.kind == p4fe_url_validator.NETWORK_ERROR:
        return EXIT_NETWORK_ERROR
    return EXIT_ERROR


def print_links(browser, changelist, out=None):
    '''Write one line per link. Files without a diff get no diff line.'''
    out = out or sys.stdout
    for label, link in browser.links_for_changelist(changelist):
        if link is None:
            continue
        out.write(NTR('{label}\t{link}\n').format(label=label, link=link))


def print_changelists(args):
    '''Describe each requested changelist and print its links.'''
    browser = p4fe_browser.from_file(args.config)
    LOG.debug("browser {}".format(browser))
    p4 = p4fe_create_p4.create_p4(port=args.port, user=args.user)
    with p4fe_create_p4.Connector(p4):
        for change in args.change:
            cl = P4Changelist.create_using_describe(p4, change)
            print_links(browser, cl)
    return EXIT_OK


def main(argv=None):
    '''Main'''
    args = parse_args(sys.argv[1:] if argv is None else argv)
    log_l10n()
    if args.check is not None:
        return check(args.check)
    return print_changelists(args)


if __name__ == "__main__":
    p4fe_log.run_with_exception_logger(main, write_to_stderr=True)
