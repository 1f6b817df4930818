#! /usr/bin/env python3
'''
FishEye repository browser: Perforce file and changelist links.

Given the browse URL of a FishEye repository, e.g.

    http://deadlock.netbeans.org/fisheye/browse/netbeans/

produce links to

    diff      .../browse/netbeans/{path}?r1=&r2={change}
    file      .../browse/netbeans/{path}
    changelog .../changelog/netbeans/?cs={change}

The root module is a depot path prefix trimmed from the beginning of each
file's depot path: a FishEye instance may browse a larger tree than the one
we care about.

Every method here is a pure function of the configuration and its argument.
'''
import urllib.parse

from   p4fe_config import BrowserConfig
import p4fe_const
import p4fe_log
import p4fe_util

LOG = p4fe_log.for_module()

                        # Only these actions have a previous revision
                        # for FishEye to diff against.
_DIFF_ACTIONS = [ p4fe_const.ACTION_EDIT
                , p4fe_const.ACTION_INTEGRATE ]


def _add_query(query, *params):
    '''
    Append params to an existing query string, '&'-separated.
    Return '' if there is nothing at all, otherwise '?...'.
    '''
    terms = [q for q in (query,) + params if q]
    if not terms:
        return ''
    return '?' + '&'.join(terms)


class FishEyeBrowser:
    '''Repository browser for Perforce in a FishEye server.'''

    def __init__(self, config):
        self.config = config

    @staticmethod
    def create(url, root_module=None):
        '''Return a FishEyeBrowser for url and root_module.'''
        return FishEyeBrowser(BrowserConfig.create( url
                                                  , root_module
                                                  , p4fe_const.BROWSER_FISHEYE))

    @property
    def url(self):
        '''FishEye browse URL, always ending with '/'.'''
        return self.config.url

    @property
    def root_module(self):
        '''Depot path prefix trimmed from file paths, never None.'''
        return self.config.root_module or ''

    def _query(self):
        '''The query string configured on our url, '' if none.'''
        return urllib.parse.urlsplit(self.url).query

    def relative_filename(self, p4file):
        '''
        Return p4file's depot path relative to our url:
        leading slashes and the root module removed.
        '''
        path = p4fe_util.trim_head_slash(p4fe_util.trim_head_slash(p4file.filename))
        if path.startswith(self.root_module):
            path = path[len(self.root_module):]
        return p4fe_util.trim_head_slash(path)

    def project_name(self):
        '''Pick up "FOOBAR" from "http://site/browse/FOOBAR/".'''
        path = urllib.parse.urlsplit(self.url).path.rstrip('/')
        return path[path.rfind('/') + 1:]

    def diff_link(self, p4file):
        '''
        Return a link to the diff between p4file and its previous revision,
        or None if there is no previous revision to diff against.

        Raises ValueError if p4file carries an unparsable change number.
        '''
        if p4file.action not in _DIFF_ACTIONS:
            return None
        if p4file.change is not None:
            r = int(p4file.change)
        else:
            # Records written before we stored the change number.
            r = int(p4file.revision)
        if r <= 1:
            return None
        diff_params = [p.format(rev=r) for p in p4fe_const.FISHEYE_DIFF_QUERY]
        link = urllib.parse.urljoin(self.url, self.relative_filename(p4file)
                                    + _add_query(self._query(), *diff_params))
        LOG.debug2("diff_link {} ==> {}".format(p4file, link))
        return link

    def file_link(self, p4file):
        '''Return a link to p4file's current browse view.'''
        return urllib.parse.urljoin(self.url, self.relative_filename(p4file)
                                    + _add_query(self._query()))

    def change_set_link(self, change):
        '''
        Return a link to a changelist's FishEye changelog entry.

        change is either a P4Changelist or a bare change number.
        '''
        number = getattr(change, 'change', change)
        rel = p4fe_const.FISHEYE_CHANGELOG_PATH.format( project = self.project_name()
                                                      , change  = number)
        return urllib.parse.urljoin(self.url, rel)

    def links_for_changelist(self, changelist):
        '''
        Generator: yield (label, link) for a changelist and each of its
        files. A file's diff link is None when FishEye has nothing to diff.
        '''
        yield (str(changelist.change), self.change_set_link(changelist))
        for p4file in changelist.files:
            yield (p4file.rev_path(), self.file_link(p4file))
            yield (p4file.rev_path() + ' diff', self.diff_link(p4file))

    def __repr__(self):
        return "FishEyeBrowser(url={!r}, root_module={!r})".format(self.url, self.root_module)
