'''Changelists and file revisions from Perforce describe output.'''
from   unittest.mock import MagicMock, patch

import pytest

import p4fe_create_p4
import p4fe_version

from   p4fe_fisheye      import FishEyeBrowser
from   p4fe_p4changelist import P4Changelist
from   p4fe_p4file       import P4File

DESCRIBE = [{ 'change'    : '4242'
            , 'desc'      : 'Fix the frobnicator\n'
            , 'user'      : 'bruno'
            , 'time'      : '1350000000'
            , 'depotFile' : ['//depot/proj/a.c', '//depot/proj/b.c', '//depot/other/c.c']
            , 'action'    : ['edit', 'add', 'integrate']
            , 'type'      : ['text', 'text', 'xtext']
            , 'rev'       : ['7', '1', '2']
            }]


def _p4(result=None):
    p4 = MagicMock()
    p4.run.return_value = DESCRIBE if result is None else result
    return p4


def test_create_using_describe():
    p4 = _p4()
    cl = P4Changelist.create_using_describe(p4, 4242)
    p4.run.assert_called_once_with('describe', '-s', '4242')
    assert cl.change == 4242
    assert cl.user == 'bruno'
    assert [f.rev_path() for f in cl.files] == [ '//depot/proj/a.c#7'
                                               , '//depot/proj/b.c#1'
                                               , '//depot/other/c.c#2']
    assert all(f.change == '4242' for f in cl.files)
    assert str(cl) == 'change 4242 with 3 files'


def test_create_using_describe_filters_root():
    cl = P4Changelist.create_using_describe(_p4(), 4242, '//depot/proj/')
    assert [f.depot_path for f in cl.files] == ['//depot/proj/a.c', '//depot/proj/b.c']


def test_create_using_describe_no_change():
    with pytest.raises(RuntimeError):
        P4Changelist.create_using_describe(_p4([]), 1)


def test_describe_then_links():
    browser = FishEyeBrowser.create('http://host/fisheye/browse/proj/', '//depot/proj')
    cl = P4Changelist.create_using_describe(_p4(), 4242)
    a, b, c = cl.files
    assert browser.diff_link(a) == 'http://host/fisheye/browse/proj/a.c?r1=&r2=4242'
    assert browser.diff_link(b) is None
    assert browser.diff_link(c) == 'http://host/fisheye/browse/proj/depot/other/c.c?r1=&r2=4242'


def test_file_revision_coerced():
    f = P4File.create('//depot/a.c', 'move/delete', '3')
    assert f.revision == 3
    assert f.filename == '//depot/a.c'
    assert f.change is None
    assert f == P4File.create('//depot/a.c', 'edit', 3, '99')


def test_create_p4_sets_prog_and_does_not_connect():
    with patch('P4.P4') as p4_class:
        p4 = p4fe_create_p4.create_p4(port='ssl:perforce:1666', user='bruno')
    assert p4 is p4_class.return_value
    assert p4.prog == p4fe_version.as_single_line()
    assert p4.port == 'ssl:perforce:1666'
    assert p4.user == 'bruno'
    p4.connect.assert_not_called()
