'''Repository browser registry.'''
import pytest

import p4fe_browser
from   p4fe_config  import BrowserConfig, ConfigError
from   p4fe_fisheye import FishEyeBrowser


def test_fisheye_registered():
    assert 'fisheye' in p4fe_browser.kinds()


def test_create():
    browser = p4fe_browser.create('FishEye', 'http://host/fisheye/browse/proj', '/sub')
    assert isinstance(browser, FishEyeBrowser)
    assert browser.url == 'http://host/fisheye/browse/proj/'
    assert browser.root_module == 'sub'


def test_unknown_kind():
    config = BrowserConfig.create('http://host/x/browse/proj/', kind='viewvc')
    with pytest.raises(ConfigError) as e:
        p4fe_browser.from_config(config)
    assert 'viewvc' in str(e.value)


def test_register(monkeypatch):
    monkeypatch.setattr(p4fe_browser, '_KINDS', dict(p4fe_browser._KINDS))
    p4fe_browser.register('Mirror', FishEyeBrowser)
    assert p4fe_browser.kinds() == ['fisheye', 'mirror']
    assert isinstance(p4fe_browser.create('mirror', 'http://h/browse/p/'), FishEyeBrowser)


def test_from_file(tmp_path):
    path = tmp_path / 'browser.conf'
    path.write_text('[@browser]\nurl = http://host/fisheye/browse/proj/\n')
    browser = p4fe_browser.from_file(str(path))
    assert browser.change_set_link(5) == 'http://host/fisheye/changelog/proj/?cs=5'


def test_from_config_kind_case_insensitive():
    config = BrowserConfig.create('http://host/fisheye/browse/proj/', kind='FishEye')
    assert config.kind == 'fisheye'
    assert isinstance(p4fe_browser.from_config(config), FishEyeBrowser)
