# -*- coding: utf-8 -*-

import logging
import os.path

import pytest

from vow.common import config
from vow.common.config import _config_parser, get, load, set

"""### TEST CASES ###
    ## load
    config file exist
    config file does not exist

    ##get
    key does not exist
    get a bool value
    get a dict
    get a dict with invalid value
    get a not typed value
    get a value not present in the file

    ##set
    set a not existing key
    set a dict value
    set when the file can't be written
"""


@pytest.fixture(autouse=True)
def config_file(request, tmpdir, monkeypatch):
    """Redirect the config file into a temporary folder."""
    config_path = str(tmpdir.join('vow.ini'))
    monkeypatch.setattr(config, '_get_config_file_path', lambda: config_path)

    _config_parser.remove_section('config')
    _config_parser.add_section('config')
    return config_path


class TestConfigLoad(object):

    def test_loadWithoutExistingFile(self, caplog):
        with caplog.at_level(logging.WARNING, logger='vow.common.config'):
            load()
        assert 'Unable to load config file' in caplog.text

    def test_loadWithExistingFile(self, config_file, caplog):
        # create a config file
        set('scheduler', 'asyncio')
        _config_parser.remove_section('config')
        _config_parser.add_section('config')
        assert get('scheduler') == 'queue'

        with caplog.at_level(logging.WARNING, logger='vow.common.config'):
            load()
        assert 'Unable to load config file' not in caplog.text
        assert get('scheduler') == 'asyncio'


class TestConfigGet(object):

    def test_keyDoesNotExist(self):
        with pytest.raises(KeyError):
            get('plop')

    def test_defaultValues(self):
        assert get('debug_mode') is False
        assert get('log_levels') == {}
        assert get('scheduler') == 'queue'

    def test_getABoolValue(self):
        set('debug_mode', True)
        value = get('debug_mode')
        assert type(value) is bool and value

        set('debug_mode', 'False')
        value = get('debug_mode')
        assert type(value) is bool and not value

    def test_getADictValue(self):
        set('log_levels', 'aa=bb;cc=dd')
        assert get('log_levels') == {'aa': 'bb', 'cc': 'dd'}

    def test_getADictWithInvalidValue(self, caplog):
        _config_parser.set('config', 'log_levels', 'plop;toto=tata')

        with caplog.at_level(logging.WARNING, logger='vow.common.config'):
            value = get('log_levels')
        assert value == {'toto': 'tata'}
        assert 'plop' in caplog.text

    def test_getADictWithSeveralEqualSigns(self, caplog):
        _config_parser.set('config', 'log_levels', 'a=b=c;;vow=debug')

        with caplog.at_level(logging.WARNING, logger='vow.common.config'):
            value = get('log_levels')
        assert value == {'vow': 'debug'}
        assert 'a=b=c' in caplog.text

    def test_getAStringValue(self):
        set('scheduler', 'asyncio')
        assert get('scheduler') == 'asyncio'


class TestConfigSet(object):

    def test_keyDoesNotExist(self):
        with pytest.raises(KeyError):
            set('plop', 42)

    def test_setWritesFile(self, config_file):
        set('debug_mode', True)
        assert os.path.exists(config_file)
        with open(config_file) as f:
            assert 'debug_mode = True' in f.read()

    def test_setADictValue(self):
        set('log_levels', {'vow': 'debug', 'vow.promise': 'info'})
        assert get('log_levels') == {'vow': 'debug', 'vow.promise': 'info'}

    def test_setWithUnwritableFile(self, tmpdir, monkeypatch, caplog):
        path = str(tmpdir.join('missing-dir', 'vow.ini'))
        monkeypatch.setattr(config, '_get_config_file_path', lambda: path)

        with caplog.at_level(logging.WARNING, logger='vow.common.config'):
            set('debug_mode', True)
        assert 'Unable to write in the config file' in caplog.text
        assert get('debug_mode') is True
