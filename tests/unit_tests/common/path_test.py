# -*- coding: utf-8 -*-

import logging
import os
from os.path import exists, isdir

from vow.common import path
from vow.common.path import _ensure_dir_exists, get_config_dir, get_log_dir

"""### TEST CASES ###
    _ensure_dir_exists, dir exists
    _ensure_dir_exists, dir does not exist
    _ensure_dir_exists, path is a file
    get_config_dir, get_log_dir create the folders
"""


class TestEnsureDirExists(object):

    def test_dir_already_exists(self, tmpdir, caplog):
        with caplog.at_level(logging.DEBUG, logger='vow.common.path'):
            _ensure_dir_exists(str(tmpdir))
        assert caplog.text == ''

    def test_dir_does_not_exist(self, tmpdir):
        new_path = str(tmpdir.join('a', 'b'))
        assert not exists(new_path)
        _ensure_dir_exists(new_path)
        assert isdir(new_path)

    def test_path_is_a_file(self, tmpdir, caplog):
        file_path = tmpdir.join('file')
        file_path.write('content')

        with caplog.at_level(logging.WARNING, logger='vow.common.path'):
            _ensure_dir_exists(str(file_path))
        assert 'Unable to create the missing folder' in caplog.text


class TestAppDirs(object):

    def test_dirs_are_created(self, tmpdir, monkeypatch):
        class FakeAppDirs(object):
            user_config_dir = str(tmpdir.join('config'))
            user_log_dir = str(tmpdir.join('log'))

        monkeypatch.setattr(path, '_appdirs', FakeAppDirs())

        assert get_config_dir() == FakeAppDirs.user_config_dir
        assert get_log_dir() == FakeAppDirs.user_log_dir
        assert isdir(FakeAppDirs.user_config_dir)
        assert isdir(FakeAppDirs.user_log_dir)
        assert sorted(os.listdir(str(tmpdir))) == ['config', 'log']
