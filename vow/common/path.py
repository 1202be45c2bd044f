# -*- coding: utf-8 -*-
"""Per-user folders of vow (config file, log files)."""

import logging
import os

import appdirs

_logger = logging.getLogger(__name__)


_appdirs = appdirs.AppDirs(appname='vow', appauthor=False)


def _ensure_dir_exists(dir_path):
    """Create the folder and its parents, if needed.

    A failure is logged as a warning: the caller will get an error later,
    when opening a file in this folder.
    """
    if os.path.isdir(dir_path):
        return
    try:
        os.makedirs(dir_path)
    except OSError:
        _logger.warning('Unable to create the missing folder "%s"',
                        dir_path, exc_info=True)
    else:
        _logger.debug('Created missing folder "%s"', dir_path)


def _user_dir(kind):
    dir_path = getattr(_appdirs, kind)
    _ensure_dir_exists(dir_path)
    return dir_path


def get_log_dir():
    """Returns the folder of the log files, created if needed."""
    return _user_dir('user_log_dir')


def get_config_dir():
    """Returns the folder of the `vow.ini` file, created if needed."""
    return _user_dir('user_config_dir')
