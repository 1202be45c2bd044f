# -*- coding: utf-8 -*-

"""Settings of vow, stored in the `vow.ini` file.

The file has a single `[config]` section. Each known key has a type and a
default value, used when the key is missing from the file:

    [config]
    debug_mode = false
    log_levels = vow=info;vow.promise.scheduler=debug
    scheduler = queue

Call ``load()`` once to read the file. ``set()`` writes the file back
immediately.
"""

import configparser
import logging
import os.path

from . import path as vow_path

_logger = logging.getLogger(__name__)

_SECTION = 'config'


def _read_dict(parser, key):
    """Read an entry in the form 'key=value;key2=value2'.

    Malformed pairs are logged, then skipped.
    """
    result = {}
    for pair in filter(None, parser.get(_SECTION, key).split(';')):
        name, sep, value = pair.partition('=')
        if not sep or not name or '=' in value:
            _logger.warning('Unable to parse pair key=value: "%s"', pair)
            continue
        result[name] = value
    return result


def _write_dict(value):
    return ';'.join('%s=%s' % item for item in value.items())


# Known entries: (reader, default value).
_entries = {
    'debug_mode': (lambda parser, key: parser.getboolean(_SECTION, key),
                   False),
    'log_levels': (_read_dict, {}),
    'scheduler': (lambda parser, key: parser.get(_SECTION, key), 'queue'),
}

_config_parser = configparser.ConfigParser()
_config_parser.add_section(_SECTION)


def _get_config_file_path():
    return os.path.join(vow_path.get_config_dir(), 'vow.ini')


def load():
    """Read the config file. A missing file is not an error."""
    config_file_path = _get_config_file_path()

    if not _config_parser.read(config_file_path):
        _logger.warning('Unable to load config file: %s', config_file_path)


def get(key):
    """Returns the typed value of an entry, or its default value.

    Raises:
        KeyError: if the entry is unknown.
    """
    reader, default = _entries[key]
    if not _config_parser.has_option(_SECTION, key):
        return default
    return reader(_config_parser, key)


def set(key, value):
    """Change an entry, then save the config file.

    Args:
        key (str): the entry name.
        value: new value. A dict is stored as 'key=value;key2=value2'; other
            values are converted to str.
    Raises:
        KeyError: if the entry is unknown.
    """
    if key not in _entries:
        raise KeyError(key)
    if isinstance(value, dict):
        value = _write_dict(value)
    _config_parser.set(_SECTION, key, str(value))

    try:
        with open(_get_config_file_path(), 'w') as config_file:
            _config_parser.write(config_file)
    except (OSError, IOError):
        _logger.warning('Unable to write in the config file', exc_info=True)
    else:
        _logger.debug('Config file modified.')
