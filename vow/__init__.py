# -*- coding: utf-8 -*-

from .__version__ import __version__  # noqa

import logging

from .common import config
from .common import log
from .promise import (AsyncioScheduler, CycleError, Deferred,
                      InvalidStateError, Promise, PromiseError,
                      QueueScheduler, get_scheduler, run, set_scheduler,
                      wrap_promise)
from .promise.scheduler import create_scheduler

__all__ = ['AsyncioScheduler', 'CycleError', 'Deferred', 'InvalidStateError',
           'Promise', 'PromiseError', 'QueueScheduler', 'configure',
           'get_scheduler', 'run', 'set_scheduler', 'wrap_promise']


def configure():
    """Apply the settings of the config file.

    Load the config file, set the log levels, and install the default
    scheduler chosen in the config.

    With `scheduler = asyncio`, it must be called from the running event
    loop (ex: at the beginning of the main coroutine), whose loop will run the
    callbacks of the Promises.

    Raises:
        ValueError: if the scheduler set in the config is unknown.
        RuntimeError: if the asyncio scheduler is chosen and no event loop is
            running.
    """
    config.load()
    log.set_debug_mode(config.get('debug_mode'))
    log.set_logs_level(config.get('log_levels'))

    scheduler = create_scheduler(config.get('scheduler'))
    set_scheduler(scheduler)
    logging.getLogger(__name__).debug('vow configured, using %s scheduler.',
                                      config.get('scheduler'))
