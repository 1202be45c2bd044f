# -*- coding: utf-8 -*-

from .decorators import wrap_promise
from .deferred import Deferred
from .errors import CycleError, InvalidStateError, PromiseError
from .promise import Promise
from .scheduler import (AsyncioScheduler, QueueScheduler, create_scheduler,
                        get_scheduler, run, set_scheduler)

__all__ = ['AsyncioScheduler', 'CycleError', 'Deferred', 'InvalidStateError',
           'Promise', 'PromiseError', 'QueueScheduler', 'create_scheduler',
           'get_scheduler', 'run', 'set_scheduler', 'wrap_promise']
