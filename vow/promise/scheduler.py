# -*- coding: utf-8 -*-

"""Deferred execution of the Promise callbacks.

A Promise never calls a callback synchronously. All the callbacks are given to
a scheduler, which runs them later, after the code currently executed has
returned, in the order they were submitted.

Two schedulers are available:
- `QueueScheduler` keeps the callbacks in a FIFO queue, until someone calls
  `run()`. It's the default scheduler.
- `AsyncioScheduler` gives the callbacks to an asyncio event loop.

The scheduler used by new promises can be changed with `set_scheduler()`.
"""

import asyncio
from collections import deque
import logging

_logger = logging.getLogger(__name__)


class Scheduler(object):
    """Base class of the schedulers."""

    def schedule(self, callback, *args):
        """Submit a callback, to be called later with `args`.

        Args:
            callback (callable)
            *args: arguments passed to the callback.
        """
        raise NotImplementedError()


class QueueScheduler(Scheduler):
    """Scheduler storing the callbacks in a queue, run on demand.

    The owner of the scheduler is responsible to call `run()` regularly (ex:
    at the end of each iteration of its main loop). Callbacks submitted
    during a `run()` are executed by the same `run()`.
    """

    def __init__(self):
        self._queue = deque()
        self._running = False

    def schedule(self, callback, *args):
        self._queue.append((callback, args))

    def pending(self):
        """Returns the number of callbacks waiting to be run."""
        return len(self._queue)

    def run(self):
        """Execute all the queued callbacks, until the queue is empty.

        A call made from inside a callback does nothing: the callbacks are
        already being executed by the outer call.

        Returns:
            int: number of callbacks executed.
        """
        if self._running:
            return 0

        self._running = True
        count = 0
        try:
            while self._queue:
                callback, args = self._queue.popleft()
                count += 1
                try:
                    callback(*args)
                except Exception:
                    _logger.exception('Scheduled callback %s raised an '
                                      'exception!',
                                      getattr(callback, '__name__', '???'))
        finally:
            self._running = False
        return count


class AsyncioScheduler(Scheduler):
    """Scheduler delegating the callbacks to an asyncio event loop.

    `loop.call_soon()` already guarantees the FIFO order, and runs the
    callbacks only once the current task gives the control back to the loop.
    """

    def __init__(self, loop=None):
        """
        Args:
            loop (asyncio.AbstractEventLoop, optional): event loop used. By
                default, the loop running when the scheduler is created.
        Raises:
            RuntimeError: if no loop is given and no loop is running.
        """
        if loop is None:
            loop = asyncio.get_running_loop()
        self._loop = loop

    def schedule(self, callback, *args):
        self._loop.call_soon(callback, *args)


_schedulers = {
    'queue': QueueScheduler,
    'asyncio': AsyncioScheduler
}

_default_scheduler = QueueScheduler()


def create_scheduler(kind):
    """Build a new scheduler from its name.

    Args:
        kind (str): 'queue' or 'asyncio'. An 'asyncio' scheduler uses the
            running event loop.
    Returns:
        Scheduler
    Raises:
        ValueError: if the name is unknown.
        RuntimeError: if an 'asyncio' scheduler is created outside of a
            running event loop.
    """
    try:
        return _schedulers[kind]()
    except KeyError:
        raise ValueError('Unknown scheduler "%s"' % kind)


def get_scheduler():
    """Returns the scheduler used by default by the new Promises."""
    return _default_scheduler


def set_scheduler(scheduler):
    """Replace the default scheduler.

    Promises already created keep the scheduler they were created with.

    Returns:
        Scheduler: the previous default scheduler.
    """
    global _default_scheduler

    previous = _default_scheduler
    _default_scheduler = scheduler
    _logger.debug('Default scheduler set to %s', type(scheduler).__name__)
    return previous


def run():
    """Run the callbacks of the default scheduler, if it's a QueueScheduler.

    Returns:
        int: number of callbacks executed.
    """
    if isinstance(_default_scheduler, QueueScheduler):
        return _default_scheduler.run()
    return 0
