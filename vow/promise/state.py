# -*- coding: utf-8 -*-

import logging

from .errors import InvalidStateError

_logger = logging.getLogger(__name__)


class SettlementState(object):
    """Status, result and pending callbacks of a Promise.

    The status leaves PENDING only once. Callbacks are queued while the
    Promise is pending, then handed to the scheduler in the order they were
    queued, as soon as the Promise is settled.
    """

    PENDING = 'pending'
    FULFILLED = 'fulfilled'
    REJECTED = 'rejected'

    def __init__(self, scheduler):
        self._status = self.PENDING
        self._result = None
        self._callbacks = []
        self._scheduler = scheduler

    def get_status(self):
        """Returns the state: PENDING, FULFILLED or REJECTED."""
        return self._status

    def get_result(self):
        """Returns the value (or the rejection reason), None if pending."""
        return self._result

    def _enqueue(self, on_fulfilled, on_rejected):
        if self._status != self.PENDING:
            raise InvalidStateError('Unable to add callbacks to %r: already '
                                    'settled.' % self)
        self._callbacks.append((on_fulfilled, on_rejected))

    def _settle(self, status, value):
        """Set the final state and result, then schedule the callbacks.

        Only the first call is considered; subsequent calls are ignored.
        """
        if self._status != self.PENDING:
            _logger.debug('Try to settle Promise %r already settled. New '
                          'result will be ignored: %r', self, value)
            return

        callbacks = self._callbacks
        self._callbacks = None  # Free the references
        self._result = value
        self._status = status

        for on_fulfilled, on_rejected in callbacks:
            if status == self.FULFILLED:
                self._schedule(on_fulfilled, value)
            else:
                self._schedule(on_rejected, value)

    def _schedule(self, callback, value):
        """Give a callback to the scheduler.

        A scheduler unable to accept the callback must not break the
        settlement of the Promise, nor prevent the other callbacks from being
        scheduled: the error is logged.
        """
        try:
            self._scheduler.schedule(callback, value)
        except Exception:
            _logger.exception('Unable to schedule callback of Promise %r',
                              self)
