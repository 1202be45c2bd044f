# -*- coding: utf-8 -*-

import logging

from .errors import InvalidStateError
from .resolution import resolve_with
from .scheduler import get_scheduler
from .state import SettlementState

_logger = logging.getLogger(__name__)


class Promise(SettlementState):
    """It represents an operation expected to be completed in the future.

    A Promise contains a value not yet known when the Promise is created. It
    allows to set callbacks who will be called as soon as the result is known.
    It's a "promise" of a future value.

    A Promise is settled only once: it's either fulfilled with a value, or
    rejected with a reason. Callbacks are never called synchronously: they are
    given to a scheduler (see the `scheduler` module), and executed in the
    order they have been registered.
    """

    # Maximum number of chained Promises displayed by repr()
    _repr_depth = 10

    def __init__(self, executor, _name=None, _previous=None, _scheduler=None):
        """Constructor of the Promise.

        Generate the two callbacks for the executor, then call the `executor`.
        It means the executor will be fully executed before the constructor
        returns.
        If the executor raises an exception, it's caught and the Promise is
        rejected with this exception.

        Args:
            executor (callable): Takes 2 callable arguments:
                The first one, `resolve()`, should be called when the task is
                done, with the result's value as its only argument. The value
                can be another Promise, or a thenable: in this case, its
                outcome will be adopted.
                The second, `reject()`, should be called with the reason of
                the failure, usually an instance of `Exception`.
            _name (str): if set, name used when converted to text.
            _previous (Promise): if set, Promise from which this one has been
                chained.
            _scheduler (Scheduler): if set, scheduler used for the callbacks.
                By default, the scheduler of `_previous`, or the default
                scheduler.
        Raises:
            TypeError: if `executor` is not callable.
        """
        if not callable(executor):
            raise TypeError('Promise executor must be callable, not %s'
                            % type(executor).__name__)

        if _scheduler is None:
            if _previous is not None:
                _scheduler = _previous._scheduler
            else:
                _scheduler = get_scheduler()

        SettlementState.__init__(self, _scheduler)
        self._name = _name or getattr(executor, '__name__', '???')
        self._previous = _previous

        resolver = _Resolver(self)
        try:
            executor(resolver.resolve, resolver.reject)
        except Exception as error:
            resolver.reject(error)

    def then(self, on_fulfilled=None, on_rejected=None):
        """Create a new promise from callbacks called when this one is settled.

        If the promise is fulfilled, the `on_fulfilled` callback will be
        called. Otherwise (the promise has been rejected), the `on_rejected`
        callback is called.
        In any case, the callback will define the state of the returned
        Promise. If the callback raises an exception, the new Promise is
        rejected. The callback can returns:
        - A value: the new promise will be fulfilled with this value.
        - Another Promise, or any object with a `then` method: when fulfilled
            or rejected, will transfer its status (state and result/error) to
            the Promise returned by this method.

        If a callback is not defined, the state of the "self" promise is
        transferred to the new promise (the state and the value/error).

        Args:
            on_fulfilled (callable, optional):  This callback will receive the
                result of the original promise as argument.
            on_rejected (callable, optional): This callback will receive the
                rejection reason of the original promise as argument.
        Returns:
            Promise<*>: new promise depending of self.
        Raises:
            InvalidStateError: if the Promise has an unknown state.
        """
        if not callable(on_fulfilled):
            on_fulfilled = None
        if not callable(on_rejected):
            on_rejected = None

        if not on_rejected:
            name = '%s' % getattr(on_fulfilled, '__name__', '???')
        elif not on_fulfilled:
            name = '<None, %s>' % getattr(on_rejected, '__name__', '???')
        else:
            name = '<%s, %s>' % (getattr(on_fulfilled, '__name__', '???'),
                                 getattr(on_rejected, '__name__', '???'))

        reaction = _Reaction(on_fulfilled, on_rejected)
        child = Promise(reaction.bind, _name=name, _previous=self)

        if self._status == self.PENDING:
            self._enqueue(reaction.fulfilled, reaction.rejected)
        elif self._status == self.FULFILLED:
            self._schedule(reaction.fulfilled, self._result)
        elif self._status == self.REJECTED:
            self._schedule(reaction.rejected, self._result)
        else:
            raise InvalidStateError('Invalid state for %r: %r'
                                    % (self, self._status))

        return child

    def catch(self, on_rejected=None):
        """Create a new promise with a callback called when an error occurs.

        Alias of `self.then(None, on_rejected)`

        Args:
            on_rejected (callable): Will be called with the rejection reason
                if `self` is rejected.
        returns:
            Promise<*>: new Promise chained to `self`. If `self` is fulfilled,
                the promised value will be the same as `self`. Otherwise, the
                value returned by the `on_rejected()` callback.
        """
        return self.then(None, on_rejected)

    def safeguard(self):
        """Log the rejection reason, if the Promise is rejected.

        A rejected Promise without error handler is silently ignored. Calling
        `safeguard()` at the end of a chain ensures the errors are logged as
        ERROR with the maximum of details possible.

        Returns:
            Promise: self
        """
        def guard(reason):
            if isinstance(reason, BaseException):
                _logger.error('[SAFEGUARD] %r', self,
                              exc_info=(type(reason), reason,
                                        reason.__traceback__))
            else:
                _logger.error('[SAFEGUARD] %r rejected with: %r',
                              self, reason)

        self.then(None, guard)
        return self

    def __repr__(self):
        return 'Promise(%s)' % self._inner_print()

    def _inner_print(self):
        """Print the last links of the chain, oldest first.

        Chains can be very long: only the `_repr_depth` last Promises are
        printed.
        """
        links = []
        promise = self
        while promise is not None and len(links) < self._repr_depth:
            links.append(promise._print_link())
            promise = promise._previous
        if promise is not None:
            links.append('...')
        return ' -> '.join(reversed(links))

    def _print_link(self):
        if self._status == self.REJECTED:
            state = 'R'
        elif self._status == self.FULFILLED:
            state = 'F'
        else:
            state = 'P'
        return '%s %s' % (self._name, state)

    @classmethod
    def resolve(cls, value=None):
        """Create a promise resolved with the selected value.

        Args:
            value: result of the promise. If it's a Promise or a thenable,
                the new Promise will follow its state.
        Returns:
            Promise: new Promise.
        """
        return cls(lambda ok, error: ok(value), _name='RESOLVE')

    @classmethod
    def reject(cls, reason=None):
        """Create a Promise rejected for the reason specified.

        The reason is used as is, even if it's a Promise.

        Args:
            reason: rejection reason, usually an Exception.
        Returns:
            Promise: new Promise already rejected.
        """
        return cls(lambda ok, error: error(reason), _name='REJECT')

    @staticmethod
    def deferred():
        """Create a Promise to be settled from outside of any executor.

        Returns:
            Deferred: contains the `promise` and its `resolve` and `reject`
                callbacks.
        """
        from .deferred import Deferred

        return Deferred()


class _Resolver(object):
    """The `resolve()` and `reject()` callbacks given to an executor.

    Only the first call to one of them has an effect. Once `resolve()` has
    been called with a pending Promise, the Promise is "locked in" its state,
    even if it's not settled yet.
    """

    def __init__(self, promise):
        self._promise = promise
        self._resolved = False

    def resolve(self, value=None):
        if self._resolved:
            _logger.debug('Promise %r already resolved. New value will be '
                          'ignored: %r', self._promise, value)
            return
        self._resolved = True
        try:
            resolve_with(self._promise, value, self._fulfill, self._reject)
        except Exception as error:
            # The Promise is already locked in: reject() would be ignored.
            self._reject(error)

    def reject(self, reason=None):
        if self._resolved:
            _logger.debug('Promise %r already resolved. Rejection will be '
                          'ignored: %r', self._promise, reason)
            return
        self._resolved = True
        self._reject(reason)

    def _fulfill(self, value):
        self._promise._settle(Promise.FULFILLED, value)

    def _reject(self, reason):
        self._promise._settle(Promise.REJECTED, reason)


class _Reaction(object):
    """Callbacks of a `then()` call, and the resolver of the new Promise."""

    def __init__(self, on_fulfilled, on_rejected):
        self._on_fulfilled = on_fulfilled
        self._on_rejected = on_rejected
        self._resolve = None
        self._reject = None

    def bind(self, resolve, reject):
        """Executor of the Promise returned by `then()`."""
        self._resolve = resolve
        self._reject = reject

    def fulfilled(self, value):
        if self._on_fulfilled is None:
            return self._resolve(value)
        self._run(self._on_fulfilled, value)

    def rejected(self, reason):
        if self._on_rejected is None:
            return self._reject(reason)
        self._run(self._on_rejected, reason)

    def _run(self, handler, arg):
        try:
            result = handler(arg)
        except Exception as error:
            return self._reject(error)
        self._resolve(result)
