# -*- coding: utf-8 -*-

"""Resolution procedure: how a value settles a Promise.

A Promise can be resolved with any value:
- a plain value fulfills the Promise;
- another Promise transfers its own state (now or when it's settled);
- a "thenable", any object with a callable `then` attribute, is called like a
  Promise, and its outcome settles the Promise.
"""

from functools import partial
import logging

from .errors import CycleError
from .state import SettlementState

_logger = logging.getLogger(__name__)


PLAIN = 'plain'
PROMISE = 'promise'
THENABLE = 'thenable'


def classify(value):
    """Find which kind of value must be used to resolve a Promise.

    Args:
        value: any value.
    Returns:
        tuple: (kind, then). kind is one of `PLAIN`, `PROMISE` or `THENABLE`.
            `then` is the bound `then` method of a THENABLE, None otherwise.
    Raises:
        *: the error raised when the `then` attribute is read.
    """
    if isinstance(value, SettlementState):
        return PROMISE, None
    if value is None:
        return PLAIN, None

    try:
        then = getattr(value, 'then')
    except AttributeError:
        return PLAIN, None

    if callable(then):
        return THENABLE, then
    return PLAIN, None


def resolve_with(target, value, fulfill, reject):
    """Settle the `target` Promise using `value`.

    Exactly one of `fulfill` or `reject` will be called, maybe later, maybe
    from a recursive call if `value` is a Promise or a thenable.

    Args:
        target (Promise): the Promise to settle.
        value: value used to resolve the Promise.
        fulfill (callable): called with the final value.
        reject (callable): called with the rejection reason.
    """
    if value is target:
        return reject(CycleError('A Promise cannot be resolved with itself'))

    try:
        kind, then = classify(value)
    except Exception as error:
        return reject(error)

    if kind is PROMISE:
        status = value.get_status()
        if status == value.PENDING:
            value.then(partial(resolve_with, target, fulfill=fulfill,
                               reject=reject),
                       reject)
        elif status == value.FULFILLED:
            fulfill(value.get_result())
        else:
            reject(value.get_result())
    elif kind is THENABLE:
        _ThenableAdoption(target, fulfill, reject).run(then)
    else:
        fulfill(value)


class _ThenableAdoption(object):
    """Follow a foreign thenable, accepting only its first outcome.

    The thenable receives `resolve_promise()` and `reject_promise()`. Only the
    first call to one of them is considered, as well as an error raised by
    `then()` itself before any of them is called. Everything else is ignored.
    """

    def __init__(self, target, fulfill, reject):
        self._target = target
        self._fulfill = fulfill
        self._reject = reject
        self._called = False

    def run(self, then):
        try:
            then(self.resolve_promise, self.reject_promise)
        except Exception as error:
            if self._called:
                _logger.debug('Thenable of %r raised after being settled. '
                              'Error ignored: %r', self._target, error)
                return
            self._called = True
            self._reject(error)

    def resolve_promise(self, value=None):
        if self._called:
            return
        self._called = True
        try:
            resolve_with(self._target, value, self._fulfill, self._reject)
        except Exception as error:
            self._reject(error)

    def reject_promise(self, reason=None):
        if self._called:
            return
        self._called = True
        self._reject(reason)
