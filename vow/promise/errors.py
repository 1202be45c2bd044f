# -*- coding: utf-8 -*-


class PromiseError(Exception):
    """Base class of the errors raised by the promise module."""
    pass


class CycleError(PromiseError, TypeError):
    """A Promise has been resolved with itself.

    It happens when a callback passed to `then()` returns the very Promise
    created by this `then()` call. The Promise is rejected with this error.
    """
    pass


class InvalidStateError(PromiseError):
    """The Promise is in a state that doesn't allow the operation.

    It's not a rejection reason: this error is raised synchronously and
    denotes a bug in the promise module itself.
    """
    pass
