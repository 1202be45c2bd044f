# -*- coding: utf-8 -*-

from functools import wraps

from .promise import Promise


def wrap_promise(f):
    """Make a function always return a Promise.

    Useful for functions answering sometimes from a cache and sometimes from
    an async task: the caller can chain with `then()` in both cases.

    The returned value is passed to `Promise.resolve()`, so a returned Promise
    (or thenable) is followed. An exception raised by `f` gives a rejected
    Promise instead of propagating.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            result = f(*args, **kwargs)
        except Exception as error:
            return Promise.reject(error)
        return Promise.resolve(result)

    return wrapper
