# -*- coding: utf-8 -*-

from .promise import Promise


class Deferred(object):
    """A Promise, with the callbacks to settle it from the outside.

    Useful when the result comes from code which can't run in an executor,
    like an event handler registered somewhere else:

        df = Deferred()
        button.on_click(df.resolve)
        return df.promise

    `resolve` and `reject` are the callbacks given to the executor of
    `promise`: the first call wins, the next ones are ignored.

    Attributes:
        promise (Promise)
        resolve (callable): accepts a value, a Promise or a thenable.
        reject (callable): accepts the rejection reason, used as is.
    """

    def __init__(self, _name='DEFERRED', _scheduler=None):
        self.resolve = None
        self.reject = None
        self.promise = Promise(self._capture, _name=_name,
                               _scheduler=_scheduler)

    def _capture(self, resolve, reject):
        self.resolve = resolve
        self.reject = reject

    def __repr__(self):
        return 'Deferred(%r)' % self.promise
