# -*- coding: utf-8 -*-

from vow.promise import Promise, wrap_promise


class TestDecorator(object):

    def test_wrap_sync_function(self):
        @wrap_promise
        def f(x):
            return x * 3

        p = f(30)
        assert isinstance(p, Promise)
        assert p.get_result() == 90

    def test_wrap_function_returning_promise(self, scheduler):
        @wrap_promise
        def f(x):
            return Promise.resolve(x + 10)

        p = f(30)
        assert isinstance(p, Promise)
        scheduler.run()
        assert p.get_result() == 40

    def test_wrap_function_with_exception(self):
        class MyException(Exception):
            pass

        @wrap_promise
        def f(x):
            raise MyException()

        p = f(30)
        assert isinstance(p, Promise)
        assert p.get_status() == Promise.REJECTED
        assert isinstance(p.get_result(), MyException)

    def test_wrapped_function_name(self):
        @wrap_promise
        def compute():
            pass

        assert compute.__name__ == 'compute'
