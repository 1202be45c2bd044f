# -*- coding: utf-8 -*-

import pytest

from vow.promise import QueueScheduler, set_scheduler


@pytest.fixture(autouse=True)
def scheduler(request):
    """Install a new QueueScheduler as default scheduler, for one test.

    The previous default scheduler is restored at the end of the test.

    Returns:
        QueueScheduler: the scheduler used by the Promises created during the
            test. Call ``scheduler.run()`` to execute the pending callbacks.
    """
    queue_scheduler = QueueScheduler()
    previous = set_scheduler(queue_scheduler)
    request.addfinalizer(lambda: set_scheduler(previous))
    return queue_scheduler
