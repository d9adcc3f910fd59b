import random

import pytest

from _lib.services import BASE_URL, FakeServices, LIVE_ROUTES
from fidelis.cache import create_store
from fidelis.pipeline import create_pipeline


@pytest.fixture
def store():
    return create_store('memory')


@pytest.fixture
def live_services():
    return FakeServices(**LIVE_ROUTES)


@pytest.fixture
def dead_services():
    return FakeServices()


@pytest.fixture
def make_pipeline(store):
    def _make(services, rng=None):
        return create_pipeline(
            client=services.client(), store=store,
            rng=rng or random.Random(7), base_url=BASE_URL)

    return _make
