import json
from datetime import date

import pytest

from fidelis.cache import (
    NS_CATALOGUE,
    NS_MOBILE,
    NS_PAN,
    JsonFileStore,
    KeyValueStoreRegistry,
    MemoryStore,
    create_store,
)
from fidelis.datadef import VehicleRecord
from fidelis.error import BadRequestError


def test_memory_store():
    store = create_store('memory')
    assert isinstance(store, MemoryStore)

    assert store.get(NS_MOBILE, '9876543210') is None
    assert store.get(NS_MOBILE, '9876543210', {}) == {}

    store.put(NS_MOBILE, '9876543210', {"legal_name": "Ravi Kumar"})
    assert store.get(NS_MOBILE, '9876543210') == {"legal_name": "Ravi Kumar"}
    assert store.keys(NS_MOBILE) == ('9876543210',)

    store.delete(NS_MOBILE, '9876543210')
    assert store.keys(NS_MOBILE) == ()


def test_values_are_stored_as_plain_data():
    store = create_store('memory')
    record = VehicleRecord(registration_number="MH12AB1234", registration_date=date(2021, 3, 20))

    store.put('vehicle', 'MH12AB1234', record)
    assert store.get('vehicle', 'MH12AB1234') == {
        "registration_number": "MH12AB1234",
        "registration_date": "2021-03-20",
        "tiers": {},
    }


def test_unknown_namespace():
    store = create_store('memory')
    with pytest.raises(BadRequestError):
        store.put('sessions', 'x', {})


def test_registry_keys():
    assert set(KeyValueStoreRegistry.keys()) == {'memory', 'json-file'}


def test_json_file_store(tmp_path):
    filepath = tmp_path / 'cache.json'
    store = create_store('json-file', filepath=str(filepath))
    assert isinstance(store, JsonFileStore)

    store.put(NS_PAN, 'ABCDE1234F', {"credit_score": 782})
    store.put(NS_CATALOGUE, 'products', [{"lender_name": "HDFC Bank"}])

    content = json.loads(filepath.read_text())
    assert content[NS_PAN] == {'ABCDE1234F': {"credit_score": 782}}

    reopened = JsonFileStore(filepath=str(filepath))
    assert reopened.get(NS_PAN, 'ABCDE1234F') == {"credit_score": 782}
    assert reopened.get(NS_CATALOGUE, 'products') == [{"lender_name": "HDFC Bank"}]


def test_json_file_store_ignores_broken_file(tmp_path):
    filepath = tmp_path / 'cache.json'
    filepath.write_text('{not json')

    store = JsonFileStore(filepath=str(filepath))
    assert store.keys(NS_PAN) == ()

    store.put(NS_PAN, 'ABCDE1234F', {"credit_score": 700})
    assert json.loads(filepath.read_text())[NS_PAN]['ABCDE1234F'] == {"credit_score": 700}
