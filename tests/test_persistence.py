"""
Tests for PersistenceGateway: stored format, round-trip and decode validation.
"""

import json

import pytest

from worktravel.core.constants import STORAGE_KEY, MODE_KEY
from worktravel.core.exceptions import DeserializationError
from worktravel.core.models import Context, Item
from worktravel.core.persistence import (
    PersistenceGateway,
    decode_collection,
    decode_context,
    encode_collection,
)


@pytest.fixture()
def gateway(storage):
    return PersistenceGateway(storage)


def test_missing_keys_load_defaults(gateway):
    assert gateway.load_collection() == {}
    assert gateway.load_context() is Context.WORK


def test_collection_round_trip(gateway):
    collection = {
        "1700000000000": Item("1700000000000", "Write slides", Context.WORK),
        "1700000000001": Item("1700000000001", "Book hotel", Context.TRAVEL, completed=True),
        "1700000000002": Item("1700000000002", "Café ☕ run", Context.WORK, completed=True),
    }

    gateway.save_collection(collection)
    assert gateway.load_collection() == collection

    gateway.save_collection({})
    assert gateway.load_collection() == {}

    print("✓ Collection round-trips through storage")


def test_stored_shape(storage, gateway):
    """Stored form is {id: {text, working, completed}}."""
    gateway.save_collection({
        "1": Item("1", "Write slides", Context.WORK),
        "2": Item("2", "Book hotel", Context.TRAVEL, completed=True),
    })

    assert json.loads(storage.data[STORAGE_KEY]) == {
        "1": {"text": "Write slides", "working": True, "completed": False},
        "2": {"text": "Book hotel", "working": False, "completed": True},
    }


def test_save_overwrites_previous_value(storage, gateway):
    gateway.save_collection({"1": Item("1", "First", Context.WORK)})
    gateway.save_collection({"2": Item("2", "Second", Context.WORK)})

    assert list(json.loads(storage.data[STORAGE_KEY])) == ["2"]


def test_context_round_trip(storage, gateway):
    gateway.save_context(Context.TRAVEL)
    assert storage.data[MODE_KEY] == "travel"
    assert gateway.load_context() is Context.TRAVEL

    gateway.save_context(Context.WORK)
    assert storage.data[MODE_KEY] == "work"
    assert gateway.load_context() is Context.WORK


@pytest.mark.parametrize("raw", ["travel", "", "WORK", "vacation"])
def test_any_other_mode_means_travel(raw):
    assert decode_context(raw) is Context.TRAVEL


def test_loads_mobile_app_dump(storage, gateway):
    """Data written by the mobile app loads unchanged."""
    storage.data[STORAGE_KEY] = (
        '{"1690000000000":{"text":"Standup notes","working":true,"completed":false},'
        '"1690000000123":{"text":"Jeju","working":false,"completed":true}}'
    )
    storage.data[MODE_KEY] = "travel"

    collection = gateway.load_collection()
    assert collection["1690000000000"].context is Context.WORK
    assert collection["1690000000123"].context is Context.TRAVEL
    assert collection["1690000000123"].completed is True
    assert gateway.load_context() is Context.TRAVEL


@pytest.mark.parametrize(
    "raw",
    [
        "{not json",
        "[]",
        '"text"',
        '{"1": "Buy milk"}',
        '{"1": {"working": true, "completed": false}}',
        '{"1": {"text": "x", "working": "yes", "completed": false}}',
        '{"1": {"text": "x", "working": true}}',
        '{"1": {"text": 5, "working": true, "completed": false}}',
    ],
)
def test_malformed_collection_raises(storage, gateway, raw):
    storage.data[STORAGE_KEY] = raw

    with pytest.raises(DeserializationError) as excinfo:
        gateway.load_collection()

    assert excinfo.value.key == STORAGE_KEY


def test_encode_decode_helpers():
    collection = {"7": Item("7", "Renew passport", Context.TRAVEL)}
    assert decode_collection(encode_collection(collection)) == collection
