"""Shared fixtures: an in-memory stand-in for the Firestore client and sample data."""

from __future__ import annotations

import copy
import itertools
from datetime import datetime

import pytest

from fintracker.models.budget import Budget
from fintracker.models.transaction import Transaction
from fintracker.services.firestore_service import FirestoreService

_OPS = {
    "==": lambda left, right: left == right,
    ">=": lambda left, right: left is not None and left >= right,
    "<=": lambda left, right: left is not None and left <= right,
}


class FakeSnapshot:
    def __init__(self, ref, data):
        self.reference = ref
        self.id = ref.id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data)


class FakeDocument:
    def __init__(self, client, path):
        self._client = client
        self.path = path
        self.id = path[-1]

    def get(self):
        return FakeSnapshot(self, self._client.docs.get(self.path))

    def set(self, data, merge=False):
        current = self._client.docs.get(self.path) if merge else None
        self._client.docs[self.path] = {**(current or {}), **copy.deepcopy(data)}

    def update(self, data):
        if self.path not in self._client.docs:
            raise KeyError(self.path)
        self._client.docs[self.path].update(copy.deepcopy(data))

    def delete(self):
        self._client.docs.pop(self.path, None)

    def collection(self, name):
        return FakeCollection(self._client, self.path + (name,))


class FakeQuery:
    def __init__(self, collection, filters=(), order=None, limit=None):
        self._collection = collection
        self._filters = list(filters)
        self._order = order
        self._limit = limit

    def where(self, filter):
        return FakeQuery(self._collection, self._filters + [filter], self._order, self._limit)

    def order_by(self, field, direction="ASCENDING"):
        return FakeQuery(self._collection, self._filters, (field, direction), self._limit)

    def limit(self, count):
        return FakeQuery(self._collection, self._filters, self._order, count)

    def stream(self):
        snapshots = []
        for ref, data in self._collection.documents():
            if all(_OPS[f.op_string](data.get(f.field_path), f.value) for f in self._filters):
                snapshots.append(FakeSnapshot(ref, copy.deepcopy(data)))

        if self._order:
            field, direction = self._order
            snapshots = [s for s in snapshots if s._data.get(field) is not None]
            snapshots.sort(key=lambda s: s._data[field], reverse=direction == "DESCENDING")

        if self._limit is not None:
            snapshots = snapshots[: self._limit]
        return iter(snapshots)


class FakeCollection(FakeQuery):
    def __init__(self, client, path):
        self._client = client
        self.path = path
        super().__init__(self)

    def documents(self):
        depth = len(self.path) + 1
        for path, data in list(self._client.docs.items()):
            if len(path) == depth and path[:-1] == self.path:
                yield FakeDocument(self._client, path), data

    def document(self, doc_id=None):
        doc_id = doc_id or f"doc{next(self._client.ids)}"
        return FakeDocument(self._client, self.path + (doc_id,))

    def add(self, data):
        ref = self.document()
        ref.set(data)
        return None, ref


class FakeFirestoreClient:
    """Dictionary-backed subset of google.cloud.firestore.Client."""

    def __init__(self):
        self.docs = {}
        self.ids = itertools.count(1)

    def collection(self, name):
        return FakeCollection(self, (name,))


@pytest.fixture
def fake_client():
    return FakeFirestoreClient()


@pytest.fixture
def db(fake_client):
    return FirestoreService(fake_client)


@pytest.fixture
def now():
    return datetime(2024, 5, 15, 10, 30)


def make_budget(**overrides) -> Budget:
    data = {
        "id": "b1",
        "user": "u1",
        "category": "Food",
        "amount": 500,
        "notifications": {"enabled": True, "threshold": 80},
    }
    data.update(overrides)
    return Budget.model_validate(data)


_txn_ids = itertools.count(1)


def make_transaction(amount, category="Food", type="expense", date=None, **overrides) -> Transaction:
    data = {
        "id": f"t{next(_txn_ids)}",
        "user": "u1",
        "amount": amount,
        "category": category,
        "type": type,
        "date": date or datetime(2024, 5, 10, 12, 0),
        "description": "test",
    }
    data.update(overrides)
    return Transaction.model_validate(data)


def seed_transaction(client, user_id, **fields):
    """Writes a raw transaction document the way the API stores it."""
    data = {"amount": -10.0, "currency": "USD", "description": "seed", "type": "expense"}
    data.update(fields)
    _, ref = client.collection("users").document(user_id).collection("transactions").add(data)
    return ref.id


def seed_budget(client, user_id, **fields):
    data = {"amount": 500.0, "currency": "USD", "periodType": "monthly",
            "notifications": {"enabled": False, "threshold": 80}}
    data.update(fields)
    _, ref = client.collection("users").document(user_id).collection("budgets").add(data)
    return ref.id
