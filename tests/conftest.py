"""Shared pytest fixtures for the BCRS API tests."""

import copy
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app_factory import create_app
from services.user_service import UserService


class FakeCursor:
    def __init__(self, documents):
        self.documents = documents

    def sort(self, key, direction=1):
        self.documents = sorted(self.documents, key=lambda d: d[key], reverse=direction < 0)
        return self

    def __iter__(self):
        return iter(self.documents)


class FakeCollection:
    """In-memory stand-in for the subset of pymongo's Collection used by UserService."""

    def __init__(self):
        self.documents = {}

    @staticmethod
    def _matches(document, query):
        return all(document.get(k) == v for k, v in query.items())

    @staticmethod
    def _project(document, projection):
        if not projection:
            return copy.deepcopy(document)
        projected = {"_id": document["_id"]}
        for field, include in projection.items():
            if include and field in document:
                projected[field] = copy.deepcopy(document[field])
        return projected

    def insert_one(self, document):
        document.setdefault("_id", ObjectId())
        self.documents[document["_id"]] = copy.deepcopy(document)
        return SimpleNamespace(inserted_id=document["_id"], acknowledged=True)

    def find(self, query=None, projection=None):
        query = query or {}
        return FakeCursor([
            self._project(doc, projection)
            for doc in self.documents.values()
            if self._matches(doc, query)
        ])

    def find_one(self, query=None, projection=None):
        for document in self.find(query, projection):
            return document
        return None

    def update_one(self, query, update):
        for document in self.documents.values():
            if self._matches(document, query):
                document.update(copy.deepcopy(update["$set"]))
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)


@pytest.fixture()
def collection():
    return FakeCollection()


@pytest.fixture()
def service(collection):
    return UserService(collection)


@pytest.fixture()
def app(collection):
    return create_app(users_collection=collection)


@pytest.fixture()
def client(app):
    """Return a test client that renders uncaught errors as 500 responses."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture()
def new_user():
    return {
        "email": "a@x.com",
        "password": "p",
        "firstName": "A",
        "lastName": "B",
        "phoneNumber": "1",
        "address": "x",
    }
