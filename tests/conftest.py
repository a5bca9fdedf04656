"""Shared fixtures for the notes tests."""

import grpc
import pytest

from notes_grpc.server import build_server
from notes_grpc.storage import MemoryNoteRepository


class FakeRpcError(grpc.RpcError):
    """Stand-in for the error a blocking stub raises on a failed call."""

    def __init__(self, code: grpc.StatusCode, details: str = ""):
        super().__init__(details)
        self._code = code
        self._details = details

    def code(self):
        return self._code

    def details(self):
        return self._details


class Aborted(Exception):
    """Raised by FakeContext.abort, like grpc does for a real servicer context."""

    def __init__(self, code: grpc.StatusCode, details: str):
        super().__init__(f"{code.name}: {details}")
        self.code = code
        self.details = details


class FakeContext:
    """Minimal grpc.ServicerContext for calling servicer methods directly."""

    def __init__(self):
        self.code = None
        self.details = None

    def set_code(self, code):
        self.code = code

    def set_details(self, details):
        self.details = details

    def abort(self, code, details):
        self.code = code
        self.details = details
        raise Aborted(code, details)


@pytest.fixture
def rpc_error():
    """Factory for errors shaped like the ones a blocking stub raises."""
    return FakeRpcError


@pytest.fixture
def context():
    return FakeContext()


@pytest.fixture
def aborted():
    return Aborted


@pytest.fixture
def repository():
    return MemoryNoteRepository()


@pytest.fixture
def notes_server(repository):
    """A running notes server on a free local port. Yields the port."""
    server, port = build_server("127.0.0.1", 0, repository=repository, max_workers=4)
    server.start()
    yield port
    server.stop(grace=None)
