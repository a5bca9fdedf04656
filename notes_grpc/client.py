"""Blocking client for the notes gRPC service."""

from __future__ import annotations

import logging
from typing import Any, Callable

import grpc

from .errors import NotesConnectionError, from_grpc_error
from .grpc import notes_pb2, notes_pb2_grpc

logger = logging.getLogger(__name__)

DEFAULT_CONNECT_TIMEOUT = 5.0  # seconds


def format_target(host: str, port: int) -> str:
    """Return the gRPC target for host and port, bracketing bare IPv6 literals."""
    if ":" in host and not host.startswith("["):
        host = f"[{host}]"
    return f"{host}:{port}"


class NotesClient:
    """Client for creating, reading, updating, deleting and searching notes.

    Each operation is a single synchronous round trip on one plaintext
    channel. A client instance is meant for use from one thread.

    Example:
        with NotesClient() as client:
            client.connect("localhost", 50051)
            note_id = client.create("Groceries", "milk, eggs")
            title, content = client.get(note_id)
    """

    def __init__(
        self,
        connect_timeout: float | None = DEFAULT_CONNECT_TIMEOUT,
        stub_factory: Callable[[grpc.Channel], Any] = notes_pb2_grpc.NotesServiceStub,
    ):
        """Initialize an unconnected client.

        Args:
            connect_timeout: Seconds connect() waits for the channel to become
                ready. None skips the wait and lets the first call fail instead.
            stub_factory: Builds the service stub from the open channel
        """
        self.connect_timeout = connect_timeout
        self.stub_factory = stub_factory
        self.target: str | None = None
        self.channel: grpc.Channel | None = None
        self.stub: Any = None
        self._closed = False

    def __enter__(self) -> NotesClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @property
    def connected(self) -> bool:
        return self.stub is not None and not self._closed

    def connect(self, host: str, port: int) -> None:
        """Open a plaintext channel to host:port.

        Raises:
            NotesConnectionError: If the client is already connected or closed,
                the address is invalid, or the channel does not become ready
                within connect_timeout.
        """
        if self._closed:
            raise NotesConnectionError("Client is closed")
        if self.stub is not None:
            raise NotesConnectionError(f"Client is already connected to {self.target}")
        if not host:
            raise NotesConnectionError("Host must not be empty")
        if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
            raise NotesConnectionError(f"Invalid port: {port!r}")

        target = format_target(host, port)
        logger.info(f"Connecting to notes service at {target}")
        channel = grpc.insecure_channel(target)

        if self.connect_timeout is not None:
            try:
                grpc.channel_ready_future(channel).result(timeout=self.connect_timeout)
            except grpc.FutureTimeoutError as e:
                channel.close()
                raise NotesConnectionError(
                    f"Could not connect to {target} within {self.connect_timeout}s"
                ) from e

        try:
            stub = self.stub_factory(channel)
        except Exception:
            channel.close()
            raise

        self.target = target
        self.channel = channel
        self.stub = stub
        logger.info(f"Connected to notes service at {target}")

    def close(self) -> None:
        """Close the channel. Calling close more than once is a no-op."""
        if self._closed:
            logger.debug("Notes client already closed")
            return
        self._closed = True
        if self.channel is not None:
            self.channel.close()
            logger.info(f"Closed channel to {self.target}")
        self.channel = None
        self.stub = None

    def create(self, title: str, content: str) -> int:
        """Create a note and return the id the service assigned to it.

        Raises:
            NotesConnectionError: If the client is not connected
            RpcError: If the call fails or the service rejects the note
        """
        request = notes_pb2.NoteRequest(title=title, content=content)
        response = self._call("CreateNote", request)
        return response.id

    def get(self, note_id: int) -> tuple[str, str]:
        """Return the (title, content) of a note.

        Raises:
            NotFoundError: If the service has no note with this id
            RpcError: If the call fails
        """
        request = notes_pb2.IdRequest(id=note_id)
        response = self._call("GetNote", request)
        return response.title, response.content

    def update(self, note_id: int, title: str, content: str) -> None:
        """Replace the title and content of an existing note."""
        request = notes_pb2.Note(id=note_id, title=title, content=content)
        self._call("UpdateNote", request)

    def delete(self, note_id: int) -> None:
        """Delete a note."""
        request = notes_pb2.IdRequest(id=note_id)
        self._call("DeleteNote", request)

    def search(self, pattern: str) -> list[int]:
        """Return ids of notes matching pattern, in the order the service sent them."""
        request = notes_pb2.SearchRequest(pattern=pattern)
        response = self._call("SearchNotes", request)
        return [note.id for note in response.notes]

    def _call(self, method: str, request):
        if self._closed:
            raise NotesConnectionError("Client is closed")
        if self.stub is None:
            raise NotesConnectionError("Client is not connected; call connect() first")

        logger.debug(f"{method} -> {self.target}")
        try:
            return getattr(self.stub, method)(request)
        except grpc.RpcError as e:
            error = from_grpc_error(e)
            logger.debug(f"{method} failed: {error}")
            raise error from e
