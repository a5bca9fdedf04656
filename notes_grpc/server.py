"""gRPC servicer implementing the notes service over a note repository."""

from __future__ import annotations

import logging
from concurrent import futures

import grpc

from .grpc import notes_pb2, notes_pb2_grpc
from .storage import MemoryNoteRepository, Note, NoteNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_HOST = "[::]"
DEFAULT_PORT = 50051
DEFAULT_MAX_WORKERS = 10

INTERNAL_SERVER_ERROR = "internal server error: {}"
INVALID_NOTE = "invalid note: {}"
NOTE_NOT_FOUND = "note not found: {}"
PATTERN_EMPTY = "pattern cannot be empty"


def _note_to_proto(note: Note) -> notes_pb2.Note:
    return notes_pb2.Note(id=note.id, title=note.title, content=note.content)


def _validate(note: Note) -> str | None:
    """Return a description of what is wrong with note, or None if it is valid."""
    missing = [name for name in ("title", "content") if not getattr(note, name)]
    if missing:
        return ", ".join(f"{name} is required" for name in missing)
    return None


class NotesServicer(notes_pb2_grpc.NotesServiceServicer):
    """NotesService backed by a MemoryNoteRepository (or anything shaped like one)."""

    def __init__(self, repository: MemoryNoteRepository | None = None):
        self.repository = repository if repository is not None else MemoryNoteRepository()

    def CreateNote(self, request, context):
        note = Note(title=request.title, content=request.content)
        problem = _validate(note)
        if problem:
            context.abort(grpc.StatusCode.INVALID_ARGUMENT, INVALID_NOTE.format(problem))
            return None

        try:
            note.id = self.repository.create(note)
        except Exception as e:
            self._internal_error(context, "CreateNote", e)
            return None

        logger.debug(f"CreateNote: id={note.id}")
        return _note_to_proto(note)

    def GetNote(self, request, context):
        logger.debug(f"GetNote: id={request.id}")
        try:
            note = self.repository.get(request.id)
        except NoteNotFoundError as e:
            context.abort(grpc.StatusCode.NOT_FOUND, NOTE_NOT_FOUND.format(e))
        except Exception as e:
            self._internal_error(context, "GetNote", e)
        else:
            return _note_to_proto(note)
        return None

    def UpdateNote(self, request, context):
        logger.debug(f"UpdateNote: id={request.id}")
        note = Note(id=request.id, title=request.title, content=request.content)
        problem = _validate(note)
        if problem:
            context.abort(grpc.StatusCode.INVALID_ARGUMENT, INVALID_NOTE.format(problem))
            return None

        try:
            self.repository.update(note.id, note)
        except NoteNotFoundError as e:
            context.abort(grpc.StatusCode.NOT_FOUND, NOTE_NOT_FOUND.format(e))
        except Exception as e:
            self._internal_error(context, "UpdateNote", e)
        else:
            return notes_pb2.Empty()
        return None

    def DeleteNote(self, request, context):
        logger.debug(f"DeleteNote: id={request.id}")
        try:
            self.repository.delete(request.id)
        except NoteNotFoundError as e:
            context.abort(grpc.StatusCode.NOT_FOUND, NOTE_NOT_FOUND.format(e))
        except Exception as e:
            self._internal_error(context, "DeleteNote", e)
        else:
            return notes_pb2.Empty()
        return None

    def SearchNotes(self, request, context):
        pattern = request.pattern
        if not pattern:
            context.abort(grpc.StatusCode.INVALID_ARGUMENT, PATTERN_EMPTY)
            return None

        try:
            notes = self.repository.find_like(pattern)
        except Exception as e:
            self._internal_error(context, "SearchNotes", e)
            return None

        logger.debug(f"SearchNotes: pattern={pattern!r} matched={len(notes)}")
        return notes_pb2.Notes(notes=[_note_to_proto(note) for note in notes])

    def _internal_error(self, context, method: str, error: Exception) -> None:
        logger.exception(f"{method} failed: {error}")
        context.abort(grpc.StatusCode.INTERNAL, INTERNAL_SERVER_ERROR.format(error))


def build_server(
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    repository: MemoryNoteRepository | None = None,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> tuple[grpc.Server, int]:
    """Create an unstarted server. Returns the server and the port it bound.

    Port 0 binds a free port chosen by the OS.
    """
    server = grpc.server(futures.ThreadPoolExecutor(max_workers=max_workers))
    notes_pb2_grpc.add_NotesServiceServicer_to_server(NotesServicer(repository), server)
    bound_port = server.add_insecure_port(f"{host}:{port}")
    if bound_port == 0:
        raise RuntimeError(f"Failed to bind notes server to {host}:{port}")
    return server, bound_port


def serve(
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    repository: MemoryNoteRepository | None = None,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> grpc.Server:
    """Start the notes gRPC server."""
    server, bound_port = build_server(host, port, repository, max_workers)
    server.start()
    logger.info(f"Notes server started on {host}:{bound_port}")
    return server
