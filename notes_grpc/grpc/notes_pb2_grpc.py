"""Client and server classes for the notes.NotesService gRPC service."""

import grpc

from . import notes_pb2 as notes__pb2


class NotesServiceStub:
    """Client stub for NotesService."""

    def __init__(self, channel):
        self.CreateNote = channel.unary_unary(
            "/notes.NotesService/CreateNote",
            request_serializer=notes__pb2.NoteRequest.SerializeToString,
            response_deserializer=notes__pb2.Note.FromString,
        )
        self.GetNote = channel.unary_unary(
            "/notes.NotesService/GetNote",
            request_serializer=notes__pb2.IdRequest.SerializeToString,
            response_deserializer=notes__pb2.Note.FromString,
        )
        self.UpdateNote = channel.unary_unary(
            "/notes.NotesService/UpdateNote",
            request_serializer=notes__pb2.Note.SerializeToString,
            response_deserializer=notes__pb2.Empty.FromString,
        )
        self.DeleteNote = channel.unary_unary(
            "/notes.NotesService/DeleteNote",
            request_serializer=notes__pb2.IdRequest.SerializeToString,
            response_deserializer=notes__pb2.Empty.FromString,
        )
        self.SearchNotes = channel.unary_unary(
            "/notes.NotesService/SearchNotes",
            request_serializer=notes__pb2.SearchRequest.SerializeToString,
            response_deserializer=notes__pb2.Notes.FromString,
        )


class NotesServiceServicer:
    """Base class for NotesService implementations."""

    def CreateNote(self, request, context):
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def GetNote(self, request, context):
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def UpdateNote(self, request, context):
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def DeleteNote(self, request, context):
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def SearchNotes(self, request, context):
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")


def add_NotesServiceServicer_to_server(servicer, server):
    rpc_method_handlers = {
        "CreateNote": grpc.unary_unary_rpc_method_handler(
            servicer.CreateNote,
            request_deserializer=notes__pb2.NoteRequest.FromString,
            response_serializer=notes__pb2.Note.SerializeToString,
        ),
        "GetNote": grpc.unary_unary_rpc_method_handler(
            servicer.GetNote,
            request_deserializer=notes__pb2.IdRequest.FromString,
            response_serializer=notes__pb2.Note.SerializeToString,
        ),
        "UpdateNote": grpc.unary_unary_rpc_method_handler(
            servicer.UpdateNote,
            request_deserializer=notes__pb2.Note.FromString,
            response_serializer=notes__pb2.Empty.SerializeToString,
        ),
        "DeleteNote": grpc.unary_unary_rpc_method_handler(
            servicer.DeleteNote,
            request_deserializer=notes__pb2.IdRequest.FromString,
            response_serializer=notes__pb2.Empty.SerializeToString,
        ),
        "SearchNotes": grpc.unary_unary_rpc_method_handler(
            servicer.SearchNotes,
            request_deserializer=notes__pb2.SearchRequest.FromString,
            response_serializer=notes__pb2.Notes.SerializeToString,
        ),
    }
    generic_handler = grpc.method_handlers_generic_handler(
        "notes.NotesService", rpc_method_handlers
    )
    server.add_generic_rpc_handlers((generic_handler,))
