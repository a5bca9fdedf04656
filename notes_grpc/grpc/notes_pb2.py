"""Protocol buffer messages for the notes service.

Mirrors protos/notes.proto. The file descriptor is assembled with
descriptor_pb2 and registered in the default pool, then the message
classes are built the same way protoc-generated modules build them.
"""

from google.protobuf import descriptor_pb2
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf.internal import builder as _builder

_FieldProto = descriptor_pb2.FieldDescriptorProto

_OPTIONAL = _FieldProto.LABEL_OPTIONAL
_REPEATED = _FieldProto.LABEL_REPEATED
_INT64 = _FieldProto.TYPE_INT64
_STRING = _FieldProto.TYPE_STRING
_MESSAGE = _FieldProto.TYPE_MESSAGE


def _build_file() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="notes.proto",
        package="notes",
        syntax="proto3",
    )

    def message(name, *fields):
        msg = file_proto.message_type.add(name=name)
        for number, (field_name, field_type, label, type_name) in enumerate(fields, start=1):
            field = msg.field.add(
                name=field_name,
                number=number,
                label=label,
                type=field_type,
                json_name=field_name,
            )
            if type_name:
                field.type_name = type_name

    message(
        "Note",
        ("id", _INT64, _OPTIONAL, None),
        ("title", _STRING, _OPTIONAL, None),
        ("content", _STRING, _OPTIONAL, None),
    )
    message(
        "NoteRequest",
        ("title", _STRING, _OPTIONAL, None),
        ("content", _STRING, _OPTIONAL, None),
    )
    message("IdRequest", ("id", _INT64, _OPTIONAL, None))
    message("SearchRequest", ("pattern", _STRING, _OPTIONAL, None))
    message("Notes", ("notes", _MESSAGE, _REPEATED, ".notes.Note"))
    message("Empty")

    service = file_proto.service.add(name="NotesService")
    for method_name, input_type, output_type in (
        ("CreateNote", "NoteRequest", "Note"),
        ("GetNote", "IdRequest", "Note"),
        ("UpdateNote", "Note", "Empty"),
        ("DeleteNote", "IdRequest", "Empty"),
        ("SearchNotes", "SearchRequest", "Notes"),
    ):
        service.method.add(
            name=method_name,
            input_type=f".notes.{input_type}",
            output_type=f".notes.{output_type}",
        )

    return file_proto


DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(_build_file().SerializeToString())

_globals = globals()
_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, _globals)
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, _globals)
