"""Checks that the notes_pb2 descriptor matches protos/notes.proto."""

import re
from pathlib import Path

import pytest
from google.protobuf import descriptor_pb2

from notes_grpc.grpc import notes_pb2

PROTO_PATH = Path(__file__).resolve().parents[2] / "protos" / "notes.proto"

SCALAR_TYPES = {
    "int64": descriptor_pb2.FieldDescriptorProto.TYPE_INT64,
    "string": descriptor_pb2.FieldDescriptorProto.TYPE_STRING,
}


def _parse_proto(text: str):
    """Read package, messages and rpcs out of a flat proto3 file."""
    package = re.search(r"^package\s+([\w.]+);", text, re.MULTILINE).group(1)

    messages = {}
    for name, body in re.findall(r"message\s+(\w+)\s*\{(.*?)\}", text, re.DOTALL):
        messages[name] = [
            (field_name, int(number), field_type, bool(repeated))
            for repeated, field_type, field_name, number in re.findall(
                r"(repeated\s+)?(\w+)\s+(\w+)\s*=\s*(\d+)\s*;", body
            )
        ]

    rpcs = {
        name: (input_type, output_type)
        for name, input_type, output_type in re.findall(
            r"rpc\s+(\w+)\s*\(\s*(\w+)\s*\)\s*returns\s*\(\s*(\w+)\s*\)", text
        )
    }
    return package, messages, rpcs


@pytest.fixture(scope="module")
def proto():
    return _parse_proto(PROTO_PATH.read_text())


@pytest.fixture(scope="module")
def file_proto():
    file_proto = descriptor_pb2.FileDescriptorProto()
    notes_pb2.DESCRIPTOR.CopyToProto(file_proto)
    return file_proto


def test_package(proto, file_proto):
    package, _, _ = proto

    assert file_proto.package == package


def test_same_messages(proto, file_proto):
    _, messages, _ = proto

    assert messages
    assert sorted(message.name for message in file_proto.message_type) == sorted(messages)


def test_fields_match(proto, file_proto):
    package, messages, _ = proto
    built = {message.name: message for message in file_proto.message_type}

    for name, fields in messages.items():
        actual = []
        for field in built[name].field:
            if field.type == descriptor_pb2.FieldDescriptorProto.TYPE_MESSAGE:
                field_type = field.type_name.rsplit(".", 1)[-1]
                assert field.type_name == f".{package}.{field_type}"
            else:
                field_type = next(k for k, v in SCALAR_TYPES.items() if v == field.type)
            repeated = field.label == descriptor_pb2.FieldDescriptorProto.LABEL_REPEATED
            actual.append((field.name, field.number, field_type, repeated))

        assert actual == fields, name


def test_service_methods_match(proto, file_proto):
    package, _, rpcs = proto

    assert len(file_proto.service) == 1
    service = file_proto.service[0]
    assert service.name == "NotesService"
    assert {
        method.name: (method.input_type, method.output_type) for method in service.method
    } == {
        name: (f".{package}.{input_type}", f".{package}.{output_type}")
        for name, (input_type, output_type) in rpcs.items()
    }
