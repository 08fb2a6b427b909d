"""Parsing of a small subset of the protobuf wire format."""

from __future__ import annotations

import argparse
import dataclasses
import enum
from typing import Callable, Protocol, TypeVar, Union

_MAX_VARINT_BYTES = 7


class WireType(enum.IntEnum):
    """A wire type as seen on the wire."""

    VARINT = 0
    """The value is a single VARINT."""
    LEN = 2
    """The value is a VARINT length followed by exactly that many bytes."""


FieldValue = Union[int, bytes]


@dataclasses.dataclass(frozen=True)
class Field:
    """A field number with its value: ``int`` for VARINT, ``bytes`` for LEN."""

    field_num: int
    value: FieldValue


class _Message(Protocol):
    def add_field(self, field: Field) -> None: ...


M = TypeVar("M", bound=_Message)


def _as_bytes(value: FieldValue) -> bytes:
    if not isinstance(value, bytes):
        raise ValueError("Expected bytes to be a `Len` field")
    return value


def _as_str(value: FieldValue) -> str:
    if not isinstance(value, bytes):
        raise ValueError("Expected string to be a `Len` field")
    try:
        return value.decode("utf-8")
    except UnicodeDecodeError as err:
        raise ValueError("Invalid string") from err


def _as_int(value: FieldValue) -> int:
    if not isinstance(value, int):
        raise ValueError("Expected `u64` to be a `Varint` field")
    return value


def parse_varint(data: bytes) -> tuple[int, bytes]:
    """Parse a VARINT, returning its value and the remaining bytes."""
    data = bytes(data)
    value = 0
    for index, byte in enumerate(data[:_MAX_VARINT_BYTES]):
        value |= (byte & 0x7F) << (7 * index)
        if not byte & 0x80:
            return value, data[index + 1 :]
    if len(data) < _MAX_VARINT_BYTES:
        raise ValueError("Not enough bytes for varint")
    raise ValueError("Too many bytes for varint")


def unpack_tag(tag: int) -> tuple[int, WireType]:
    """Split a tag into its field number and wire type."""
    try:
        wire_type = WireType(tag & 0x7)
    except ValueError:
        raise ValueError(f"Invalid wire type: {tag & 0x7}") from None
    return tag >> 3, wire_type


def parse_field(data: bytes) -> tuple[Field, bytes]:
    """Parse one field, returning it and the remaining bytes."""
    tag, rest = parse_varint(data)
    field_num, wire_type = unpack_tag(tag)
    value: FieldValue
    if wire_type is WireType.VARINT:
        value, rest = parse_varint(rest)
    else:
        length, rest = parse_varint(rest)
        if len(rest) < length:
            raise ValueError("Unexpected EOF")
        value, rest = rest[:length], rest[length:]
    return Field(field_num, value), rest


def parse_message(data: bytes, message_type: Callable[[], M]) -> M:
    """Parse all of ``data`` into a new ``message_type``, field by field."""
    result = message_type()
    rest = bytes(data)
    while rest:
        field, rest = parse_field(rest)
        result.add_field(field)
    return result


@dataclasses.dataclass
class PhoneNumber:
    """A phone number entry of a person."""

    number: str = ""
    type: str = ""

    def add_field(self, field: Field) -> None:
        """Store a parsed field; unknown field numbers are skipped."""
        match field.field_num:
            case 1:
                self.number = _as_str(field.value)
            case 2:
                self.type = _as_str(field.value)


@dataclasses.dataclass
class Person:
    """A person with a name, an id and phone numbers."""

    name: str = ""
    id: int = 0
    phone: list[PhoneNumber] = dataclasses.field(default_factory=list)

    def add_field(self, field: Field) -> None:
        """Store a parsed field; unknown field numbers are skipped."""
        match field.field_num:
            case 1:
                self.name = _as_str(field.value)
            case 2:
                self.id = _as_int(field.value)
            case 3:
                self.phone.append(parse_message(_as_bytes(field.value), PhoneNumber))


_SAMPLES = [
    bytes([0x10, 0x2A]),
    b"\x0a\x0ebeautiful name",
    b"\x0a\x04Evan\x10\x16",
    b"\x0a\x00\x10\x00\x1a\x0f\x0a\x07[phone]\x12\x04home",
    b"\x0a\x07maxwell\x10\x2a"
    b"\x1a\x0f\x0a\x07[phone]\x12\x04home"
    b"\x1a\x11\x0a\x07[phone]\x12\x06mobile",
]


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Parse sample person messages.").parse_args(
        argv
    )
    for sample in _SAMPLES:
        print(parse_message(sample, Person))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())