"""Parsing of ipset text output.

Turns ``ipset list <name>`` output into a :class:`SetDescription` and maps
diagnostic lines to error values.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from pydantic import ValidationError

from ipset_client.exceptions import (
    AlreadyMemberError,
    InvalidAddressError,
    IpsetError,
    MalformedOutputError,
    NotAMemberError,
    SetNotFoundError,
    UnrecognizedError,
    UnsupportedSetTypeError,
)
from ipset_client.models import SetDescription, SetType
from ipset_client.phrases import DiagnosticPhrases

MEMBERS_MARKER = "Members:"

# Header prefix -> SetDescription field
TEXT_FIELDS = {
    "Name: ": "name",
    "Header: ": "header",
}
INT_FIELDS = {
    "Revision: ": "revision",
    "Size in memory: ": "size_in_memory",
    "References: ": "reference_count",
}
TYPE_PREFIX = "Type: "

_DIGITS = re.compile(r"[0-9]+")


class Operation(str, Enum):
    """Ipset subcommands issued by the client."""

    LIST = "list"
    ADD = "add"
    DEL = "del"


def classify_error(
    line: str,
    operation: Operation,
    set_name: str,
    phrases: DiagnosticPhrases,
    member: str | None = None,
) -> IpsetError:
    """Classify the first diagnostic line of an invocation.

    The error is returned, not raised.

    Args:
        line: First line the tool wrote to standard error.
        operation: Subcommand that produced the line.
        set_name: Target set name.
        phrases: Diagnostic phrase table.
        member: Element argument for add/del.

    Returns:
        The matching error value; ``UnrecognizedError`` when nothing matches.
    """
    if phrases.set_not_found in line:
        return SetNotFoundError(set_name)

    if operation is Operation.ADD and phrases.already_added in line:
        return AlreadyMemberError(set_name, member or "")

    if operation is Operation.DEL and phrases.not_added in line:
        return NotAMemberError(set_name, member or "")

    if operation in (Operation.ADD, Operation.DEL) and phrases.invalid_ipv4 in line:
        return InvalidAddressError(member or "")

    return UnrecognizedError(line)


def parse_int(field: str, value: str, line: str) -> int:
    """Parse a non-negative base-10 header value."""
    text = value.strip()
    if not _DIGITS.fullmatch(text):
        msg = f"Invalid {field} value: {value!r}"
        raise MalformedOutputError(msg, field=field, line=line)
    return int(text)


def parse_set_type(value: str, set_types: Mapping[str, SetType]) -> SetType:
    """Look up a type name case-insensitively.

    Raises:
        UnsupportedSetTypeError: If the type is not in the table.
    """
    set_type = set_types.get(value.lower())
    if set_type is None:
        raise UnsupportedSetTypeError(value)
    return set_type


def parse_header_line(
    line: str,
    fields: dict[str, Any],
    set_types: Mapping[str, SetType],
) -> None:
    """Store one ``key: value`` header line into ``fields``.

    Unknown lines are ignored.
    """
    for prefix, field in TEXT_FIELDS.items():
        if line.startswith(prefix):
            fields[field] = line[len(prefix):]
            return

    for prefix, field in INT_FIELDS.items():
        if line.startswith(prefix):
            fields[field] = parse_int(field, line[len(prefix):], line)
            return

    if line.startswith(TYPE_PREFIX):
        fields["type"] = parse_set_type(line[len(TYPE_PREFIX):], set_types)


def parse_list_output(
    lines: Iterable[str],
    set_name: str,
    set_types: Mapping[str, SetType],
    phrases: DiagnosticPhrases,
) -> SetDescription:
    """Parse the standard output of ``ipset list <name>``.

    Header lines may come in any order; every line after ``Members:`` is a
    member. Blank lines are skipped.

    Args:
        lines: Output lines.
        set_name: Name that was queried.
        set_types: Lower-cased type name lookup table.
        phrases: Diagnostic phrase table.

    Returns:
        Parsed set description.

    Raises:
        SetNotFoundError: If the first line reports a missing set.
        UnsupportedSetTypeError: If the set type is not in the table.
        MalformedOutputError: If the output cannot be parsed.
    """
    iterator = iter(lines)
    first_line = next(iterator, None)
    if first_line is None:
        msg = f"Empty output listing set {set_name}"
        raise MalformedOutputError(msg)

    if phrases.set_not_found in first_line:
        raise SetNotFoundError(set_name)

    fields: dict[str, Any] = {}
    members: set[str] = set()
    in_members = False

    parse_header_line(first_line, fields, set_types)
    for line in iterator:
        if in_members:
            if line:
                members.add(line)
        elif line == MEMBERS_MARKER:
            in_members = True
        else:
            parse_header_line(line, fields, set_types)

    for required in ("name", "type"):
        if required not in fields:
            msg = f"Missing {required} in output listing set {set_name}"
            raise MalformedOutputError(msg, field=required)

    try:
        return SetDescription(members=frozenset(members), **fields)
    except ValidationError as e:
        msg = f"Invalid output listing set {set_name}: {e}"
        raise MalformedOutputError(msg) from e
