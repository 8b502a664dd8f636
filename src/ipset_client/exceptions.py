"""Ipset client exceptions.

Every failure the client can report is an ``IpsetError`` subclass carrying
a machine-readable ``kind`` so callers can branch on the error category
without matching on exception classes.

Exception Hierarchy:
    IpsetError
    ├── SetNotFoundError (target set does not exist)
    ├── AlreadyMemberError (add of an existing member)
    ├── NotAMemberError (delete of an absent member)
    ├── InvalidAddressError (member rejected by the tool)
    ├── UnsupportedSetTypeError (set type not in the type table)
    ├── MalformedOutputError (list output could not be parsed)
    ├── UnrecognizedError (unknown diagnostic text)
    └── IpsetCommandError (the tool could not be executed)
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class IpsetErrorKind(str, Enum):
    """Machine-readable error categories."""

    SET_NOT_FOUND = "set_not_found"
    ALREADY_MEMBER = "already_member"
    NOT_A_MEMBER = "not_a_member"
    INVALID_ADDRESS = "invalid_address"
    UNSUPPORTED_SET_TYPE = "unsupported_set_type"
    MALFORMED_OUTPUT = "malformed_output"
    UNRECOGNIZED_ERROR = "unrecognized_error"
    COMMAND_FAILED = "command_failed"


class IpsetError(Exception):
    """Base exception for ipset client errors.

    Attributes:
        message: Human-readable error message
        kind: Error category
        details: Additional context about the error
    """

    kind: IpsetErrorKind = IpsetErrorKind.UNRECOGNIZED_ERROR

    def __init__(
        self,
        message: str,
        *,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize IpsetError.

        Args:
            message: Error message
            details: Additional context as key-value pairs
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for JSON output.

        Returns:
            Dictionary with the error kind, message and details.
        """
        result: dict[str, Any] = {
            "error": self.__class__.__name__,
            "kind": self.kind.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class SetNotFoundError(IpsetError):
    """The target set does not exist.

    Attributes:
        set_name: Name of the missing set
    """

    kind = IpsetErrorKind.SET_NOT_FOUND

    def __init__(self, set_name: str) -> None:
        """Initialize set not found error.

        Args:
            set_name: Name of the missing set
        """
        super().__init__(
            f"Ipset set {set_name} does not exist",
            details={"set_name": set_name},
        )
        self.set_name = set_name


class AlreadyMemberError(IpsetError):
    """The element is already in the set.

    Attributes:
        set_name: Name of the target set
        member: The element that was being added
    """

    kind = IpsetErrorKind.ALREADY_MEMBER

    def __init__(self, set_name: str, member: str) -> None:
        """Initialize already member error.

        Args:
            set_name: Name of the target set
            member: The element that was being added
        """
        super().__init__(
            f"Element {member} already exists in set {set_name}",
            details={"set_name": set_name, "member": member},
        )
        self.set_name = set_name
        self.member = member


class NotAMemberError(IpsetError):
    """The element is not in the set.

    Attributes:
        set_name: Name of the target set
        member: The element that was being removed
    """

    kind = IpsetErrorKind.NOT_A_MEMBER

    def __init__(self, set_name: str, member: str) -> None:
        """Initialize not a member error.

        Args:
            set_name: Name of the target set
            member: The element that was being removed
        """
        super().__init__(
            f"Element {member} not found in set {set_name}",
            details={"set_name": set_name, "member": member},
        )
        self.set_name = set_name
        self.member = member


class InvalidAddressError(IpsetError):
    """The tool could not resolve the member to an address.

    Attributes:
        member: The rejected element
    """

    kind = IpsetErrorKind.INVALID_ADDRESS

    def __init__(self, member: str) -> None:
        """Initialize invalid address error.

        Args:
            member: The rejected element
        """
        super().__init__(
            f"Invalid IP address {member}",
            details={"member": member},
        )
        self.member = member


class UnsupportedSetTypeError(IpsetError):
    """The listed set has a type missing from the set-type table.

    Attributes:
        raw_value: Type text as printed by the tool
    """

    kind = IpsetErrorKind.UNSUPPORTED_SET_TYPE

    def __init__(self, raw_value: str) -> None:
        """Initialize unsupported set type error.

        Args:
            raw_value: Type text as printed by the tool
        """
        super().__init__(
            f"Unknown ipset set type: {raw_value}",
            details={"raw_value": raw_value},
        )
        self.raw_value = raw_value


class MalformedOutputError(IpsetError):
    """The tool's list output did not have the expected shape.

    Attributes:
        field: Header field that failed to parse (if known)
        line: Offending output line (if known)
    """

    kind = IpsetErrorKind.MALFORMED_OUTPUT

    def __init__(
        self,
        message: str,
        field: str | None = None,
        line: str | None = None,
    ) -> None:
        """Initialize malformed output error.

        Args:
            message: Error message
            field: Header field that failed to parse
            line: Offending output line
        """
        details: dict[str, Any] = {}
        if field is not None:
            details["field"] = field
        if line is not None:
            details["line"] = line
        super().__init__(message, details=details)
        self.field = field
        self.line = line


class UnrecognizedError(IpsetError):
    """The tool reported an error the client does not know.

    Attributes:
        raw_line: The first diagnostic line, verbatim
    """

    kind = IpsetErrorKind.UNRECOGNIZED_ERROR

    def __init__(self, raw_line: str) -> None:
        """Initialize unrecognized error.

        Args:
            raw_line: The first diagnostic line, verbatim
        """
        super().__init__(
            f"Unknown error message: {raw_line}",
            details={"raw_line": raw_line},
        )
        self.raw_line = raw_line


class IpsetCommandError(IpsetError):
    """The ipset executable could not be started.

    Attributes:
        command: Command line that failed to start
    """

    kind = IpsetErrorKind.COMMAND_FAILED

    def __init__(self, message: str, command: list[str] | None = None) -> None:
        """Initialize command error.

        Args:
            message: Error message
            command: Command line that failed to start
        """
        super().__init__(
            message,
            details={"command": " ".join(command)} if command else None,
        )
        self.command = command or []


__all__ = [
    "AlreadyMemberError",
    "InvalidAddressError",
    "IpsetCommandError",
    "IpsetError",
    "IpsetErrorKind",
    "MalformedOutputError",
    "NotAMemberError",
    "SetNotFoundError",
    "UnrecognizedError",
    "UnsupportedSetTypeError",
]
