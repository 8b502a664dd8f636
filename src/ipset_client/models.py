"""Pydantic models for ipset output.

Immutable value types for set descriptions and raw command results.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SetType(str, Enum):
    """Ipset set types understood by the parser."""

    HASH_IP = "hash:ip"


class SetDescription(BaseModel):
    """Snapshot of one ipset set, parsed from ``ipset list <name>``.

    Attributes:
        name: Set name
        type: Set storage type
        revision: Set type revision
        header: Type-specific header text, kept verbatim
        size_in_memory: Bytes used by the set in the kernel
        reference_count: Number of rules referencing the set
        members: Distinct member entries
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Set name")
    type: SetType = Field(description="Set storage type")
    revision: int = Field(default=0, ge=0, description="Set type revision")
    header: str = Field(default="", description="Opaque header text")
    size_in_memory: int = Field(default=0, ge=0, description="Size in bytes")
    reference_count: int = Field(default=0, ge=0, description="Referencing rules")
    members: frozenset[str] = Field(
        default_factory=frozenset, description="Distinct members"
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary.

        Returns:
            Dictionary with members sorted for stable output.
        """
        return {
            "name": self.name,
            "type": self.type.value,
            "revision": self.revision,
            "header": self.header,
            "size_in_memory": self.size_in_memory,
            "reference_count": self.reference_count,
            "members": sorted(self.members),
        }


def split_lines(text: str) -> list[str]:
    """Split tool output on newlines only.

    A trailing carriage return is dropped from each line, as is the empty
    piece after a final newline. Other line-break characters stay in the
    line.
    """
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class CommandResult(BaseModel):
    """Captured output of one ipset invocation.

    The exit status is kept for diagnostics only; classification is
    driven by stream content.

    Attributes:
        stdout: Full standard output text
        stderr: Full standard error text
        returncode: Process exit status, if known
    """

    model_config = ConfigDict(frozen=True)

    stdout: str = ""
    stderr: str = ""
    returncode: int | None = None

    @property
    def stdout_lines(self) -> list[str]:
        """Standard output split into lines."""
        return split_lines(self.stdout)

    @property
    def stderr_lines(self) -> list[str]:
        """Standard error split into lines."""
        return split_lines(self.stderr)

    @property
    def has_error_output(self) -> bool:
        """Whether anything was written to standard error."""
        return self.stderr != ""

    @property
    def first_error_line(self) -> str:
        """First line of standard error, or an empty string."""
        lines = self.stderr_lines
        return lines[0] if lines else ""
