"""Diagnostic phrase and set-type tables.

The ipset tool has no machine-readable output for list/add/del, so errors
are recognised by substrings of its messages. The phrases live here as
data so another tool version only needs a different table.
"""

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

from ipset_client.models import SetType


class DiagnosticPhrases(BaseModel):
    """Substrings the ipset tool prints for known failures.

    Attributes:
        tool_version: Label of the tool version the phrases come from
        set_not_found: Target set is missing
        already_added: Add of an element already in the set
        not_added: Delete of an element not in the set
        invalid_ipv4: Member could not be resolved to an IPv4 address
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    tool_version: str = Field(default="7", description="Tool version label")
    set_not_found: str = Field(
        default="The set with the given name does not exist", min_length=1
    )
    already_added: str = Field(
        default="Element cannot be added to the set: it's already added",
        min_length=1,
    )
    not_added: str = Field(
        default="Element cannot be deleted from the set: it's not added",
        min_length=1,
    )
    invalid_ipv4: str = Field(
        default="resolving to IPv4 address failed", min_length=1
    )


IPSET_V7_PHRASES = DiagnosticPhrases()

DEFAULT_SET_TYPES: Mapping[str, SetType] = MappingProxyType(
    {SetType.HASH_IP.value: SetType.HASH_IP}
)


def build_set_types(types: Mapping[str, SetType]) -> Mapping[str, SetType]:
    """Build a read-only, case-folded set-type lookup table.

    Args:
        types: Mapping of tool type names to set types.

    Returns:
        Read-only mapping keyed by lower-cased type name.
    """
    return MappingProxyType({name.lower(): value for name, value in types.items()})


def load_phrases(path: str | Path) -> DiagnosticPhrases:
    """Load a diagnostic phrase table from a YAML file.

    Keys missing from the file keep their built-in values.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed phrase table.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file is not a valid phrase table.
    """
    path = Path(path)
    if not path.exists():
        msg = f"Phrases file not found: {path}"
        raise FileNotFoundError(msg)

    try:
        with path.open(encoding="utf-8") as f:
            data: dict[str, Any] | None = yaml.safe_load(f)
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in phrases file {path}: {e}"
        raise ValueError(msg) from e

    if data is None:
        return IPSET_V7_PHRASES
    if not isinstance(data, dict):
        msg = f"Phrases file must contain a mapping: {path}"
        raise ValueError(msg)

    return DiagnosticPhrases.model_validate(data)
