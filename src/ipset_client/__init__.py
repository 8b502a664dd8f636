"""Ipset client package.

Provides a client for querying and updating Linux IP sets through the
``ipset`` command-line tool.

Example:
    ```python
    from ipset_client import IpsetClient, AlreadyMemberError

    client = IpsetClient()

    blocklist = client.get_set("blocklist")
    print(blocklist.type, sorted(blocklist.members))

    try:
        client.add_member("blocklist", "10.0.0.3")
    except AlreadyMemberError:
        pass
    ```
"""

from ipset_client.client import IpsetClient
from ipset_client.exceptions import (
    AlreadyMemberError,
    InvalidAddressError,
    IpsetCommandError,
    IpsetError,
    IpsetErrorKind,
    MalformedOutputError,
    NotAMemberError,
    SetNotFoundError,
    UnrecognizedError,
    UnsupportedSetTypeError,
)
from ipset_client.models import CommandResult, SetDescription, SetType
from ipset_client.parser import Operation, classify_error, parse_list_output
from ipset_client.phrases import (
    DEFAULT_SET_TYPES,
    IPSET_V7_PHRASES,
    DiagnosticPhrases,
    load_phrases,
)
from ipset_client.runner import CommandRunner, SubprocessRunner
from ipset_client.settings import IpsetSettings, get_ipset_settings, reset_settings

__all__ = [
    "DEFAULT_SET_TYPES",
    "IPSET_V7_PHRASES",
    "AlreadyMemberError",
    "CommandResult",
    "CommandRunner",
    "DiagnosticPhrases",
    "InvalidAddressError",
    "IpsetClient",
    "IpsetCommandError",
    "IpsetError",
    "IpsetErrorKind",
    "IpsetSettings",
    "MalformedOutputError",
    "NotAMemberError",
    "Operation",
    "SetDescription",
    "SetNotFoundError",
    "SetType",
    "SubprocessRunner",
    "UnrecognizedError",
    "UnsupportedSetTypeError",
    "classify_error",
    "get_ipset_settings",
    "load_phrases",
    "parse_list_output",
    "reset_settings",
]

__version__ = "0.1.0"
