"""Ipset client for querying and updating IP sets.

Wraps the ``ipset`` command-line tool: builds the argument list, runs it,
and turns its text output into models or typed errors.
"""

import logging
from collections.abc import Mapping, Sequence

from ipset_client.exceptions import AlreadyMemberError, NotAMemberError, SetNotFoundError
from ipset_client.models import CommandResult, SetDescription, SetType
from ipset_client.parser import Operation, classify_error, parse_list_output
from ipset_client.phrases import (
    DEFAULT_SET_TYPES,
    IPSET_V7_PHRASES,
    DiagnosticPhrases,
    build_set_types,
    load_phrases,
)
from ipset_client.runner import CommandRunner, SubprocessRunner
from ipset_client.settings import IpsetSettings, get_ipset_settings

logger = logging.getLogger(__name__)


class IpsetClient:
    """Client for ipset operations.

    Every call is a single invocation of the tool; the client holds no
    state between calls apart from its read-only lookup tables.

    Example:
        ```python
        client = IpsetClient()

        blocklist = client.get_set("blocklist")
        client.add_member("blocklist", "10.0.0.1")
        client.remove_member("blocklist", "10.0.0.1")
        ```
    """

    def __init__(
        self,
        runner: CommandRunner | None = None,
        settings: IpsetSettings | None = None,
        set_types: Mapping[str, SetType] | None = None,
        phrases: DiagnosticPhrases | None = None,
    ) -> None:
        """Initialize the ipset client.

        Args:
            runner: Process runner. Defaults to a subprocess runner.
            settings: Optional settings. If not provided, reads from environment.
            set_types: Type name lookup table. Defaults to ``hash:ip`` only.
            phrases: Diagnostic phrase table. Defaults to the configured
                phrases file, or the built-in table.

        Raises:
            FileNotFoundError: If the configured phrases file is missing.
        """
        self.settings = settings or get_ipset_settings()
        self._runner = runner or SubprocessRunner(use_sudo=self.settings.use_sudo)
        self._command = self.settings.ipset_command
        self._set_types: Mapping[str, SetType] = (
            build_set_types(set_types) if set_types is not None else DEFAULT_SET_TYPES
        )

        if phrases is not None:
            self._phrases = phrases
        elif self.settings.phrases_file is not None:
            self._phrases = load_phrases(self.settings.phrases_file)
        else:
            self._phrases = IPSET_V7_PHRASES

        logger.debug(
            "Initialized ipset client (command=%s, phrases for v%s)",
            self._command,
            self._phrases.tool_version,
        )

    @property
    def set_types(self) -> Mapping[str, SetType]:
        """Read-only set-type lookup table."""
        return self._set_types

    @property
    def phrases(self) -> DiagnosticPhrases:
        """Diagnostic phrase table in use."""
        return self._phrases

    def _run(self, args: Sequence[str]) -> CommandResult:
        return self._runner.run(self._command, args)

    # =========================================================================
    # Core Operations
    # =========================================================================

    def get_set(self, name: str) -> SetDescription:
        """Describe a set and its members.

        Args:
            name: Set name.

        Returns:
            Parsed set description.

        Raises:
            SetNotFoundError: If the set doesn't exist.
            UnsupportedSetTypeError: If the set type is not in the type table.
            MalformedOutputError: If the output cannot be parsed.
            UnrecognizedError: If the tool reports an unknown error.
        """
        result = self._run([Operation.LIST.value, name])

        if result.has_error_output:
            raise classify_error(
                result.first_error_line, Operation.LIST, name, self._phrases
            )

        description = parse_list_output(
            result.stdout_lines, name, self._set_types, self._phrases
        )
        logger.debug("Set %s has %d members", name, len(description.members))
        return description

    def add_member(self, set_name: str, member: str) -> None:
        """Add an element to a set.

        Args:
            set_name: Target set name.
            member: Element to add.

        Raises:
            SetNotFoundError: If the set doesn't exist.
            AlreadyMemberError: If the element is already in the set.
            InvalidAddressError: If the element is not a valid address.
            UnrecognizedError: If the tool reports an unknown error.
        """
        result = self._run([Operation.ADD.value, set_name, member])

        if result.has_error_output:
            raise classify_error(
                result.first_error_line,
                Operation.ADD,
                set_name,
                self._phrases,
                member=member,
            )

        logger.info("Added %s to set %s", member, set_name)

    def remove_member(self, set_name: str, member: str) -> None:
        """Remove an element from a set.

        Args:
            set_name: Target set name.
            member: Element to remove.

        Raises:
            SetNotFoundError: If the set doesn't exist.
            NotAMemberError: If the element is not in the set.
            InvalidAddressError: If the element is not a valid address.
            UnrecognizedError: If the tool reports an unknown error.
        """
        result = self._run([Operation.DEL.value, set_name, member])

        if result.has_error_output:
            raise classify_error(
                result.first_error_line,
                Operation.DEL,
                set_name,
                self._phrases,
                member=member,
            )

        logger.info("Removed %s from set %s", member, set_name)

    # =========================================================================
    # Convenience Operations
    # =========================================================================

    def set_exists(self, name: str) -> bool:
        """Check whether a set exists.

        Raises:
            IpsetError: For any failure other than a missing set.
        """
        try:
            self.get_set(name)
        except SetNotFoundError:
            return False
        return True

    def ensure_member(self, set_name: str, member: str) -> bool:
        """Add an element unless it is already present.

        Returns:
            True if the element was added, False if it was already there.
        """
        try:
            self.add_member(set_name, member)
        except AlreadyMemberError:
            logger.debug("%s already in set %s", member, set_name)
            return False
        return True

    def discard_member(self, set_name: str, member: str) -> bool:
        """Remove an element if it is present.

        Returns:
            True if the element was removed, False if it was not there.
        """
        try:
            self.remove_member(set_name, member)
        except NotAMemberError:
            logger.debug("%s not in set %s", member, set_name)
            return False
        return True
