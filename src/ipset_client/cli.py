"""CLI commands for ipset set management.

Provides a command-line interface for listing sets and adding or removing
members.
"""

import argparse
import json
import logging
import sys

from ipset_client.client import IpsetClient
from ipset_client.exceptions import IpsetError
from ipset_client.settings import IpsetSettings, get_ipset_settings


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for CLI output.

    Args:
        verbose: Enable debug logging.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_client(args: argparse.Namespace) -> IpsetClient:
    """Create a client, applying command-line overrides to the settings.

    Raises:
        ValueError: If the ``--command`` override is blank.
    """
    settings: IpsetSettings = get_ipset_settings()
    if args.command_path is not None:
        command = args.command_path.strip()
        if not command:
            msg = "--command must not be empty"
            raise ValueError(msg)
        settings = settings.model_copy(update={"ipset_command": command})
    return IpsetClient(settings=settings)


def cmd_list(args: argparse.Namespace) -> int:
    """Show a set and its members.

    Args:
        args: Parsed command line arguments.

    Returns:
        Exit code.
    """
    client = build_client(args)
    description = client.get_set(args.name)

    if args.json:
        print(json.dumps(description.to_dict(), indent=2))
    else:
        print(f"Name: {description.name}")
        print(f"Type: {description.type.value}")
        print(f"Revision: {description.revision}")
        print(f"Header: {description.header}")
        print(f"Size in memory: {description.size_in_memory}")
        print(f"References: {description.reference_count}")
        print(f"Members ({len(description.members)}):")
        for member in sorted(description.members):
            print(f"  {member}")

    return 0


def cmd_add(args: argparse.Namespace) -> int:
    """Add a member to a set.

    Args:
        args: Parsed command line arguments.

    Returns:
        Exit code.
    """
    client = build_client(args)

    if args.exist:
        added = client.ensure_member(args.set_name, args.member)
        if not added:
            print(f"✓ {args.member} already in {args.set_name}")
            return 0
    else:
        client.add_member(args.set_name, args.member)

    print(f"✓ Added {args.member} to {args.set_name}")
    return 0


def cmd_del(args: argparse.Namespace) -> int:
    """Remove a member from a set.

    Args:
        args: Parsed command line arguments.

    Returns:
        Exit code.
    """
    client = build_client(args)

    if args.exist:
        removed = client.discard_member(args.set_name, args.member)
        if not removed:
            print(f"✓ {args.member} not in {args.set_name}")
            return 0
    else:
        client.remove_member(args.set_name, args.member)

    print(f"✓ Removed {args.member} from {args.set_name}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command line arguments.

    Returns:
        Exit code.
    """
    parser = argparse.ArgumentParser(
        description="Query and update ipset sets",
        prog="ipset-client",
    )
    parser.add_argument(
        "--command",
        dest="command_path",
        help="ipset executable to run (default: IPSET_COMMAND or 'ipset')",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(dest="subcommand", required=True)

    # List command
    list_parser = subparsers.add_parser("list", help="Show a set and its members")
    list_parser.add_argument("name", help="Set name")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")
    list_parser.set_defaults(func=cmd_list)

    # Add command
    add_parser = subparsers.add_parser("add", help="Add a member to a set")
    add_parser.add_argument("set_name", help="Set name")
    add_parser.add_argument("member", help="Address to add")
    add_parser.add_argument(
        "--exist",
        action="store_true",
        help="Do not fail if the member is already in the set",
    )
    add_parser.set_defaults(func=cmd_add)

    # Del command
    del_parser = subparsers.add_parser("del", help="Remove a member from a set")
    del_parser.add_argument("set_name", help="Set name")
    del_parser.add_argument("member", help="Address to remove")
    del_parser.add_argument(
        "--exist",
        action="store_true",
        help="Do not fail if the member is not in the set",
    )
    del_parser.set_defaults(func=cmd_del)

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        return args.func(args)
    except IpsetError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
