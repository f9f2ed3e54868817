"""
Command-line interface for Steam Catalog.

Loads the demo catalog and prints the result of read operations as JSON.
"""

import json
import sys
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from steam_catalog.config import get_settings
from steam_catalog.demo import build_demo_system
from steam_catalog.logger import get_logger, setup_logging
from steam_catalog.system import SteamSystem, SteamSystemError

# Initialize logging
setup_logging()
logger = get_logger(__name__, component="cli")


class CLIOutput(BaseModel):
    """Structured output for CLI commands."""

    success: bool
    command: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    data: dict[str, Any] | list[Any] | None = None
    error: str | None = None
    error_code: str | None = None


class UsageError(Exception):
    """Raised when a command is called with missing or malformed arguments."""


def print_json(output: CLIOutput) -> None:
    """Print output as formatted JSON."""
    print(json.dumps(output.model_dump(mode="json"), indent=2))


def _dump(value: BaseModel | list[BaseModel]) -> dict[str, Any] | list[Any]:
    if isinstance(value, list):
        return [item.model_dump(mode="json") for item in value]
    return value.model_dump(mode="json")


def _arg(args: list[str], index: int, name: str) -> str:
    if len(args) <= index:
        raise UsageError(f"{name} required")
    return args[index]


def _page(args: list[str], index: int) -> int:
    if len(args) <= index:
        return 1
    try:
        return int(args[index])
    except ValueError:
        raise UsageError(f"page must be an integer, got '{args[index]}'") from None


def cmd_test_config(system: SteamSystem, args: list[str]) -> Any:
    """Show loaded configuration."""
    settings = get_settings()
    return {
        "environment": settings.environment,
        "page_size": settings.catalog.page_size,
        "recommended_limit": settings.catalog.recommended_limit,
        "demo_seed": settings.demo.seed,
        "log_level": settings.logging.level,
        "log_format": settings.logging.format,
    }


def cmd_games(system: SteamSystem, args: list[str]) -> Any:
    return _dump(system.get_games(_page(args, 0)))


def cmd_game(system: SteamSystem, args: list[str]) -> Any:
    return _dump(system.get_game(_arg(args, 0, "game_id")))


def cmd_tag_games(system: SteamSystem, args: list[str]) -> Any:
    return _dump(system.get_games_by_tag(_arg(args, 0, "tag_id"), _page(args, 1)))


def cmd_developer_games(system: SteamSystem, args: list[str]) -> Any:
    return _dump(system.get_games_by_developer(_arg(args, 0, "developer_id"), _page(args, 1)))


def cmd_search_games(system: SteamSystem, args: list[str]) -> Any:
    return _dump(system.search_game(_arg(args, 0, "name"), _page(args, 1)))


def cmd_search_users(system: SteamSystem, args: list[str]) -> Any:
    return _dump(system.search_user(_arg(args, 0, "name"), _page(args, 1)))


def cmd_user(system: SteamSystem, args: list[str]) -> Any:
    return _dump(system.get_user(_arg(args, 0, "user_id")))


def cmd_user_reviews(system: SteamSystem, args: list[str]) -> Any:
    return _dump(system.get_user_reviews(_arg(args, 0, "user_id")))


def cmd_recommended(system: SteamSystem, args: list[str]) -> Any:
    return _dump(system.get_recommended_games())


COMMANDS: dict[str, Callable[[SteamSystem, list[str]], Any]] = {
    "test-config": cmd_test_config,
    "games": cmd_games,
    "game": cmd_game,
    "tag-games": cmd_tag_games,
    "developer-games": cmd_developer_games,
    "search-games": cmd_search_games,
    "search-users": cmd_search_users,
    "user": cmd_user,
    "user-reviews": cmd_user_reviews,
    "recommended": cmd_recommended,
}


def print_usage() -> None:
    """Print CLI usage information."""
    usage = """
Steam Catalog CLI
=================

Usage: steam-catalog <command> [arguments]

Commands:
  test-config                          Show loaded configuration
  games [page]                         List catalog games
  game <game_id>                       Show a game
  tag-games <tag_id> [page]            List games with a tag
  developer-games <developer_id> [page]
                                       List games by a developer
  search-games <name> [page]           Search games by name
  search-users <name> [page]           Search users by name
  user <user_id>                       Show a user
  user-reviews <user_id>               List reviews written by a user
  recommended                          Top games by recommended reviews

Examples:
  steam-catalog search-games portal
  steam-catalog tag-games t_2 2
"""
    print(usage)


def run(argv: list[str]) -> int:
    """
    Run a single command against the demo catalog.

    Args:
        argv: Command name followed by its arguments

    Returns:
        Process exit status
    """
    if not argv or argv[0] in ("help", "--help", "-h"):
        print_usage()
        return 0 if argv else 1

    command, args = argv[0], argv[1:]
    handler = COMMANDS.get(command)
    if handler is None:
        print(f"Unknown command: {command}")
        print_usage()
        return 1

    try:
        data = handler(build_demo_system(), args)
    except UsageError as e:
        print(f"Error: {e}")
        return 1
    except SteamSystemError as e:
        logger.warning("Command rejected", command=command, error_code=e.code)
        print_json(CLIOutput(success=False, command=command, error=e.message, error_code=e.code))
        return 1

    print_json(CLIOutput(success=True, command=command, data=data))
    return 0


def main() -> None:
    """Main CLI entry point."""
    try:
        sys.exit(run(sys.argv[1:]))
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
