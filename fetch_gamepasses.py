# fetch_gamepasses.py
"""
Fetch the game passes a user created and print them, without starting the server.

Usage:
    python fetch_gamepasses.py 123456
"""

import logging
import sys

from gamepass_relay.api.gamepasses import InvalidUserIdError, parse_user_id
from gamepass_relay.config import get_settings
from gamepass_relay.upstream.inventory import fetch_created_gamepasses

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        print("usage: fetch_gamepasses.py <user_id>", file=sys.stderr)
        return 2

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        user_id = parse_user_id(argv[0])
    except InvalidUserIdError as e:
        logger.error("%s", e)
        return 2

    result = fetch_created_gamepasses(user_id, settings=settings)

    for asset_id in result.asset_ids:
        print(asset_id)

    print(f"Game passes found:     {len(result.records)}", file=sys.stderr)
    print(f"Complete:              {'yes' if result.complete else 'no'}", file=sys.stderr)
    if result.error:
        print(f"Stopped early:         {result.error}", file=sys.stderr)

    return 0 if result.complete else 1


if __name__ == "__main__":
    sys.exit(main())
