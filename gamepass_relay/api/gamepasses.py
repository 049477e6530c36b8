# gamepass_relay/api/gamepasses.py

import logging
import re

from fastapi import APIRouter, Response

from gamepass_relay.models.gamepasses import ErrorOut, GamePassesOut
from gamepass_relay.upstream.inventory import fetch_created_gamepasses

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/gamepasses", tags=["gamepasses"])

MAX_USER_ID = 2**63 - 1
_DIGITS = re.compile(r"[0-9]+")

COMPLETE_HEADER = "X-Result-Complete"


class InvalidUserIdError(ValueError):
    def __init__(self, raw: str):
        super().__init__(f"invalid user id: {raw!r}")
        self.raw = raw


def parse_user_id(raw: str) -> int:
    """
    Parse a path segment as a non-negative decimal user ID.

    Only plain ASCII digits are accepted; signs, whitespace, decimals and
    values above MAX_USER_ID raise InvalidUserIdError.
    """
    if not _DIGITS.fullmatch(raw or ""):
        raise InvalidUserIdError(raw)

    user_id = int(raw)
    if user_id > MAX_USER_ID:
        raise InvalidUserIdError(raw)
    return user_id


@router.get(
    "/{user_id}",
    response_model=GamePassesOut,
    responses={400: {"model": ErrorOut}},
)
def list_created_gamepasses(user_id: str, response: Response) -> GamePassesOut:
    """
    Return the IDs of every game pass the user created, in inventory order.

    Upstream failures are not surfaced as errors: the list may be partial,
    which is reported only through the X-Result-Complete header.
    """
    parsed = parse_user_id(user_id)
    logger.info("Request received for User ID: %s", parsed)

    result = fetch_created_gamepasses(parsed)

    response.headers[COMPLETE_HEADER] = "true" if result.complete else "false"
    return GamePassesOut(game_pass_ids=result.asset_ids)


@router.get("/", include_in_schema=False)
def list_created_gamepasses_missing_id() -> GamePassesOut:
    raise InvalidUserIdError("")
