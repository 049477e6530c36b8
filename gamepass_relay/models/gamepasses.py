# gamepass_relay/models/gamepasses.py

from typing import List

from pydantic import BaseModel, Field

INVALID_USER_ID_MESSAGE = "Invalid User ID provided."


class GamePassesOut(BaseModel):
    success: bool = True
    game_pass_ids: List[int] = Field(default_factory=list, alias="gamePassIds")

    class Config:
        populate_by_name = True


class ErrorOut(BaseModel):
    success: bool = False
    error: str = INVALID_USER_ID_MESSAGE
