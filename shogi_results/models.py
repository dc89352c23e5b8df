from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

Result = Literal["win", "lose", "win without playing", "lose without playing", "unknown"]

NO_PLAYER_ID = "n/a"


class Player(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str  # "n/a" when the cell has no player link
    name: str  # cell text as published, not trimmed
    result: Result = "unknown"


class Match(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    match_name: str = Field(default="", alias="matchName")
    begin_date: str = Field(alias="beginDate")  # YYYY/MM/DD
    end_date: str = Field(alias="endDate")  # YYYY/MM/DD
    first_player: Player = Field(alias="firstPlayer")
    second_player: Player = Field(alias="secondPlayer")
    note: str = ""

    def to_json(self) -> dict[str, Any]:
        """Serialized form written to the monthly JSON files; an empty note is dropped."""
        data = self.model_dump(by_alias=True)
        if not data["note"]:
            del data["note"]
        return data
