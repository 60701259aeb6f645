"""
Domain models for Player Feed.

Defines the player record sent to the auction server. Python attribute names
are snake_case; the aliases are the JSON keys the server expects.
"""
from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field

Nationality = Literal["Indian", "Foreign"]


class PlayerRecord(BaseModel):
    """
    Normalized representation of one spreadsheet row.
    """

    name: str = Field(..., alias="playerName", description="Display name, column 0 verbatim.")
    identifier: str = Field(..., alias="playerId", description="Generated PL#### identifier.")
    rating: float = Field(0.0, alias="rating", description="Score from column 1.")
    purchased_at: Optional[Any] = Field(
        None, alias="boughtAt", description="Purchase marker; always null on creation."
    )
    base_price: int = Field(0, alias="basePrice", description="Base price from column 5.")
    pool: str = Field("", alias="pocket", description="Pool code with the P prefix stripped.")
    nationality: Nationality = Field(..., alias="nationality")
    role: str = Field("", alias="role", description="Playing role, column 3 verbatim.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    def to_payload(self) -> Dict[str, Any]:
        """Wire representation, keyed by the server's field names."""
        return self.model_dump(by_alias=True)

    def audit_entry(self) -> Dict[str, str]:
        return {"playerName": self.name, "playerId": self.identifier}


__all__ = ["Nationality", "PlayerRecord"]
