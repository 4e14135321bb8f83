from __future__ import annotations
from typing import Optional
from pydantic import BaseModel

class Player(BaseModel):
    id: int
    name: str
    team: str
    position: str  # QB/WR/RB/TE/DST/K

class FbsTeam(BaseModel):
    name: str
    conference: Optional[str] = None
