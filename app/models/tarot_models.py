# app/models/tarot_models.py
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Position(str, Enum):
    PAST = "Past"
    PRESENT = "Present"
    FUTURE = "Future"


SPREAD_POSITIONS = [Position.PAST, Position.PRESENT, Position.FUTURE]


class TarotCard(BaseModel):
    name: str
    image: Optional[str] = None
    reversed: bool = False
    position: Position


class ReadingContext(BaseModel):
    weekday: str
    month: str
    day: int
    time_of_day: str

    @property
    def formatted_date(self) -> str:
        return f"{self.weekday}, {self.month} {self.day}"


class TarotReadingResponse(BaseModel):
    cards: List[TarotCard] = Field(min_length=3, max_length=3)
    reading: str


class ErrorResponse(BaseModel):
    error: str
