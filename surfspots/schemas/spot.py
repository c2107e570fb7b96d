"""Pydantic schemas for surf spots and their conditions."""
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict


class Difficulty(str, Enum):
    """Difficulty rating of a surf spot."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"

    @property
    def label(self) -> str:
        return self.value

    @property
    def color(self) -> str:
        return _DIFFICULTY_COLORS[self]

    @property
    def icon(self) -> str:
        return _DIFFICULTY_ICONS[self]


_DIFFICULTY_COLORS = {
    Difficulty.BEGINNER: "green",
    Difficulty.INTERMEDIATE: "yellow",
    Difficulty.ADVANCED: "orange",
    Difficulty.EXPERT: "red",
}

_DIFFICULTY_ICONS = {
    Difficulty.BEGINNER: "1.circle.fill",
    Difficulty.INTERMEDIATE: "2.circle.fill",
    Difficulty.ADVANCED: "3.circle.fill",
    Difficulty.EXPERT: "4.circle.fill",
}


class TideType(str, Enum):
    """Phase of the tide."""

    LOW = "Low"
    RISING = "Rising"
    HIGH = "High"
    FALLING = "Falling"

    @property
    def icon(self) -> str:
        return _TIDE_ICONS[self]


_TIDE_ICONS = {
    TideType.LOW: "arrow.down.circle",
    TideType.RISING: "arrow.up.circle",
    TideType.HIGH: "arrow.up.circle.fill",
    TideType.FALLING: "arrow.down.circle.fill",
}


class SurfConditions(BaseModel):
    """Snapshot of the conditions at a spot."""

    model_config = ConfigDict(frozen=True)

    wave_height: float  # feet
    wind_speed: float  # mph
    wind_direction: str
    tide: TideType
    water_temperature: float  # Fahrenheit
    air_temperature: float  # Fahrenheit
    swell_direction: str
    swell_period: int  # seconds

    @property
    def is_good_for_surfing(self) -> bool:
        """Rideable waves, light wind and a long enough swell period."""
        return (
            2.0 <= self.wave_height <= 12.0
            and self.wind_speed <= 15.0
            and self.swell_period >= 8
        )


class SurfSpot(BaseModel):
    """A surf spot with its current conditions."""

    model_config = ConfigDict(frozen=True)

    spot_id: str
    name: str
    latitude: float
    longitude: float
    description: str
    difficulty: Difficulty
    current_conditions: Optional[SurfConditions] = None

    @property
    def location(self) -> Tuple[float, float]:
        """(latitude, longitude) in degrees."""
        return (self.latitude, self.longitude)

    @property
    def coordinate_label(self) -> str:
        return f"{self.latitude:.4f}, {self.longitude:.4f}"

    def updating_conditions(self, conditions: SurfConditions) -> "SurfSpot":
        """Return a copy of this spot with the conditions replaced."""
        return self.model_copy(update={"current_conditions": conditions})
