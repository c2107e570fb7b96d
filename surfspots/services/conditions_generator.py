"""Random generator for mock surf conditions."""
from typing import Optional

import numpy as np

from surfspots.schemas.spot import SurfConditions, TideType

WAVE_HEIGHTS = [2.0, 3.5, 5.0, 7.0, 9.0, 12.0]  # feet
WIND_SPEEDS = [5.0, 8.0, 12.0, 15.0, 20.0]  # mph
COMPASS_POINTS = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]
WATER_TEMPERATURES = [65.0, 68.0, 72.0, 75.0, 78.0, 82.0]  # Fahrenheit
SWELL_PERIODS = [8, 10, 12, 15, 18]  # seconds

# Air temperature = a drawn water temperature plus this offset range
AIR_TEMPERATURE_OFFSET = (2.0, 8.0)


class ConditionsGenerator:
    """
    Draws each condition field uniformly from a fixed candidate set.

    The random source is a numpy Generator so callers can pin the sequence,
    either by passing one in or by giving a seed.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ):
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def generate(self) -> SurfConditions:
        """Generate one conditions snapshot."""
        tides = list(TideType)
        low, high = AIR_TEMPERATURE_OFFSET
        return SurfConditions(
            wave_height=float(self.rng.choice(WAVE_HEIGHTS)),
            wind_speed=float(self.rng.choice(WIND_SPEEDS)),
            wind_direction=str(self.rng.choice(COMPASS_POINTS)),
            tide=tides[int(self.rng.integers(len(tides)))],
            water_temperature=float(self.rng.choice(WATER_TEMPERATURES)),
            air_temperature=float(self.rng.choice(WATER_TEMPERATURES)) + float(self.rng.uniform(low, high)),
            swell_direction=str(self.rng.choice(COMPASS_POINTS)),
            swell_period=int(self.rng.choice(SWELL_PERIODS)),
        )
