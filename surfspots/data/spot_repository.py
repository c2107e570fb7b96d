"""Repository for surf spot data access."""
from typing import List

from surfspots.config import settings
from surfspots.schemas.spot import Difficulty, SurfConditions, SurfSpot
from surfspots.services.conditions_generator import ConditionsGenerator
from surfspots.utils.geo_utils import generate_spot_id

SAMPLE_SPOTS = [
    {
        "name": "Pipeline",
        "latitude": 21.6628,
        "longitude": -158.0456,
        "description": "World-famous surf break known for its powerful waves and barrel sections.",
        "difficulty": Difficulty.EXPERT,
    },
    {
        "name": "Waikiki Beach",
        "latitude": 21.2789,
        "longitude": -157.8294,
        "description": "Perfect for beginners with gentle waves and warm water.",
        "difficulty": Difficulty.BEGINNER,
    },
    {
        "name": "Mavericks",
        "latitude": 37.4956,
        "longitude": -122.4995,
        "description": "Big wave surf spot that can reach heights of 60+ feet.",
        "difficulty": Difficulty.EXPERT,
    },
    {
        "name": "Malibu",
        "latitude": 34.0370,
        "longitude": -118.6780,
        "description": "Classic point break with long, peeling waves.",
        "difficulty": Difficulty.INTERMEDIATE,
    },
    {
        "name": "Trestles",
        "latitude": 33.3703,
        "longitude": -117.5680,
        "description": "High-performance wave with multiple sections.",
        "difficulty": Difficulty.ADVANCED,
    },
]


class SpotRepository:
    """
    Mock data source for surf spots.

    Serves the fixed sample catalog and synthesizes conditions with the
    generator. A real source would raise LoadFailure when a fetch fails.
    """

    def __init__(self, generator: ConditionsGenerator = None):
        """Initialize repository with a conditions generator."""
        self.generator = generator or ConditionsGenerator(seed=settings.random_seed)

    def fetch_spots(self) -> List[SurfSpot]:
        """Get all sample spots, each with freshly generated conditions."""
        return [
            SurfSpot(
                spot_id=generate_spot_id(row["name"], row["latitude"], row["longitude"]),
                name=row["name"],
                latitude=row["latitude"],
                longitude=row["longitude"],
                description=row["description"],
                difficulty=row["difficulty"],
                current_conditions=self.generator.generate(),
            )
            for row in SAMPLE_SPOTS
        ]

    def fetch_conditions(self, spot: SurfSpot) -> SurfConditions:
        """Get current conditions for a spot."""
        return self.generator.generate()
