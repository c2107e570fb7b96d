"""Filtering and text search over the spot catalog."""
from typing import Optional, Sequence, Tuple

import numpy as np

from surfspots.schemas.filters import SpotFilterParams
from surfspots.schemas.spot import Difficulty, SurfSpot


class SpotIndex:
    """Parallel arrays over a catalog for mask-based filtering."""

    def __init__(self, spots: Sequence[SurfSpot] = ()):
        self.spots: Tuple[SurfSpot, ...] = tuple(spots)

        self._difficulties = np.array([s.difficulty.value for s in self.spots], dtype=object)
        self._names_folded = [s.name.casefold() for s in self.spots]
        self._descriptions_folded = [s.description.casefold() for s in self.spots]

    def __len__(self) -> int:
        return len(self.spots)

    def get_difficulty_mask(self, difficulty: Optional[Difficulty]) -> np.ndarray:
        """Get boolean mask for spots with a difficulty (None matches all)."""
        if difficulty is None:
            return np.ones(len(self.spots), dtype=bool)
        return np.asarray(self._difficulties == difficulty.value, dtype=bool)

    def get_text_mask(self, query: str) -> np.ndarray:
        """Get boolean mask for spots whose name or description contains query (case-insensitive)."""
        needle = query.casefold()
        return np.array(
            [
                needle in name or needle in description
                for name, description in zip(self._names_folded, self._descriptions_folded)
            ],
            dtype=bool,
        )

    def select(self, params: SpotFilterParams) -> Tuple[SurfSpot, ...]:
        """
        Apply difficulty and query to the catalog.

        Search is intersected with the difficulty filter, never the other way
        round. Results keep catalog order.
        """
        mask = self.get_difficulty_mask(params.difficulty)
        if params.query:
            mask &= self.get_text_mask(params.query)

        return tuple(self.spots[i] for i in np.where(mask)[0])


def filter_spots(spots: Sequence[SurfSpot], difficulty: Optional[Difficulty]) -> Tuple[SurfSpot, ...]:
    """Spots with the given difficulty, or all of them when difficulty is None."""
    return SpotIndex(spots).select(SpotFilterParams(difficulty=difficulty))


def search_spots(
    spots: Sequence[SurfSpot],
    query: str,
    difficulty: Optional[Difficulty] = None,
) -> Tuple[SurfSpot, ...]:
    """Spots matching query by name or description, within the difficulty filter."""
    return SpotIndex(spots).select(SpotFilterParams(difficulty=difficulty, query=query))
