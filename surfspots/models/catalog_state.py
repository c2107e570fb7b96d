"""Immutable snapshot of the catalog store."""
from typing import Optional, Tuple

from attrs import field, frozen

from surfspots.schemas.spot import Difficulty, SurfSpot


@frozen
class CatalogState:
    """What the presentation layer renders."""

    all_spots: Tuple[SurfSpot, ...] = field(default=(), converter=tuple)
    visible_spots: Tuple[SurfSpot, ...] = field(default=(), converter=tuple)
    is_loading: bool = False
    error_message: Optional[str] = None
    difficulty: Optional[Difficulty] = None
    selected_spot_id: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """Check if the catalog has been populated."""
        return len(self.all_spots) == 0

    @property
    def selected_spot(self) -> Optional[SurfSpot]:
        """The selected spot as it currently stands in the catalog."""
        if self.selected_spot_id is None:
            return None
        for spot in self.all_spots:
            if spot.spot_id == self.selected_spot_id:
                return spot
        return None
