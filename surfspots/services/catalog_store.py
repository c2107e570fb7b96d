"""State container for the surf spot catalog."""
import asyncio
import logging
from typing import Callable, List, Optional

from attrs import evolve

from surfspots.config import settings
from surfspots.data.spot_repository import SpotRepository
from surfspots.errors import LoadFailure
from surfspots.models.catalog_state import CatalogState
from surfspots.schemas.filters import SpotFilterParams
from surfspots.schemas.spot import Difficulty, SurfSpot
from surfspots.services.spot_filter import SpotIndex

logger = logging.getLogger(__name__)

Listener = Callable[[CatalogState], None]


class CatalogStore:
    """
    Owns the catalog and the visible subset derived from it.

    Every change replaces the CatalogState snapshot and notifies
    subscribers with the new one. load() and refresh() are meant to be
    awaited one at a time.
    """

    def __init__(
        self,
        spot_repo: SpotRepository = None,
        load_delay: Optional[float] = None,
        refresh_delay: Optional[float] = None,
    ):
        """Initialize store with a repository and simulated latencies."""
        self.spot_repo = spot_repo or SpotRepository()
        self.load_delay = settings.load_delay_seconds if load_delay is None else load_delay
        self.refresh_delay = settings.refresh_delay_seconds if refresh_delay is None else refresh_delay

        self._state = CatalogState()
        self._index = SpotIndex()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> CatalogState:
        """Current snapshot."""
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, state: CatalogState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    def _visible(self, difficulty: Optional[Difficulty], query: str = ""):
        return self._index.select(SpotFilterParams(difficulty=difficulty, query=query))

    async def load(self) -> None:
        """
        Populate the catalog with the sample spots.

        On LoadFailure the catalog and visible list keep their previous
        values and error_message describes the failure.
        """
        self._publish(evolve(self._state, is_loading=True, error_message=None))

        try:
            await asyncio.sleep(self.load_delay)
            spots = self.spot_repo.fetch_spots()
        except LoadFailure as e:
            logger.warning("Loading surf spots failed: %s", e)
            self._publish(evolve(
                self._state,
                is_loading=False,
                error_message=f"Failed to load surf spots: {e}",
            ))
            return
        except BaseException:
            self._publish(evolve(self._state, is_loading=False))
            raise

        self._index = SpotIndex(spots)
        self._publish(evolve(
            self._state,
            all_spots=self._index.spots,
            visible_spots=self._visible(self._state.difficulty),
            is_loading=False,
        ))
        logger.info("Loaded %d surf spots", len(self._index))

    async def refresh(self) -> None:
        """Replace the conditions of every spot; no-op before the first load."""
        if self._state.is_empty:
            return

        self._publish(evolve(self._state, is_loading=True, error_message=None))

        try:
            await asyncio.sleep(self.refresh_delay)
            # Build the whole list first so a failure leaves nothing half-updated
            spots = [
                spot.updating_conditions(self.spot_repo.fetch_conditions(spot))
                for spot in self._state.all_spots
            ]
        except LoadFailure as e:
            logger.warning("Refreshing conditions failed: %s", e)
            self._publish(evolve(
                self._state,
                is_loading=False,
                error_message=f"Failed to refresh conditions: {e}",
            ))
            return
        except BaseException:
            self._publish(evolve(self._state, is_loading=False))
            raise

        self._index = SpotIndex(spots)
        self._publish(evolve(
            self._state,
            all_spots=self._index.spots,
            visible_spots=self._visible(self._state.difficulty),
            is_loading=False,
        ))
        logger.info("Refreshed conditions for %d surf spots", len(self._index))

    def filter_spots(self, difficulty: Optional[Difficulty]) -> None:
        """Set the active difficulty filter (None = all) and recompute the visible list."""
        self._publish(evolve(
            self._state,
            difficulty=difficulty,
            visible_spots=self._visible(difficulty),
        ))

    def search_spots(self, query: str) -> None:
        """Show spots matching query within the active filter; empty query resets to the filter."""
        self._publish(evolve(
            self._state,
            visible_spots=self._visible(self._state.difficulty, query),
        ))

    def select_spot(self, spot_id: Optional[str]) -> None:
        """Mark the spot the presentation layer is showing in detail."""
        if spot_id is not None and all(s.spot_id != spot_id for s in self._state.all_spots):
            raise KeyError(spot_id)
        self._publish(evolve(self._state, selected_spot_id=spot_id))

    def toggle_favorite(self, spot: SurfSpot) -> None:
        # TODO: persist favorites once a storage backend exists
        logger.info("Toggled favorite for %s", spot.name)

    def open_in_maps(self, spot: SurfSpot) -> None:
        logger.info("Open in maps requested for %s (%s)", spot.name, spot.coordinate_label)
