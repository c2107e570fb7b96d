"""Tests for spot filtering and search."""
import pytest

from surfspots.data.spot_repository import SpotRepository
from surfspots.schemas.filters import SpotFilterParams
from surfspots.schemas.spot import Difficulty
from surfspots.services.conditions_generator import ConditionsGenerator
from surfspots.services.spot_filter import SpotIndex, filter_spots, search_spots


@pytest.fixture
def catalog():
    return SpotRepository(ConditionsGenerator(seed=0)).fetch_spots()


def names(spots):
    return [s.name for s in spots]


class TestFilterSpots:
    """Tests for difficulty filtering."""

    @pytest.mark.parametrize("difficulty", list(Difficulty))
    def test_filter_is_exact_ordered_subset(self, catalog, difficulty):
        """Test every difficulty yields exactly its spots in catalog order."""
        result = filter_spots(catalog, difficulty)

        assert all(s.difficulty == difficulty for s in result)
        assert list(result) == [s for s in catalog if s.difficulty == difficulty]

    def test_expert(self, catalog):
        """Test expert filter gives Pipeline then Mavericks."""
        assert names(filter_spots(catalog, Difficulty.EXPERT)) == ["Pipeline", "Mavericks"]

    def test_none_returns_full_catalog(self, catalog):
        """Test no filter keeps every spot in order."""
        assert list(filter_spots(catalog, None)) == catalog

    def test_empty_catalog(self):
        """Test filtering an empty catalog gives an empty result."""
        assert filter_spots([], Difficulty.BEGINNER) == ()
        assert filter_spots([], None) == ()


class TestSearchSpots:
    """Tests for text search."""

    def test_matches_name_case_insensitively(self, catalog):
        """Test name matching ignores case."""
        assert names(search_spots(catalog, "MALIBU")) == ["Malibu"]

    def test_matches_description(self, catalog):
        """Test description text is searched too."""
        assert names(search_spots(catalog, "beginners")) == ["Waikiki Beach"]

    def test_matches_several_in_order(self, catalog):
        """Test multiple hits keep catalog order."""
        # "wave" appears in Pipeline, Waikiki, Mavericks, Malibu and Trestles descriptions
        assert names(search_spots(catalog, "wave")) == [
            "Pipeline", "Waikiki Beach", "Mavericks", "Malibu", "Trestles",
        ]

    def test_intersects_with_difficulty(self, catalog):
        """Test search results are limited to the active difficulty."""
        assert names(search_spots(catalog, "wave", Difficulty.EXPERT)) == ["Pipeline", "Mavericks"]
        assert search_spots(catalog, "malibu", Difficulty.EXPERT) == ()

    def test_empty_query_falls_back_to_filter(self, catalog):
        """Test an empty query returns the filter result."""
        assert search_spots(catalog, "", Difficulty.BEGINNER) == filter_spots(catalog, Difficulty.BEGINNER)
        assert list(search_spots(catalog, "")) == catalog

    def test_no_match(self, catalog):
        """Test a query matching nothing gives an empty result."""
        assert search_spots(catalog, "Uluwatu") == ()


class TestSpotIndex:
    """Tests for SpotIndex masks."""

    def test_masks(self, catalog):
        """Test masks line up with the catalog."""
        index = SpotIndex(catalog)

        assert index.get_difficulty_mask(Difficulty.EXPERT).tolist() == [True, False, True, False, False]
        assert index.get_text_mask("point break").tolist() == [False, False, False, True, False]
        assert index.get_difficulty_mask(None).all()

    def test_select_with_params(self, catalog):
        """Test select applies both difficulty and query."""
        index = SpotIndex(catalog)
        params = SpotFilterParams(difficulty=Difficulty.ADVANCED, query="sections")

        assert names(index.select(params)) == ["Trestles"]
        assert len(index) == 5
