"""
Tests for the inventory adapters.

Both implementations are run through the same contract tests, then the
SQLite-specific failure paths are covered separately.
"""

import sqlite3
from concurrent.futures import ThreadPoolExecutor

import pandas as pd
import pytest

from src.itinerary_search.adapters.data_providers import (
    InMemoryInventoryRepository,
    SqliteInventoryRepository,
)
from src.itinerary_search.adapters.data_providers.sqlite_inventory import (
    build_segment_query,
)
from src.itinerary_search.exceptions import RepositoryError
from src.itinerary_search.ports.inventory_repository import InventoryRepository
from src.itinerary_search.schemas.segment import SEGMENT_COLUMNS, Segment, SegmentFilter


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def catalogue(make_segment):
    return [
        make_segment("s1", "Moscow", "Samara", 1000, 2000, 100.0, quantity=5),
        make_segment("s2", "Samara", "Kazan", 3000, 4000, None, quantity=1),
        make_segment("s3", "Moscow", "Kazan", 1500, 9000, 250.0, quantity=0),
        make_segment("s4", "Moscow", "Kazan", None, 9500, 80.0, quantity=3),
    ]


@pytest.fixture(params=["memory", "sqlite"])
def repository(request, catalogue, tmp_path):
    if request.param == "memory":
        repo = InMemoryInventoryRepository(catalogue)
    else:
        repo = SqliteInventoryRepository(db_path=tmp_path / "segments.db")
        repo.add_segments(catalogue)
    yield repo
    repo.close()


def ids(df: pd.DataFrame):
    return sorted(df["segment_id"])


# =============================================================================
# CONTRACT
# =============================================================================


class TestInventoryContract:
    def test_is_inventory_repository(self, repository):
        assert isinstance(repository, InventoryRepository)

    def test_default_filter_skips_sold_out(self, repository):
        df = repository.find_segments(SegmentFilter())
        assert ids(df) == ["s1", "s2", "s4"]

    def test_returns_schema_columns(self, repository):
        df = repository.find_segments(SegmentFilter())
        assert set(SEGMENT_COLUMNS) <= set(df.columns)

    def test_min_quantity(self, repository):
        assert ids(repository.find_segments(SegmentFilter(min_quantity=3))) == ["s1", "s4"]
        assert ids(repository.find_segments(SegmentFilter(min_quantity=0))) == [
            "s1",
            "s2",
            "s3",
            "s4",
        ]

    def test_city_pair(self, repository):
        df = repository.find_segments(
            SegmentFilter(origin="Moscow", destination="Kazan", min_quantity=0)
        )
        assert ids(df) == ["s3", "s4"]

    def test_departure_window_is_inclusive(self, repository):
        df = repository.find_segments(
            SegmentFilter(departure_from=1000, departure_until=3000)
        )
        assert ids(df) == ["s1", "s2"]

    def test_segment_id(self, repository):
        assert ids(repository.find_segments(SegmentFilter(segment_id="s2"))) == ["s2"]

    def test_no_match_returns_empty_frame(self, repository):
        df = repository.find_segments(SegmentFilter(min_quantity=100))
        assert df.empty
        assert set(SEGMENT_COLUMNS) <= set(df.columns)

    def test_nullable_columns_survive(self, repository):
        df = repository.find_segments(SegmentFilter()).set_index("segment_id")
        assert pd.isna(df.loc["s2", "price"])
        assert pd.isna(df.loc["s4", "departure"])

    def test_get_segment(self, repository, catalogue):
        assert repository.get_segment("s1") == catalogue[0]
        assert repository.get_segment("s4") == catalogue[3]
        assert repository.get_segment("missing") is None

    def test_decrement_seats(self, repository):
        assert repository.decrement_seats("s1", 2) is True
        assert repository.get_segment("s1").quantity == 3

    def test_decrement_to_zero(self, repository):
        assert repository.decrement_seats("s1", 5) is True
        assert repository.get_segment("s1").quantity == 0

    def test_decrement_refuses_oversell(self, repository):
        assert repository.decrement_seats("s1", 6) is False
        assert repository.get_segment("s1").quantity == 5

    def test_decrement_unknown_segment(self, repository):
        assert repository.decrement_seats("missing", 1) is False

    def test_concurrent_decrements_never_oversell(self, repository):
        # 5 seats, 20 buyers of one seat each
        with ThreadPoolExecutor(max_workers=8) as pool:
            outcomes = list(pool.map(lambda _: repository.decrement_seats("s1", 1), range(20)))

        assert outcomes.count(True) == 5
        assert repository.get_segment("s1").quantity == 0


# =============================================================================
# IN-MEMORY
# =============================================================================


class TestInMemoryInventory:
    def test_name_and_len(self, catalogue):
        repo = InMemoryInventoryRepository(catalogue)
        assert repo.name == "In-Memory"
        assert len(repo) == 4

    def test_duplicate_ids_rejected(self, catalogue):
        repo = InMemoryInventoryRepository(catalogue)
        with pytest.raises(ValueError, match="Duplicate"):
            repo.add_segments(catalogue[:1])


# =============================================================================
# SQLITE
# =============================================================================


class TestSqliteInventory:
    def test_name(self):
        assert SqliteInventoryRepository().name == "SQLite"

    def test_persists_across_connections(self, tmp_path, catalogue):
        db_path = tmp_path / "nested" / "segments.db"
        writer = SqliteInventoryRepository(db_path=db_path)
        writer.add_segments(catalogue)
        writer.decrement_seats("s1", 1)
        writer.close()

        reader = SqliteInventoryRepository(db_path=db_path)
        assert reader.get_segment("s1").quantity == 4
        reader.close()

    def test_duplicate_ids_raise_repository_error(self, catalogue):
        repo = SqliteInventoryRepository()
        repo.add_segments(catalogue)
        with pytest.raises(RepositoryError):
            repo.add_segments(catalogue[:1])

    def test_invalid_times_rejected_by_table(self):
        repo = SqliteInventoryRepository()
        conn = repo._get_connection()
        with pytest.raises(sqlite3.IntegrityError):
            conn.execute(
                "INSERT INTO segments VALUES ('bad', 'A', 'B', 1, 1.0, 500, 100)"
            )

    def test_broken_table_raises_repository_error(self, tmp_path):
        db_path = tmp_path / "broken.db"
        conn = sqlite3.connect(db_path)
        conn.execute("CREATE TABLE segments (segment_id TEXT)")
        conn.commit()
        conn.close()

        repo = SqliteInventoryRepository(db_path=db_path)
        with pytest.raises(RepositoryError):
            repo.find_segments(SegmentFilter())
        repo.close()

    @pytest.mark.parametrize("table_name", ["", "segments; DROP TABLE x", "1abc"])
    def test_invalid_table_name(self, table_name):
        with pytest.raises(ValueError):
            SqliteInventoryRepository(table_name=table_name)

    def test_close_is_idempotent(self):
        repo = SqliteInventoryRepository()
        repo.get_segment("anything")
        repo.close()
        repo.close()


@pytest.mark.parametrize(
    "segment_filter,expected_sql,expected_params",
    [
        (
            SegmentFilter(),
            "WHERE quantity >= ?",
            [1],
        ),
        (
            SegmentFilter(origin="A", destination="B", min_quantity=2),
            "WHERE quantity >= ? AND origin = ? AND destination = ?",
            [2, "A", "B"],
        ),
        (
            SegmentFilter(departure_from=10, departure_until=20, segment_id="x"),
            "WHERE quantity >= ? AND segment_id = ? AND departure >= ? AND departure <= ?",
            [1, "x", 10, 20],
        ),
    ],
)
def test_build_segment_query(segment_filter, expected_sql, expected_params):
    query, params = build_segment_query("segments", segment_filter)
    assert query.endswith(expected_sql)
    assert params == expected_params
