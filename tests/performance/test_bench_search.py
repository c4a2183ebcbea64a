"""
Search performance benchmarks.

Measures:
- Catalogue index construction from a wide snapshot
- Raw enumeration latency over a prebuilt index
- Full search request (fetch, index, enumerate, classify)
"""

from src.itinerary_search.adapters.repositories.catalogue_index import (
    build_catalogue_index,
)


class TestIndexing:
    def test_build_catalogue_index(self, benchmark, large_snapshot):
        index = benchmark(build_catalogue_index, large_snapshot)

        assert index.segment_count == len(large_snapshot)


class TestEnumerationLatency:
    def test_enumerate_direct(self, benchmark, search_index, enumerator):
        paths = benchmark.pedantic(
            enumerator.find_paths,
            kwargs={"index": search_index, "origin": "MOW", "destination": "KZN"},
            rounds=5,
            warmup_rounds=1,
        )

        durations = [p.duration for p in paths.accepted]
        assert durations == sorted(durations)

    def test_enumerate_with_transit(self, benchmark, search_index, enumerator):
        paths = benchmark.pedantic(
            enumerator.find_paths,
            kwargs={
                "index": search_index,
                "origin": "MOW",
                "destination": "KZN",
                "transit": "LED",
            },
            rounds=5,
            warmup_rounds=1,
        )

        assert all("LED" in p.cities[1:] for p in paths.accepted)


class TestFullSearch:
    def test_search_request(self, benchmark, search_service):
        result = benchmark.pedantic(
            search_service.search,
            kwargs={"origin": "MOW", "destination": "KZN", "sort_order": "asc"},
            rounds=5,
            warmup_rounds=1,
        )

        prices = [it.total_price for it in result.itineraries]
        assert prices == sorted(prices) or result.is_fallback
