import pytest

from src.pathfinding.candidates import Candidate, CandidateQueue

from src.itinerary_search.schemas.segment import Segment


def leg(segment_id, origin, destination, departure, arrival, price=None):
    return Segment(
        segment_id=segment_id,
        origin=origin,
        destination=destination,
        quantity=1,
        departure=departure,
        arrival=arrival,
        price=price,
    )


# -------------------------
# Candidate
# -------------------------

def test_seed_and_extend():
    first = Candidate.seed(leg("AB", "A", "B", 100, 200, 40))
    path = first.extend(leg("BC", "B", "C", 250, 400, 60))

    assert len(first) == 1
    assert len(path) == 2
    assert path.total_price == 100.0
    assert path.duration == 300
    assert path.first_departure == 100
    assert path.last_arrival == 400
    assert path.last_leg.segment_id == "BC"


def test_extend_does_not_mutate():
    first = Candidate.seed(leg("AB", "A", "B", 100, 200, 40))
    first.extend(leg("BC", "B", "C", 250, 400, 60))
    assert len(first) == 1
    assert first.total_price == 40.0


def test_missing_price_counts_as_zero():
    path = Candidate.seed(leg("AB", "A", "B", 0, 10)).extend(leg("BC", "B", "C", 20, 30, 5))
    assert path.total_price == 5.0


def test_contains_and_visits():
    path = Candidate.seed(leg("AB", "A", "B", 0, 10)).extend(leg("BC", "B", "C", 20, 30))

    assert path.contains("AB")
    assert not path.contains("CA")
    assert path.visits("B")
    assert path.visits("C")
    # the origin is departed from, not landed in
    assert not path.visits("A")


# -------------------------
# CandidateQueue
# -------------------------

def test_queue_orders_by_duration_then_price():
    pq = CandidateQueue()
    slow = Candidate.seed(leg("S", "A", "B", 0, 500, 1))
    fast_dear = Candidate.seed(leg("FD", "A", "B", 0, 100, 90))
    fast_cheap = Candidate.seed(leg("FC", "A", "B", 0, 100, 10))

    for c in (slow, fast_dear, fast_cheap):
        pq.push(c)

    assert len(pq) == 3
    assert [pq.pop().last_leg.segment_id for _ in range(3)] == ["FC", "FD", "S"]
    assert not pq


def test_queue_ties_pop_in_insertion_order():
    pq = CandidateQueue()
    for sid in ("first", "second", "third"):
        pq.push(Candidate.seed(leg(sid, "A", "B", 0, 100, 10)))

    assert [pq.pop().last_leg.segment_id for _ in range(3)] == ["first", "second", "third"]


def test_pop_empty_queue_raises():
    with pytest.raises(IndexError):
        CandidateQueue().pop()
