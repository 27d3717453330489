"""
Seed-set expansion sampling of review pairs.

A sample is drawn in two steps: pick a random set of entities (reviewers
and products alike), then keep every review that touches one of them.
The number of returned pairs therefore depends on how active the drawn
entities are, it is not a fixed-size edge sample.
"""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Sequence, Set, Tuple, Union

from sixdegrees.reviews import Review

Pair = Tuple[str, str]
Record = Union[Review, Pair]


def _as_pair(record: Record) -> Pair:
    if isinstance(record, Review):
        return record.as_pair()
    reviewer_id, asin = record
    return (reviewer_id, asin)


def unique_entities(records: Iterable[Record]) -> List[str]:
    """Distinct entity ids over both endpoints, in first-seen order."""
    seen: Set[str] = set()
    entities: List[str] = []
    for record in records:
        for entity in _as_pair(record):
            if entity not in seen:
                seen.add(entity)
                entities.append(entity)
    return entities


class ReviewSampler:
    """Draws independent seed-set samples from a fixed record set.

    The sampler owns its random generator. Successive calls to `sample`
    advance the same generator, so two calls on the same records are
    independent draws, and a seeded sampler replays the same sequence.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        if rng is not None and seed is not None:
            raise ValueError("Pass either seed or rng, not both")
        self.rng = rng if rng is not None else random.Random(seed)

    def sample_entities(self, records: Sequence[Record], target_size: int) -> Set[str]:
        if target_size < 0:
            raise ValueError(f"target_size must be non-negative, got {target_size}")
        population = unique_entities(records)
        return set(self.rng.sample(population, min(target_size, len(population))))

    def sample(self, records: Sequence[Record], target_size: int) -> List[Pair]:
        """Sample review pairs by seed-set expansion.

        Args:
            records: Reviews or (reviewer_id, asin) tuples.
            target_size: Number of entities to draw. Capped at the number of
                distinct entities in `records`.

        Returns:
            Every record pair, in input order, with at least one endpoint in
            the drawn entity set.
        """
        seeds = self.sample_entities(records, target_size)
        pairs = [_as_pair(r) for r in records]
        return [(u, v) for u, v in pairs if u in seeds or v in seeds]


def sample_reviews(
    records: Sequence[Record],
    target_size: int,
    rng: Optional[random.Random] = None,
) -> List[Pair]:
    """One-off sample with a fresh (or the given) generator."""
    return ReviewSampler(rng=rng).sample(records, target_size)
