"""
Weighted random selection
"""
import random
from typing import Any, Iterable, Tuple

from scenarios.errors import ReferenceDataError


def weighted_choice(weights: Iterable[Tuple[Any, int]], rng: random.Random) -> Any:
    """
    Pick one label with probability weight / sum(weights)

    Args:
        weights: Ordered (label, weight) pairs with positive integer weights
        rng: Random source

    Returns:
        The selected label
    """
    weights = list(weights)
    if not weights:
        raise ReferenceDataError("Weighted selection requires at least one entry")

    cumulative_weights = []
    total = 0
    for label, weight in weights:
        if weight <= 0:
            raise ReferenceDataError(f"Weight for {label!r} must be positive, got {weight}")
        total += weight
        cumulative_weights.append(total)

    draw = rng.random() * total
    for (label, _), cumulative in zip(weights, cumulative_weights):
        if cumulative >= draw:
            return label

    # Only reachable through float rounding on the last bucket
    return weights[-1][0]
