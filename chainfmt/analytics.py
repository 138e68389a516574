"""
Price change and sampling utilities.
"""

import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def percent_change(base_price: float, current_price: float) -> float:
    """
    Percentage change from base_price to current_price.

    Returns 0.0 when the base price is zero.
    """
    if not base_price:
        return 0.0
    return (current_price - base_price) / base_price * 100


def random_sample(
    items: Sequence[T], count: int, rng: Optional[random.Random] = None
) -> List[T]:
    """
    Pick up to ``count`` distinct items in random order.

    Args:
        items: Source items (left untouched).
        count: How many to pick; capped at len(items).
        rng: Optional random generator, for reproducible picks.

    Returns:
        List of picked items.
    """
    if count <= 0 or not items:
        return []
    rng = rng or random
    return rng.sample(list(items), min(count, len(items)))
