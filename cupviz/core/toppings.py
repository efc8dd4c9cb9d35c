"""Topping classification"""
import logging
from typing import Dict, Iterable, List, Optional

from cupviz.core.state import ToppingBuckets

logger = logging.getLogger(__name__)

# Checked in order; the first bucket with a matching keyword wins
TOPPING_KEYWORDS = (
    ('milk', ['milk', 'cream']),
    ('syrup', ['syrup', 'sweetener', 'sugar']),
    ('powder', ['powder', 'cinnamon', 'cocoa', 'spice'])
)

def bucket_for(topping: str) -> Optional[str]:
    """Name of the layer bucket a topping belongs to, None for decorations"""
    name = topping.lower()
    for bucket, keywords in TOPPING_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return bucket
    return None

def classify_toppings(toppings: Iterable[str]) -> ToppingBuckets:
    """Split toppings into milk, syrup, powder and other, keeping their order"""
    buckets: Dict[str, List[str]] = {'milk': [], 'syrup': [], 'powder': [], 'other': []}
    for topping in toppings:
        buckets[bucket_for(topping) or 'other'].append(topping)

    logger.debug(f"Classified toppings: {buckets}")
    return ToppingBuckets(
        milk=tuple(buckets['milk']),
        syrup=tuple(buckets['syrup']),
        powder=tuple(buckets['powder']),
        other=tuple(buckets['other'])
    )
