from dataclasses import dataclass, field
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class WeightedItem:
    item: Any
    weight: float


@dataclass
class SamplingParams:
    seed: Optional[int] = None
    draws: int = 10000
    low: float = 0.0
    high: float = 1.0
    items: Tuple[str, ...] = field(default_factory=lambda: ("a", "b"))
    weights: Tuple[float, ...] = field(default_factory=lambda: (1.0, 3.0))
    bins: int = 20  # histogram bins for the uniform draws
