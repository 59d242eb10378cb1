from dataclasses import asdict, dataclass, field
from typing import List, Optional, Union
from .specs import ALL_ALGORITHMS, Algorithm


@dataclass
class CheckConfig:
    algorithms: Union[Algorithm, List[Algorithm]] = field(default_factory=lambda: list(ALL_ALGORITHMS))
    sizes: List[int] = field(default_factory=lambda: [4, 7, 11, 13, 16])  # Number of vertices per sampled graph (cells for a_star)
    num_samples: int = 20                                   # Samples per algorithm and size
    seed: int = 42                                          # Random seed used for input generation

    # Sampler overrides, None keeps the per-algorithm default
    p: Optional[List[float]] = None                         # Edge (or obstacle) probabilities to draw from
    low: Optional[float] = None                             # Lowest edge weight
    high: Optional[float] = None                            # Highest edge weight

    def to_dict(self):
        return {k: v for k, v in asdict(self).items() if not k.startswith("_")}

    def __post_init__(self):
        if isinstance(self.algorithms, (str, Algorithm)):
            self.algorithms = [self.algorithms]
        self.algorithms = sorted(Algorithm(a) for a in self.algorithms)

        if not self.sizes or min(self.sizes) < 1:
            raise ValueError(f"Sizes must be positive, got {self.sizes}")
        if self.num_samples < 1:
            raise ValueError(f"num_samples must be positive, got {self.num_samples}")
        if self.low is not None and self.high is not None and self.low > self.high:
            raise ValueError(f"low ({self.low}) must not exceed high ({self.high})")

    def sampler_kwargs(self, size: int) -> dict:
        return {'length': size, 'p': self.p, 'low': self.low, 'high': self.high}
