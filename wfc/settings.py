from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from .solver import MAX_RECURSION_DEPTH


@dataclass
class SolverSettings:
    """Everything needed to set up and run one solve."""

    width: int = 8
    height: int = 8
    periodic: bool = False
    use_seed: bool = True
    random_seed: int = 42
    # ratio of pure random to weighted random picks, where 1 is pure random
    random_ratio: float = 0.0
    allow_imperfect: bool = False
    max_depth: int = MAX_RECURSION_DEPTH
    # None lets the solve run until it finishes
    max_steps: Optional[int] = None

    @property
    def seed(self) -> Optional[int]:
        return self.random_seed if self.use_seed else None

    @property
    def size(self):
        return self.width, self.height

    def validate(self) -> "SolverSettings":
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Grid size must be at least 1x1 (got {self.width}x{self.height})")
        if not 0.0 <= self.random_ratio <= 1.0:
            raise ValueError(f"random_ratio must be within [0, 1] (got {self.random_ratio})")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must not be negative (got {self.max_depth})")
        if self.max_steps is not None and self.max_steps < 0:
            raise ValueError(f"max_steps must not be negative (got {self.max_steps})")
        return self

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SolverSettings":
        '''
        Builds settings from a mapping, keys that are not settings are ignored
        '''
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known}).validate()
