"""Filter switches for a sieve run."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List


@dataclass(frozen=True)
class FilterConfig:
    """Which classes of primes are sent to the sink.

    Enabled filters are combined with AND. With none enabled every prime
    is accepted.
    """
    only_super: bool = False
    only_happy: bool = False
    only_sexy: bool = False

    def enabled(self) -> List[str]:
        names = []
        if self.only_super:
            names.append("super")
        if self.only_happy:
            names.append("happy")
        if self.only_sexy:
            names.append("sexy")
        return names

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'FilterConfig':
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})
