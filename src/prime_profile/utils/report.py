"""Summaries of sieve runs, saved as JSON.

A report records the bound, the filters, what was emitted and how long the
run took, so runs with different settings can be compared afterwards.
"""

import json
import time
from dataclasses import dataclass, asdict, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from prime_profile.config import FilterConfig
from prime_profile.core.reference import matches_reference
from prime_profile.core.sieve import sieve


@dataclass
class SieveReport:
    """Outcome of a single sieve run."""
    max_value: int
    filters: Dict[str, bool]
    prime_count: int
    emitted: List[int] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    verified: Optional[bool] = None
    created_at: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def emitted_count(self) -> int:
        return len(self.emitted)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d['emitted_count'] = self.emitted_count
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'SieveReport':
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})

    def save(self, path: Path) -> Path:
        """Write the report as JSON, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)
        return path

    @classmethod
    def load(cls, path: Path) -> 'SieveReport':
        with open(path) as f:
            return cls.from_dict(json.load(f))


def run_report(
    max_value: int,
    config: Optional[FilterConfig] = None,
    verify: bool = False,
    sink=None,
) -> SieveReport:
    """Run the sieve and summarise it.

    Args:
        max_value: Largest candidate to test (inclusive).
        config: Filter switches. Defaults to accepting every prime.
        verify: Compare the primes found against the reference sieve.
        sink: Optional extra callable receiving each emitted value.

    Returns:
        SieveReport for the run.
    """
    if config is None:
        config = FilterConfig()

    emitted: List[int] = []

    def record(value: int) -> None:
        emitted.append(value)
        if sink is not None:
            sink(value)

    start = time.perf_counter()
    primes = sieve(max_value, config, record)
    elapsed = time.perf_counter() - start

    verified = matches_reference(primes, max_value) if verify else None

    return SieveReport(
        max_value=max_value,
        filters=config.to_dict(),
        prime_count=len(primes),
        emitted=emitted,
        elapsed_seconds=elapsed,
        verified=verified,
    )
