"""
stats - Level distribution diagnostics

This module measures how elements spread across levels, either by sampling
a LevelGenerator directly or by reading the top level of every node in a
SkipList, and compares the result with the geometric distribution the
generator is meant to produce.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from skiplist_collections._config import validate_levels
from skiplist_collections._levels import LevelGenerator

if TYPE_CHECKING:
    from skiplist_collections._skiplist import SkipList


def expected_probabilities(max_levels: int) -> List[float]:
    """Probability of each level under geometric leveling.

    P(k) = 2^-(k+1) for k below the ceiling; the ceiling collects the
    remaining 2^-(M-1).
    """
    max_levels = validate_levels(max_levels)
    probs = [2.0 ** -(k + 1) for k in range(max_levels - 1)]
    probs.append(2.0 ** -(max_levels - 1))
    return probs


@dataclass
class LevelStats:
    """Observed level counts next to their expected share."""
    max_levels: int
    counts: List[int] = field(default_factory=list)
    source: str = "generator"

    def __post_init__(self) -> None:
        validate_levels(self.max_levels)
        if not self.counts:
            self.counts = [0] * self.max_levels
        elif len(self.counts) != self.max_levels:
            raise ValueError(
                f"counts has {len(self.counts)} entries, expected {self.max_levels}"
            )

    @property
    def total(self) -> int:
        return sum(self.counts)

    @property
    def observed(self) -> List[float]:
        """Observed share of each level."""
        total = self.total
        if total == 0:
            return [0.0] * self.max_levels
        return [count / total for count in self.counts]

    @property
    def expected(self) -> List[float]:
        return expected_probabilities(self.max_levels)

    @property
    def max_deviation(self) -> float:
        """Largest absolute gap between observed and expected share."""
        if self.total == 0:
            return 0.0
        return max(
            abs(obs - exp) for obs, exp in zip(self.observed, self.expected)
        )

    def record(self, level: int) -> None:
        """Count one node or draw at level."""
        self.counts[level] += 1

    @classmethod
    def from_skiplist(cls, skiplist: 'SkipList') -> 'LevelStats':
        """Count elements by the highest level they are linked into."""
        sizes = skiplist.level_sizes()
        tops = [
            sizes[level] - (sizes[level + 1] if level + 1 < len(sizes) else 0)
            for level in range(len(sizes))
        ]
        return cls(skiplist.max_levels, tops, source="skiplist")

    def __str__(self) -> str:
        """Human-readable report."""
        lines = [
            f"Level Distribution ({self.source})",
            "==================================",
            f"Samples:                {self.total:,}",
            f"Max deviation:          {self.max_deviation:.4f}",
            "",
            "Level   Count        Observed   Expected",
        ]
        for level, (count, obs, exp) in enumerate(
            zip(self.counts, self.observed, self.expected)
        ):
            lines.append(f"{level:>5}   {count:<10,}   {obs:>8.4f}   {exp:>8.4f}")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Machine-readable format."""
        return {
            'source': self.source,
            'max_levels': self.max_levels,
            'total': self.total,
            'counts': list(self.counts),
            'observed': self.observed,
            'expected': self.expected,
            'max_deviation': self.max_deviation,
        }

    def to_json(self, path: Optional[Union[str, Path]] = None) -> str:
        """Export as JSON."""
        json_str = json.dumps(self.to_dict(), indent=2)
        if path:
            Path(path).write_text(json_str)
        return json_str


def sample_levels(
    generator: LevelGenerator,
    draws: int,
    *,
    logger: Optional[logging.Logger] = None,
    log_every: Optional[int] = None,
) -> LevelStats:
    """Draw from a generator and tally the levels.

    Args:
        generator: Generator to sample (its random state advances)
        draws: Number of draws
        logger: Logger for progress and the final summary
        log_every: Draws between progress messages (requires logger)

    Raises:
        ValueError: If draws is negative
    """
    if draws < 0:
        raise ValueError("draws must be >= 0")

    stats = LevelStats(generator.max_levels)
    for i in range(draws):
        stats.record(generator.next_level())
        if logger and log_every and (i + 1) % log_every == 0:
            logger.info("Sampled %d/%d levels", i + 1, draws)

    if logger:
        logger.info(
            "Level sample of %d draws: max deviation %.4f",
            stats.total, stats.max_deviation,
        )
    return stats
