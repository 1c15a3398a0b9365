"""
Statistics Data Models

Contains the aggregated play statistics for one locale.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..config.game_settings import MAX_ROUNDS


@dataclass(frozen=True)
class Statistics:
    """
    Aggregated counters. Never mutated in place: every completed session
    produces a new instance through ``updated``.
    """
    played: int = 0
    won: int = 0
    distribution: List[int] = field(default_factory=lambda: [0] * MAX_ROUNDS)
    current_streak: int = 0
    max_streak: int = 0
    last_won_date: Optional[datetime] = None

    @property
    def win_percentage(self) -> float:
        if not self.played:
            return 0.0
        return round(100.0 * self.won / self.played, 1)

    @property
    def lost(self) -> int:
        return self.played - self.won

    def updated(self, won: bool, guesses: int, date: datetime, continues_streak: bool) -> "Statistics":
        """
        Fold one finished game into a new Statistics instance.

        Args:
            won: Whether the session was won
            guesses: Number of submitted rows
            date: Reference date of the session
            continues_streak: Whether ``date`` directly follows the last win
        """
        if not won:
            return replace(self, played=self.played + 1, current_streak=0)

        distribution = list(self.distribution)
        distribution[guesses - 1] += 1
        streak = self.current_streak + 1 if continues_streak else 1

        return replace(
            self,
            played=self.played + 1,
            won=self.won + 1,
            distribution=distribution,
            current_streak=streak,
            max_streak=max(self.max_streak, streak),
            last_won_date=date,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'played': self.played,
            'won': self.won,
            'distribution': list(self.distribution),
            'current_streak': self.current_streak,
            'max_streak': self.max_streak,
            'last_won_date': self.last_won_date.isoformat() if self.last_won_date else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Statistics":
        distribution = list(data.get('distribution') or [0] * MAX_ROUNDS)
        if len(distribution) != MAX_ROUNDS:
            raise ValueError(f"Distribution must have {MAX_ROUNDS} buckets")
        last_won = data.get('last_won_date')
        return cls(
            played=int(data.get('played', 0)),
            won=int(data.get('won', 0)),
            distribution=distribution,
            current_streak=int(data.get('current_streak', 0)),
            max_streak=int(data.get('max_streak', 0)),
            last_won_date=datetime.fromisoformat(last_won) if last_won else None,
        )
