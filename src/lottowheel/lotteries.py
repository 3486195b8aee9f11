"""Lottery shapes the wheels are generated for."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LotteryShape:
    """Ticket size and number range of a lottery game."""

    game_size: int
    total_numbers: int
    name: str = ""

    def __post_init__(self) -> None:
        if self.game_size <= 0:
            raise ValueError("game_size must be > 0.")
        if self.total_numbers < self.game_size:
            raise ValueError("total_numbers must be >= game_size.")


LOTTERIES: dict[str, LotteryShape] = {
    "lotofacil": LotteryShape(game_size=15, total_numbers=25, name="Lotofacil"),
    "megasena": LotteryShape(game_size=6, total_numbers=60, name="Mega-Sena"),
    "quina": LotteryShape(game_size=5, total_numbers=80, name="Quina"),
    "lotomania": LotteryShape(game_size=50, total_numbers=100, name="Lotomania"),
}


def get_lottery(lottery_id: str) -> LotteryShape:
    """Return a named lottery shape."""
    try:
        return LOTTERIES[lottery_id.lower()]
    except KeyError:
        known = ", ".join(sorted(LOTTERIES))
        raise KeyError(f"Unknown lottery '{lottery_id}'. Known: {known}.") from None
