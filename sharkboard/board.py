"""The shark game board: coin placement, tile status and the roaming shark."""

from __future__ import annotations

import random
from enum import IntEnum

N_BOARD = 20
N_COINPOS = 12
MAX_COIN = 4
MAX_SHARKSTEP = 6
SHARK_INITPOS = -4

_RULE = "-" * 60
_HEADER = "----------------------- BOARD STATUS -----------------------"


class BoardStatus(IntEnum):
    """State of a single board tile."""

    OK = 0
    DESTROYED = 1


class Board:
    """A circular board of tiles holding coins, chased by a shark."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._status: list[BoardStatus] = []
        self._coins: list[int] = []
        self.shark_position = SHARK_INITPOS
        self.reset()

    @property
    def coins(self) -> tuple[int, ...]:
        """Coins currently lying on each tile."""
        return tuple(self._coins)

    def reset(self) -> int:
        """Restore every tile, scatter coins and put the shark back; return the drop count."""
        self._status = [BoardStatus.OK] * N_BOARD
        self._coins = [0] * N_BOARD
        self.shark_position = SHARK_INITPOS
        for _ in range(N_COINPOS):
            pos = self._rng.randrange(N_BOARD)
            self._coins[pos] = self._rng.randrange(MAX_COIN) + 1
        return N_COINPOS

    def _check(self, pos: int) -> None:
        if not 0 <= pos < N_BOARD:
            raise IndexError(f"board position {pos} out of range 0..{N_BOARD - 1}")

    def status(self, pos: int) -> BoardStatus:
        """Return the status of the tile at ``pos``."""
        self._check(pos)
        return self._status[pos]

    def take_coin(self, pos: int) -> int:
        """Remove and return the coins lying on the tile at ``pos``."""
        self._check(pos)
        coin = self._coins[pos]
        self._coins[pos] = 0
        return coin

    def step_shark(self) -> int:
        """Advance the shark by one to six tiles and return its new position."""
        self.shark_position += self._rng.randrange(MAX_SHARKSTEP) + 1
        if self.shark_position >= N_BOARD:
            self.shark_position %= N_BOARD
        return self.shark_position

    def render(self) -> str:
        """Return the board status banner, one mark per tile."""
        tiles = "".join(
            "|X" if state == BoardStatus.DESTROYED else "|O" for state in self._status
        )
        return "\n".join((_HEADER, tiles + "|", _RULE))