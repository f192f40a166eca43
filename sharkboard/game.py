"""The shark game: players race round the board, collecting coins, until the shark gets them all."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

from .board import N_BOARD, Board, BoardStatus

N_PLAYER = 3
MAX_DIE = 6

_BANNER_RULE = "=" * 62
_TITLE = "==========                SHARK GAME!!!                ======="


class PlayerStatus(IntEnum):
    """Whether a player is still in the game."""

    LIVE = 0
    DIE = 1
    END = 2

    @property
    def label(self) -> str:
        return self.name


@dataclass
class Player:
    """One participant: where they stand, what they hold and whether they live."""

    name: str
    position: int = 0
    coin: int = 0
    status: PlayerStatus = PlayerStatus.LIVE

    @property
    def alive(self) -> bool:
        return self.status == PlayerStatus.LIVE


@dataclass(frozen=True)
class TurnResult:
    """What happened during one player's turn."""

    player: Player
    roll: int
    coins: int
    shark_position: int
    caught: bool


def roll_die(rng: random.Random | None = None) -> int:
    """Roll a six-sided die."""
    generator = rng if rng is not None else random.Random()
    return generator.randrange(MAX_DIE) + 1


def opening() -> str:
    """Return the title banner."""
    return "\n".join((_BANNER_RULE, _BANNER_RULE, _TITLE, _BANNER_RULE, _BANNER_RULE))


class SharkGame:
    """A game of several players on one board.

    The current player keeps the die until the shark catches them; only then
    does the turn pass to the next living player.
    """

    def __init__(self, names: Iterable[str], rng: random.Random | None = None) -> None:
        self.players = [Player(name) for name in names]
        if not self.players:
            raise ValueError("a game needs at least one player")
        self._rng = rng if rng is not None else random.Random()
        self.board = Board(self._rng)
        self.turn = 0

    def is_over(self) -> bool:
        """Return whether no player is left alive."""
        return not any(player.alive for player in self.players)

    def alive_count(self) -> int:
        """Return how many players are still alive."""
        return sum(1 for player in self.players if player.alive)

    def winner(self) -> Player | None:
        """Return the living player with the most coins (first wins ties), if any."""
        best: Player | None = None
        for player in self.players:
            if player.alive and (best is None or player.coin > best.coin):
                best = player
        return best

    def check_die(self) -> list[str]:
        """Kill every player standing on a destroyed tile; return the announcements."""
        messages = []
        for player in self.players:
            if self.board.status(player.position) == BoardStatus.DESTROYED:
                messages.append(
                    f"{player.name} in pos {player.position} has died!! (coin {player.coin})"
                )
                player.status = PlayerStatus.DIE
        return messages

    @property
    def current_player(self) -> Player:
        """The player whose turn it is, skipping those no longer alive."""
        if self.is_over():
            raise RuntimeError("the game is over")
        while not self.players[self.turn].alive:
            self.turn = (self.turn + 1) % len(self.players)
        return self.players[self.turn]

    def play_turn(self) -> TurnResult:
        """Roll, move, pick up coins and let the shark swim; return what happened."""
        player = self.current_player
        roll = roll_die(self._rng)
        player.position += roll
        if player.position >= N_BOARD:
            player.position %= N_BOARD
        coins = self.board.take_coin(player.position)
        player.coin += coins
        shark = self.board.step_shark()
        caught = player.position == shark
        if caught:
            player.status = PlayerStatus.DIE
        return TurnResult(player, roll, coins, shark, caught)

    def player_track(self, player: int) -> str:
        """Draw the board as seen by one player: their initial where they stand."""
        current = self.players[player]
        mark = current.name[:1] or " "
        cells = []
        for pos in range(N_BOARD):
            if current.position == pos:
                cells.append(mark)
            elif self.board.status(pos) == BoardStatus.DESTROYED:
                cells.append("X")
            else:
                cells.append(" ")
        return "|" + "|".join(cells) + "|"

    def status_report(self) -> str:
        """Return every player's position, coins, status and track."""
        lines = ["player status ---"]
        for index, player in enumerate(self.players):
            lines.append(
                f"{player.name} : pos {player.position}, coin {player.coin}, "
                f"status {player.status.label}"
            )
            lines.append(self.player_track(index))
        lines.append("-----------------")
        return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Play the shark game on the terminal."""
    parser = argparse.ArgumentParser(description="Play the shark board game.")
    parser.add_argument("names", nargs="*", help="player names (asked for when omitted)")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    args = parser.parse_args(argv)

    print(opening())
    names = list(args.names)
    if not names:
        names = [input(f"Player {i}'s name: ").split()[0] for i in range(N_PLAYER)]

    game = SharkGame(names, random.Random(args.seed))
    while not game.is_over():
        player = game.current_player
        print(game.board.render())
        print(game.status_report())
        print(f"{player.name} turn!! Press any key to roll a die!")
        input()
        result = game.play_turn()
        print(f"{result.player.name} collected {result.coins} coins!")
        if result.caught:
            print(f"Shark caught {result.player.name}!")

    winner = game.winner()
    print("GAME END!!")
    print(
        f"{game.alive_count()} players are alive! "
        f"winner is {winner.name if winner else 'nobody'}"
    )
    return 0