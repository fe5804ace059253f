"""A dice-and-betting game: the highest pip total takes the pot."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

AskBet = Callable[["Player", int], float]


@dataclass
class Player:
    """One player's pips, bet and last roll."""

    index: int
    pip_count: int = 0
    bet_amount: int = 0
    last_roll: Optional[int] = None

    def roll(self, sides: int, rng: Optional[random.Random] = None) -> int:
        """Roll a die with faces 1..sides and remember the result."""
        if sides < 1:
            raise ValueError("a die needs at least one side")
        rng = rng or random.Random()
        self.last_roll = rng.randint(1, sides)
        return self.last_roll

    def place_bet(self, amount: float) -> None:
        """Add to the bet; the total is kept as a whole number."""
        self.bet_amount = int(self.bet_amount + amount)

    def __str__(self) -> str:
        return f"Player {self.index}=({self.pip_count}P, {self.bet_amount}B)"


class Game:
    """A table of players rolling the same die."""

    def __init__(
        self,
        player_count: int,
        sides: int,
        rng: Optional[random.Random] = None,
        echo: Callable[[str], None] = print,
    ) -> None:
        if player_count < 0:
            raise ValueError("player count must not be negative")
        if sides < 1:
            raise ValueError("a die needs at least one side")
        self.players = [Player(i + 1) for i in range(player_count)]
        self.sides = sides
        self.rng = rng or random.Random()
        self.echo = echo

    def play_round(self, ask_bet: AskBet) -> list[list[int]]:
        """Roll for everyone and take bets, rolling again while the top roll
        is tied. Returns the rolls of each round played."""
        rounds = []
        while True:
            rolls = []
            for player in self.players:
                rolled = player.roll(self.sides, self.rng)
                player.pip_count += rolled
                rolls.append(rolled)
                self.echo(
                    f"Player {player.index} rolled a {rolled} and now has "
                    f"{player.pip_count} pips."
                )
            rounds.append(rolls)
            high = max(rolls, default=0)
            self.take_bets(high, ask_bet)
            if rolls.count(high) <= 1:
                return rounds
            self.echo("There was a tie for the highest roll! Another round must be played.")

    def take_bets(self, limit: int, ask_bet: AskBet) -> None:
        """Ask every player for a bet no larger than ``limit``."""
        for player in self.players:
            self.echo(
                f"Player {player.index}, place your bet. It must not be more than "
                f"the highest roll ({limit}):"
            )
            bet = ask_bet(player, limit)
            while bet > limit:
                self.echo(
                    f"Bet must not be more than the highest roll ({limit}). Try again: "
                )
                bet = ask_bet(player, limit)
            player.place_bet(bet)

    def find_winner(self) -> int:
        """Return the position of the player with most pips; the first wins ties."""
        if not self.players:
            raise ValueError("there are no players")
        return max(range(len(self.players)), key=lambda i: self.players[i].pip_count)

    def resolve_bets(self, winner_index: int) -> dict[int, float]:
        """Settle the bets against the winner; return each loser's forfeit by
        position."""
        winner = self.players[winner_index]
        forfeits = {}
        for position, player in enumerate(self.players):
            if position == winner_index:
                self.echo(f"{player} wins!")
                continue
            if winner.pip_count == 0:
                raise ValueError("the winner has no pips")
            forfeit = player.bet_amount * (1 - player.pip_count // winner.pip_count)
            forfeits[position] = forfeit
            self.echo(f"{player} loses {forfeit:g} to {winner}")
        return forfeits


def _ask_number(prompt: str) -> float:
    while True:
        try:
            return float(input(prompt))
        except ValueError:
            print("Please enter a number.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="dragonsroll", description="Play a dice betting game.")
    parser.add_argument("--players", type=int, help="number of players")
    parser.add_argument("--sides", type=int, help="die range, 1 to sides")
    args = parser.parse_args(argv)

    players = args.players if args.players is not None else int(input("Enter number of players: "))
    sides = args.sides if args.sides is not None else int(input("Enter die range (R): "))
    game = Game(players, sides)

    def ask_bet(player: Player, limit: int) -> float:
        return _ask_number("> ")

    while True:
        game.play_round(ask_bet)
        winner = game.find_winner()
        answer = input("Do players want to continue betting? (y/n): ").strip()
        if answer == "n":
            game.resolve_bets(winner)
            return 0
        print("Raising bets for the next round...")
        game.take_bets(sides, ask_bet)


if __name__ == "__main__":
    raise SystemExit(main())