"""Simulate a game with random strategies and print every event."""

import logging

from duocardgame.agents import RandomStrategy
from duocardgame.orchestration.game_runner import GameRunner


def main():
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    runner = GameRunner(["Bot1", "Bot2", "Bot3", "Bot4"], seed=42, strategy=RandomStrategy())
    result = runner.run()

    print(f"Game finished! Winner: {result.winner} ({result.winner_score} points)")
    print(f"Rounds: {result.rounds}")

    # Last few events of the final round
    for event in list(runner.game.history)[-5:]:
        print(f"> {event}")

if __name__ == "__main__":
    main()
