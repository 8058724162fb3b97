"""Simulate a game with random agents."""

import logging

from unocore.agents import RandomAgent
from unocore.orchestration.game_runner import GameRunner


def main():
    logging.basicConfig(level=logging.INFO)
    agents = [RandomAgent(f"Bot{i}") for i in range(1, 5)]

    runner = GameRunner(agents, seed=42)
    result = runner.run()

    for event in result.state.history:
        print(f"> {event}")

    print(f"Game finished! Winner: {result.winner}")
    print(f"Turns: {result.num_turns}")
    print(f"Cards accounted for: {result.state.total_cards()}")


if __name__ == "__main__":
    main()
