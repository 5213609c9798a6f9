from __future__ import annotations

import time

from arcade_connect4.ai.minimax_agent import MinimaxAgent
from arcade_connect4.game.controller import run_game
from arcade_connect4.logging_setup import configure_logging


def wants_rematch(raw: str) -> bool:
    return raw.strip().lower() in {"y", "yes"}


def main() -> None:
    configure_logging()

    print("Select mode:")
    print("1) Play against the Arcade AI")
    print("2) Run benchmark (Arcade AI vs baselines)")

    choice = input("Choice: ").strip()

    if choice == "2":
        from arcade_connect4.scripts.benchmark import main as benchmark_main

        print("\nStarting benchmark...\n")
        benchmark_main([])
        return

    if choice != "1":
        print("\nInvalid choice. Starting a game against the Arcade AI.\n")

    ai = MinimaxAgent()
    print(f"\nStarting game: You vs {ai.name}")
    print("Game will start in 2 seconds...\n")
    time.sleep(2)

    while True:
        run_game(ai)
        if not wants_rematch(input("Play again? (y/n): ")):
            print("Thanks for playing!")
            return


if __name__ == "__main__":
    main()
