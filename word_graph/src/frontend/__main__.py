from __future__ import annotations
import argparse
from typing import List, Optional

from wordgraph import Engine, InsufficientInputError
from wordgraph import config as CFG
from wordgraph.errors import missing_message
from wordgraph.normalize import normalize_word
from wordgraph.walk import play_walk, save_walk

MENU = """
--- Graph Operations Menu ---
1. Show Directed Graph
2. Query Bridge Words
3. Generate New Text
4. Calculate Shortest Path
5. Calculate PageRank
6. Random Walk
0. Exit"""

def _ask(prompt: str) -> str:
    return input(prompt)

def run_walk(eng: Engine, *, delay: float, wrap: int, output: Optional[str]) -> List[str]:
    """Print the walk word by word; Ctrl+C stops it. The printed prefix is saved to `output`."""
    print("Starting random walk. Press Ctrl+C at any time to stop.")
    shown: List[str] = []

    def emit(word: str) -> None:
        shown.append(word)
        print(word, end=" ", flush=True)
        if wrap > 0 and len(shown) % wrap == 0:
            print()

    try:
        play_walk(eng.iter_random_walk(), emit, delay=delay)
    except KeyboardInterrupt:
        print("\nStopping random walk...")
    print("\nRandom walk finished or stopped.")
    if output:
        try:
            save_walk(shown, output)
        except OSError as exc:
            print(f"Failed saving file: {exc}")
    return shown

def _handle(choice: str, eng: Engine, args: argparse.Namespace) -> None:
    if choice == "1":
        print(eng.show_graph())
    elif choice == "2":
        w1 = _ask("Enter word1: ")
        w2 = _ask("Enter word2: ")
        print(eng.query_bridge_words(w1, w2))
    elif choice == "3":
        text = _ask("Enter new text: ")
        print("Generated Text: " + eng.generate_new_text(text))
    elif choice == "4":
        w1 = _ask("Enter start word: ")
        w2 = _ask("Enter end word: ")
        print(eng.calc_shortest_path(w1, w2))
    elif choice == "5":
        word = _ask("Enter word to calculate PageRank for: ")
        pr = eng.cal_page_rank(word)
        if pr == CFG.PAGERANK_MISSING:
            print(missing_message([normalize_word(word)]))
        else:
            print(f'PageRank of "{word}": {pr:.4f}')
    elif choice == "6":
        run_walk(eng, delay=args.delay, wrap=CFG.WALK_WRAP, output=args.output)
    else:
        print("Invalid choice. Please try again.")

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Word graph explorer (interactive menu)")
    p.add_argument("--file", default=None, help="Text file to build the graph from (prompted if omitted)")
    p.add_argument("--delay", type=float, default=CFG.WALK_DELAY, help="Seconds between random-walk words")
    p.add_argument("--output", default=CFG.WALK_OUTPUT, help="Where to save the random walk ('' to skip)")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    eng = Engine()
    try:
        path = args.file
        if path is None:
            try:
                path = _ask("Enter text file path: ").strip()
            except EOFError:
                print(); return 1
        try:
            eng.build(path, verbose=args.verbose)
        except (FileNotFoundError, InsufficientInputError) as exc:
            print(exc)
            print("Failed to build graph. Exiting.")
            return 1

        while True:
            print(MENU)
            try:
                choice = _ask("Enter your choice: ").strip()
            except (EOFError, KeyboardInterrupt):
                print(); break
            if choice == "0":
                print("Exiting program.")
                break
            try:
                _handle(choice, eng, args)
            except EOFError:
                print(); break
        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
