"""
Solve a single board from the command line.

Usage:
    python -m scripts.solve_example [--width W] [--height H] [--letters L] [--words a,b,c]

Examples:
    python -m scripts.solve_example
    python -m scripts.solve_example --width 2 --height 2 --letters cato --words act,cat,coat,taco

Without arguments this solves the 3x3 board "yoxrbaved" against a small
sample vocabulary and prints every word found, one per line.
"""
import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from boggle.dictionary import ConfigurationError
from boggle.settings import settings
from boggle.solver import Boggle

SAMPLE_WORDS = [
    "abed", "abo", "aby", "aero", "aery", "bad", "bade", "be", "bead", "bed", "boa",
    "board", "bore", "bored", "box", "boy", "bread", "bred", "bro", "broad", "byre",
    "byroad", "dab", "deb", "derby", "dev", "dove", "oba", "obe", "orb", "orbed",
    "orby", "ore", "oread", "read", "reb", "red", "rev", "road", "rob", "robe",
    "robed", "robbed", "robber", "robed", "verb", "very", "yob", "yore",
]


def main():
    parser = argparse.ArgumentParser(description="Boggle Board Solver")
    parser.add_argument("--width", type=int, default=3, help="Board width (default: 3)")
    parser.add_argument("--height", type=int, default=3, help="Board height (default: 3)")
    parser.add_argument("--letters", default="yoxrbaved",
                        help="width*height letters in row-major order (default: yoxrbaved)")
    parser.add_argument("--words", default=None,
                        help="Comma-separated legal words (default: built-in sample list)")
    parser.add_argument("--min-length", type=int, default=settings.MIN_WORD_LENGTH,
                        help=f"Shortest word to report (default: {settings.MIN_WORD_LENGTH})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log search details")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    words = [w.strip().lower() for w in args.words.split(",") if w.strip()] if args.words else SAMPLE_WORDS

    boggle = Boggle(min_length=args.min_length)
    try:
        # Sample list is not strictly ordered, so let the index sort it
        boggle.configure(words, presorted=False)
    except ConfigurationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    found = boggle.solve_board(args.width, args.height, args.letters)
    if boggle.last_error is not None:
        print(f"Error: {boggle.last_error}")
        sys.exit(1)

    for word in found:
        print(word)


if __name__ == "__main__":
    main()
