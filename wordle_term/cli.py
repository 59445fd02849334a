import argparse
import random
import sys
from typing import Optional

from wordle_term.render import Renderer, pick_renderer, render_board
from wordle_term.wordle_core import (
    DEFAULT_WORDS_PATH,
    WORD_LENGTH,
    GameConfig,
    RoundResult,
    WordleGame,
    load_words,
    normalize,
    pick_target,
)

QUIT = "Q"
PROMPT = f"Please enter your guess (word length must be {WORD_LENGTH}) or type {QUIT} to quit: "


def play(game: WordleGame, renderer: Renderer) -> Optional[RoundResult]:
    """
    Run the prompt loop until the word is found, the tries run out
    or the player quits. Returns the last round played, or None when
    the player quits or the game was already over on entry.
    """
    rr = None
    while not game.over:
        try:
            guess = normalize(input(PROMPT))
        except (EOFError, KeyboardInterrupt):
            print()
            guess = QUIT

        if not guess:
            continue
        if guess == QUIT:
            print("Quit game")
            return None

        try:
            rr = game.guess_word(guess)
        except ValueError as e:
            print("Not a valid guess:", e)
            continue

        print(render_board(game.history, renderer))

        if rr.won:
            print("Found the word")
        elif rr.over:
            print("You didn't find the word")
            print(f"The word was: {game.target}")
        else:
            print(f"(remaining attempts: {rr.remaining})")

    return rr


def positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return n


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Guess the five-letter word.")
    ap.add_argument("--words", default=str(DEFAULT_WORDS_PATH), help="newline-delimited word list")
    ap.add_argument("--max-tries", type=positive_int, default=6)
    ap.add_argument("--seed", type=int, default=None, help="seed for picking the target word")
    ap.add_argument("--color", action=argparse.BooleanOptionalAction, default=None,
                    help="colour the board (default: only when stdout is a terminal)")
    ap.add_argument("--strict", action="store_true", help="only accept guesses from the word list")
    ap.add_argument("--debug", action="store_true", help="print a trace line per round")
    args = ap.parse_args(argv)

    try:
        wl = load_words(args.words)
    except (OSError, ValueError) as e:
        print(f"[ERROR] {e}")
        return 1

    # The session owns the only random source.
    rng = random.Random(args.seed)
    cfg = GameConfig(max_rounds=args.max_tries, word_list=wl,
                     require_known_word=args.strict, debug=args.debug)
    game = WordleGame(pick_target(wl, rng), cfg)

    color = sys.stdout.isatty() if args.color is None else args.color
    print(f"You have {cfg.max_rounds} chances to guess a {WORD_LENGTH}-letter word!")
    play(game, pick_renderer(color))
    return 0


if __name__ == "__main__":
    sys.exit(main())
