"""
wordle_core.py
---------------------------------------------------
Core logic for the terminal word-guessing game.
Includes:
 - Letter scoring (exact / partial / no match)
 - Word validation and the word-list loader
 - Single-player game session
---------------------------------------------------
"""

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import List, Sequence, Tuple
import random
import string

WORD_LENGTH = 5
ALPHABET = frozenset(string.ascii_uppercase)
DEFAULT_WORDS_PATH = Path(__file__).parent.absolute() / "words.txt"


class MatchState(IntEnum):
    """Per-letter feedback for a guess."""
    NO_MATCH = 0
    PARTIAL_MATCH = 1
    EXACT_MATCH = 2


# Token symbols used in trace output
TOKENS = {MatchState.EXACT_MATCH: "O", MatchState.PARTIAL_MATCH: "?", MatchState.NO_MATCH: "_"}


def normalize(w: str) -> str:
    """Normalize input word: uppercase + trim. Non-ASCII text is only trimmed."""
    w = w.strip()
    if not w.isascii():
        return w
    return w.upper()


def is_valid_word(candidate: str) -> bool:
    """True iff candidate is exactly five letters, all in A-Z."""
    if len(candidate) != WORD_LENGTH:
        return False
    return all(c in ALPHABET for c in candidate)


def score(target: str, guess: str) -> List[MatchState]:
    """
    Compute the match state of every letter in guess against target.

    A letter at its target position is EXACT_MATCH. A letter found anywhere
    else in the target is PARTIAL_MATCH, without consuming that target
    letter: "ABCDD" against "ABCDE" marks the trailing D as PARTIAL_MATCH
    even though the only D is already matched exactly.
    """
    if len(target) != len(guess):
        raise ValueError("Guess length must match the target length.")
    res = [MatchState.NO_MATCH] * len(guess)

    for j, g_char in enumerate(guess):
        for i, t_char in enumerate(target):
            if g_char != t_char:
                continue
            if i == j:
                res[j] = MatchState.EXACT_MATCH
                break
            res[j] = MatchState.PARTIAL_MATCH

    return res


def is_full_match(target: str, guess: str) -> bool:
    """True iff guess equals target position by position."""
    if len(target) != len(guess):
        raise ValueError("Guess length must match the target length.")
    for t_char, g_char in zip(target, guess):
        if t_char != g_char:
            return False
    return True


# ---------------- Word list ---------------- #

def load_words(path) -> List[str]:
    """Load valid five-letter words from file (UTF-8), uppercased and deduplicated."""
    words = []
    seen = set()
    with open(path, encoding="utf-8") as f:
        for line in f:
            w = normalize(line.replace("\ufeff", ""))
            if is_valid_word(w) and w not in seen:
                seen.add(w)
                words.append(w)
    if not words:
        raise ValueError(f"No valid words found in {path}")
    print(f"[INFO] Loaded {len(words)} valid words from {path}")
    return words


def pick_target(words: Sequence[str], rng: random.Random) -> str:
    """Choose the target word using the caller's random source."""
    if not words:
        raise ValueError("Cannot pick a target from an empty word list.")
    return rng.choice(words)


# ---------------- Game Config & Results ---------------- #

@dataclass
class GameConfig:
    """Game configuration: max rounds + word list."""
    max_rounds: int = 6
    word_list: List[str] = field(default_factory=list)
    require_known_word: bool = False
    debug: bool = False

@dataclass(frozen=True)
class Attempt:
    """One accepted guess and its scores."""
    guess: str
    scores: Tuple[MatchState, ...]

@dataclass
class RoundResult:
    """Single round result container."""
    guess: str
    scores: List[MatchState]
    remaining: int
    won: bool
    over: bool


# ---------------- Game session ---------------- #

class WordleGame:
    """A bounded sequence of attempts against one target word."""
    def __init__(self, target: str, cfg: GameConfig):
        target = normalize(target)
        if not is_valid_word(target):
            raise ValueError(f"Invalid target word: {target!r}")
        if cfg.max_rounds < 1:
            raise ValueError("max_rounds must be at least 1.")
        self.target = target
        self.cfg = cfg
        self.round = 0
        self.history: List[Attempt] = []

    @property
    def won(self) -> bool:
        return bool(self.history) and is_full_match(self.target, self.history[-1].guess)

    @property
    def over(self) -> bool:
        return self.won or self.round >= self.cfg.max_rounds

    @property
    def remaining(self) -> int:
        return self.cfg.max_rounds - self.round

    def guess_word(self, word: str) -> RoundResult:
        """Handle a player's guess and return result."""
        if self.over:
            raise ValueError("Game already over.")
        word = normalize(word)
        if not is_valid_word(word):
            raise ValueError(f"Guess must be {WORD_LENGTH} letters A-Z.")
        if self.cfg.require_known_word and word not in self.cfg.word_list:
            raise ValueError("Word not found in dictionary.")

        self.round += 1
        scores = score(self.target, word)
        self.history.append(Attempt(word, tuple(scores)))
        won = is_full_match(self.target, word)
        over = won or self.round >= self.cfg.max_rounds
        rr = RoundResult(word, scores, self.remaining, won, over)

        if self.cfg.debug:
            print(f"[DEBUG] Round {self.round}: {word} -> {''.join(TOKENS[s] for s in scores)} "
                  f"(remaining={rr.remaining}, won={rr.won}, over={rr.over})")

        return rr
