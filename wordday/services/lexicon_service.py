"""
Lexicon Service

Loads the answers and accepted guesses for a locale and builds the guess
index used by the validator.
"""

import random
import threading
import time
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Tuple

from ..config.game_settings import ANSWERS, GUESSES, DEFAULT_SEED, load_word_list
from ..utils.game_logger import game_logger
from ..utils.helpers import fold_word, normalize_word

WordListLoader = Callable[[str, str], List[str]]


class GuessIndex:
    """
    Lookup structure over accepted guesses.

    Words are keyed by their accent-insensitive form, so "FORET" finds
    "FORÊT". Lookups return the canonical spelling from the word list.
    """

    def __init__(self, words: Iterable[str]):
        self._canonical: Dict[str, str] = {}
        self._by_letter: Dict[str, set] = {}

        for word in words:
            word = normalize_word(word)
            key = fold_word(word)
            # First spelling wins for duplicates
            if key in self._canonical:
                continue
            self._canonical[key] = word
            for letter in set(key):
                self._by_letter.setdefault(letter, set()).add(key)

    def __len__(self) -> int:
        return len(self._canonical)

    def __contains__(self, word: str) -> bool:
        return self.lookup(word) is not None

    def lookup(self, word: str) -> Optional[str]:
        """Canonical spelling of an accepted guess, or None."""
        return self._canonical.get(fold_word(word))

    def words_containing(self, letters: Iterable[str]) -> List[str]:
        """All accepted guesses that contain every given letter at least once."""
        keys: Optional[FrozenSet[str]] = None
        for letter in set(fold_word(''.join(letters))):
            matches = frozenset(self._by_letter.get(letter, ()))
            keys = matches if keys is None else keys & matches
            if not keys:
                return []

        if keys is None:
            keys = frozenset(self._canonical)
        return sorted(self._canonical[key] for key in keys)


class Lexicon:
    """
    Word lists for one locale.

    ``load`` is idempotent and may be called from several threads: the first
    caller builds, the others wait for it. Until it finishes, ``answers`` and
    ``guess_index`` are None and the validator reports that words are still
    loading.
    """

    def __init__(self, locale: str, seed: Optional[int] = None, loader: WordListLoader = load_word_list):
        self.locale = locale
        self.seed = DEFAULT_SEED if seed is None else seed
        self._loader = loader
        self._lock = threading.Lock()
        self.answers: Optional[Tuple[str, ...]] = None
        self.guess_index: Optional[GuessIndex] = None

    @property
    def ready(self) -> bool:
        return self.guess_index is not None

    def load(self) -> "Lexicon":
        """
        Load both word lists and build the guess index.

        Raises:
            FileNotFoundError: If a word list resource is missing
            ValueError: If a word list is empty or malformed
        """
        if self.ready:
            return self

        with self._lock:
            if self.ready:
                return self

            started = time.perf_counter()
            answers = self._load_answers()
            guess_index = GuessIndex(self._loader(self.locale, GUESSES))

            self.answers = answers
            self.guess_index = guess_index

            game_logger.log_lexicon_event(
                self.locale, 'loaded',
                answers=len(answers), guesses=len(guess_index),
                elapsed_ms=round((time.perf_counter() - started) * 1000, 2)
            )

        return self

    def load_in_background(self) -> threading.Thread:
        """Start loading on a daemon thread and return it."""
        def worker():
            try:
                self.load()
            except (OSError, ValueError) as e:
                game_logger.log_error(e, 'load_lexicon')
                raise

        thread = threading.Thread(target=worker, name=f"lexicon-{self.locale}", daemon=True)
        thread.start()
        return thread

    def _load_answers(self) -> Tuple[str, ...]:
        answers = [normalize_word(word) for word in self._loader(self.locale, ANSWERS)]
        # Same seed and locale always produce the same day-by-day ordering
        random.Random(self.seed).shuffle(answers)
        return tuple(answers)

    def answer(self, at: int) -> Optional[str]:
        """Answer for a puzzle index, or None while loading."""
        if self.answers is None:
            return None
        return self.answers[at % len(self.answers)]


# Global service instance
_lexicon = None


def get_lexicon() -> Optional[Lexicon]:
    """Get the global lexicon instance."""
    return _lexicon


def initialize_lexicon(locale: str, seed: Optional[int] = None) -> Lexicon:
    """Initialize the global lexicon instance (not loaded yet)."""
    global _lexicon
    _lexicon = Lexicon(locale, seed)
    return _lexicon
