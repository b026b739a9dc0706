"""Word catalog and the per-round pool of words still to be guessed."""

import logging
import random
import time
from typing import Callable, Iterable, List, Optional, Tuple

import config
from game.models import Word, WordValidation

logger = logging.getLogger(__name__)

SkipCallback = Callable[[str], None]
TimeSpentCallback = Callable[[str, int], None]


class WordPool:
    """
    Owns the word catalog and the unused subset for the active round.

    Skip and time-spent observations are reported through the callbacks
    passed at construction; the pool keeps no analytics of its own.
    """

    def __init__(
        self,
        on_word_skipped: Optional[SkipCallback] = None,
        on_time_spent: Optional[TimeSpentCallback] = None,
        clock: Callable[[], float] = time.monotonic,
        rng: Optional[random.Random] = None,
    ):
        self.on_word_skipped = on_word_skipped
        self.on_time_spent = on_time_spent
        self._clock = clock
        self._rng = rng or random.Random()

        self.words: List[Word] = []
        self.current_word: Optional[Word] = None
        self.skip_enabled: bool = False

        # Ordered; skipped words move to the back
        self._unused: List[Word] = []
        self._word_started_at: Optional[float] = None

    # Catalog
    def add_word(self, text: str) -> WordValidation:
        """Validate and add a word. Only SUCCESS changes the catalog."""
        trimmed = text.strip()

        if not trimmed:
            return WordValidation.EMPTY
        if not self.is_valid_word_length(trimmed):
            return WordValidation.TOO_LONG
        if self.is_duplicate_word(trimmed):
            return WordValidation.DUPLICATE

        self.words.append(Word(text=trimmed))
        logger.debug("[word-add] %r (catalog=%d)", trimmed, len(self.words))
        return WordValidation.SUCCESS

    def is_duplicate_word(self, text: str) -> bool:
        needle = text.strip().lower()
        return any(w.text.lower() == needle for w in self.words)

    def is_valid_word_length(self, text: str) -> bool:
        return 1 <= len(text.strip()) <= config.MAX_WORD_LENGTH

    def can_start_game(self) -> bool:
        return len(self.words) >= config.MIN_WORDS_TO_START

    def reset_words(self):
        """Clear the catalog and all per-round state."""
        self.words.clear()
        self._unused.clear()
        self.current_word = None
        self.skip_enabled = False
        self._word_started_at = None

    # Round pool
    def setup_for_round(self, used_ids: Iterable[str]):
        """
        Rebuild the unused subset.

        An empty `used_ids` means a fresh round and every catalog word is
        back in play; otherwise a team switch within the round and only the
        words not yet guessed this round remain.
        """
        used = set(used_ids)
        if not used:
            self._unused = list(self.words)
        else:
            self._unused = [w for w in self.words if w.word_id not in used]
        self._update_skip_enabled()

    def get_next_word(self) -> Optional[Word]:
        """Pick a random unused word and make it current."""
        if not self._unused:
            self.current_word = None
            return None

        self.current_word = self._rng.choice(self._unused)
        self._word_started_at = self._clock()
        self._update_skip_enabled()
        return self.current_word

    def skip_current_word(self):
        """Defer the current word to later in the round and show another."""
        current = self.current_word
        if current is None or len(self._unused) <= 1:
            return

        self._report_time_spent(current)

        index = self._index_of(current.word_id)
        if index is None:
            return
        skipped = self._unused.pop(index)
        self._unused.append(skipped)
        logger.debug("[word-skip] %r", skipped.text)
        if self.on_word_skipped:
            self.on_word_skipped(skipped.word_id)

        self.get_next_word()

    def mark_current_word_guessed(self):
        """Retire the current word from this round's pool."""
        current = self.current_word
        if current is None:
            return

        self._report_time_spent(current)

        current.used = True
        index = self._index_of(current.word_id)
        if index is not None:
            del self._unused[index]
        self.current_word = None

        self._update_skip_enabled()
        self._word_started_at = self._clock()

    def has_unused_words(self) -> bool:
        return bool(self._unused)

    # Lookups
    @property
    def unused_count(self) -> int:
        return len(self._unused)

    @property
    def total_count(self) -> int:
        return len(self.words)

    @property
    def used_count(self) -> int:
        return sum(1 for w in self.words if w.used)

    def get_word_by_id(self, word_id: str) -> Optional[Word]:
        for word in self.words:
            if word.word_id == word_id:
                return word
        return None

    def is_word_used(self, word_id: str) -> bool:
        word = self.get_word_by_id(word_id)
        return word.used if word else False

    def word_progress(self) -> Tuple[int, int]:
        """(used, total) across the whole catalog."""
        return self.used_count, self.total_count

    def all_word_texts(self) -> List[str]:
        return [w.text for w in self.words]

    def unused_word_texts(self) -> List[str]:
        return [w.text for w in self._unused]

    def unused_word_ids(self) -> List[str]:
        return [w.word_id for w in self._unused]

    # Internals
    def _index_of(self, word_id: str) -> Optional[int]:
        for i, word in enumerate(self._unused):
            if word.word_id == word_id:
                return i
        return None

    def _report_time_spent(self, word: Word):
        if self._word_started_at is None:
            return
        elapsed = int(self._clock() - self._word_started_at)
        if self.on_time_spent:
            self.on_time_spent(word.word_id, max(elapsed, config.MIN_WORD_TIME_SECONDS))

    def _update_skip_enabled(self):
        self.skip_enabled = len(self._unused) > 1
