"""Round and team progression."""

import logging
from typing import Optional, Set, Tuple

import config
from game.models import Round, TransitionReason, other_team, validate_team
from utils.formatters import format_team

logger = logging.getLogger(__name__)


class RoundState:
    """Tracks the current round, the acting team and the words used this round."""

    def __init__(self):
        self.current_round: Round = Round.DESCRIBE
        self.current_team: int = 1
        self.last_transition_reason: Optional[TransitionReason] = None
        self._round_used_ids: Set[str] = set()

    def advance_round(self):
        """Move to the next round. The final round stays put."""
        next_round = self.current_round.next
        if next_round is not None:
            logger.info("[round-advance] %s -> %s", self.current_round.short_name, next_round.short_name)
            self.current_round = next_round
        self._round_used_ids.clear()
        self.last_transition_reason = TransitionReason.WORDS_EXHAUSTED

    def switch_team(self):
        self.current_team = other_team(self.current_team)
        self.last_transition_reason = TransitionReason.TIMER_EXPIRED
        logger.info("[team-switch] now %s", self.team_display_name)

    def reset_to_first_round(self):
        self.current_round = Round.DESCRIBE
        self.current_team = 1
        self._round_used_ids.clear()
        self.last_transition_reason = None

    # Words used within the round
    def mark_word_used_in_round(self, word_id: str):
        self._round_used_ids.add(word_id)

    def is_word_used_in_round(self, word_id: str) -> bool:
        return word_id in self._round_used_ids

    @property
    def used_word_ids(self) -> Set[str]:
        """A copy of the ids guessed so far this round."""
        return set(self._round_used_ids)

    def has_used_all_words(self, total_words: int) -> bool:
        return len(self._round_used_ids) >= total_words

    def can_advance_round(self, words_used: int, total_words: int) -> bool:
        """True when there is a next round and every word has been used."""
        return not self.is_final_round() and words_used >= total_words

    # Queries
    def is_first_round(self) -> bool:
        return self.current_round is Round.DESCRIBE

    def is_final_round(self) -> bool:
        return self.current_round is Round.ONE_WORD

    def next_round(self) -> Optional[Round]:
        return self.current_round.next

    def round_progress(self) -> Tuple[int, int]:
        return self.current_round.value, config.ROUND_COUNT

    @property
    def opposing_team(self) -> int:
        return other_team(self.current_team)

    @property
    def round_display_name(self) -> str:
        return self.current_round.short_name

    @property
    def team_display_name(self) -> str:
        return format_team(validate_team(self.current_team))
