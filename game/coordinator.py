"""Top-level game flow: phases, turns and rounds."""

import asyncio
import dataclasses
import logging
import random
import time
from typing import Callable, Dict, List, Optional

import config
from data.sample_words import get_random_words
from game.analytics import AnalyticsRecorder
from game.models import (
    GameSnapshot,
    Phase,
    RoundWordsPerMinute,
    TransitionReason,
    WordStat,
    WordValidation,
)
from game.round_state import RoundState
from game.scoring import ScoreBoard
from game.timer import TurnTimer
from game.word_pool import WordPool

logger = logging.getLogger(__name__)

PhaseCallback = Callable[[Phase], None]
SnapshotCallback = Callable[[GameSnapshot], None]

_START_PHASES = (Phase.SETUP, Phase.SETUP_VIEW, Phase.WORD_INPUT)
# The catalog is frozen once the first round begins
_WORD_ENTRY_PHASES = _START_PHASES + (Phase.GAME_OVERVIEW,)


class GameCoordinator:
    """
    Wires the word pool, round state, timer, score board and analytics
    together and moves the game through its phases.

    Every intent runs to completion synchronously. The presentation layer
    reads the returned GameSnapshot, or subscribes with `on_state_changed`;
    `on_phase_changed` is the hook for audio/orientation side effects.

    The turn timer schedules its ticks on `loop`. Without one, `begin_round`
    and `advance_team_or_round` must be called from inside a running asyncio
    event loop; a plain synchronous caller has to pass a loop explicitly.
    """

    def __init__(
        self,
        timer_duration: int = config.DEFAULT_TURN_DURATION,
        on_phase_changed: Optional[PhaseCallback] = None,
        on_state_changed: Optional[SnapshotCallback] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
        clock: Callable[[], float] = time.monotonic,
        rng: Optional[random.Random] = None,
    ):
        self.on_phase_changed = on_phase_changed
        self.on_state_changed = on_state_changed
        self.phase: Phase = Phase.SETUP

        self.analytics = AnalyticsRecorder(clock=clock)
        self.scores = ScoreBoard()
        self.rounds = RoundState()
        self.words = WordPool(
            on_word_skipped=self.analytics.record_word_skip,
            on_time_spent=self.analytics.record_word_time,
            clock=clock,
            rng=rng,
        )
        self.timer = TurnTimer(
            duration=timer_duration,
            on_expire=self._on_timer_expired,
            on_tick=self._on_timer_tick,
            loop=loop,
        )

    # Navigation
    def proceed_to_word_input(self) -> GameSnapshot:
        self._set_phase(Phase.WORD_INPUT)
        return self._publish()

    def go_to_setup_view(self) -> GameSnapshot:
        self._set_phase(Phase.SETUP_VIEW)
        return self._publish()

    # Word entry
    def add_word(self, text: str) -> Optional[WordValidation]:
        """
        Add a word to the catalog before play starts.

        Returns:
            The validation outcome, or None when the catalog is locked
            because a game is under way
        """
        if self.phase not in _WORD_ENTRY_PHASES:
            self._ignored("add_word")
            return None
        result = self.words.add_word(text)
        if result is not WordValidation.SUCCESS:
            logger.debug("[word-rejected] %r: %s", text, result.error_message)
        self._publish()
        return result

    def add_sample_words(self, count: int = config.SAMPLE_WORD_COUNT) -> int:
        """Add random sample words not already in the catalog. Returns how many were added."""
        if self.phase not in _WORD_ENTRY_PHASES:
            self._ignored("add_sample_words")
            return 0
        added = 0
        for text in get_random_words(count, exclude=self.words.all_word_texts()):
            if self.words.add_word(text) is WordValidation.SUCCESS:
                added += 1
        self._publish()
        return added

    def can_start_game(self) -> bool:
        return self.words.can_start_game()

    def update_timer_duration(self, seconds: int) -> GameSnapshot:
        self.timer.update_duration(seconds)
        return self._publish()

    # Game flow
    def start_game(self) -> GameSnapshot:
        """Reset scores, rounds, timer and analytics and show the overview."""
        if self.phase not in _START_PHASES:
            return self._ignored("start_game")
        self._reset_progress()
        self._set_phase(Phase.GAME_OVERVIEW)
        return self._publish()

    def begin_round(self) -> GameSnapshot:
        """Start the first turn of the game with a full timer."""
        if self.phase is not Phase.GAME_OVERVIEW:
            return self._ignored("begin_round")
        self.timer.reset_timer()
        self._setup_round()
        self._set_phase(Phase.PLAYING)
        self._start_next_turn()
        return self._publish()

    def word_guessed(self) -> GameSnapshot:
        """The acting team got the current word."""
        current = self.words.current_word
        if self.phase is not Phase.PLAYING or current is None:
            return self._ignored("word_guessed")

        team = self.rounds.current_team
        round_ = self.rounds.current_round

        self.analytics.record_correct_guess(team, round_)
        self.scores.increment_score(team)
        self.rounds.mark_word_used_in_round(current.word_id)
        self.words.mark_current_word_guessed()

        if self.words.has_unused_words():
            self.words.get_next_word()
        else:
            self._end_turn_words_exhausted()
        return self._publish()

    def skip_current_word(self) -> GameSnapshot:
        if self.phase is Phase.PLAYING:
            self.words.skip_current_word()
        return self._publish()

    def advance_team_or_round(self, words_exhausted: bool = False) -> GameSnapshot:
        """Continue from the transition screen into the next turn."""
        if self.phase is not Phase.ROUND_TRANSITION:
            return self._ignored("advance_team_or_round")
        self._advance(words_exhausted)
        return self._publish()

    def reset_game(self) -> GameSnapshot:
        """Drop the catalog and all progress and go back to setup."""
        self.words.reset_words()
        self._reset_progress()
        self._set_phase(Phase.SETUP)
        return self._publish()

    # Queries
    def snapshot(self) -> GameSnapshot:
        current = self.words.current_word
        return GameSnapshot(
            phase=self.phase,
            current_round=self.rounds.current_round,
            current_team=self.rounds.current_team,
            transition_reason=self.rounds.last_transition_reason,
            current_word=dataclasses.replace(current) if current else None,
            time_remaining=self.timer.time_remaining,
            timer_duration=self.timer.duration,
            timer_running=self.timer.is_running,
            scores=dict(self.scores.scores),
            skip_enabled=self.words.skip_enabled,
            unused_word_count=self.words.unused_count,
            total_word_count=self.words.total_count,
        )

    def get_winner(self) -> Optional[int]:
        return self.scores.get_winner()

    def get_word_statistics(self) -> List[WordStat]:
        return self.analytics.get_word_statistics(self.words.words)

    def get_words_per_minute(self) -> List[RoundWordsPerMinute]:
        return self.analytics.get_words_per_minute()

    def get_overall_words_per_minute(self) -> Dict[int, Optional[float]]:
        return self.analytics.get_overall_words_per_minute()

    # Internals
    def _advance(self, words_exhausted: bool):
        can_advance = self.rounds.can_advance_round(
            len(self.rounds.used_word_ids), self.words.total_count
        )
        if words_exhausted or can_advance:
            if self.rounds.is_final_round():
                self._set_phase(Phase.GAME_OVER)
                return
            self._record_round_time()
            # Same team keeps playing with whatever time it had left
            self.rounds.advance_round()
        self._setup_round()
        self._set_phase(Phase.PLAYING)
        self._start_next_turn()

    def _end_turn_words_exhausted(self):
        self.timer.stop_timer()
        self._record_round_time()
        self.rounds.last_transition_reason = TransitionReason.WORDS_EXHAUSTED

        if self.rounds.is_final_round():
            self.scores.record_current_team_turn_score(self.rounds.current_team)
            self._set_phase(Phase.GAME_OVER)
        else:
            self._set_phase(Phase.ROUND_TRANSITION)

    def _on_timer_expired(self):
        if self.phase is not Phase.PLAYING:
            return

        self._record_round_time()
        self.scores.record_current_team_turn_score(self.rounds.current_team)

        if self.words.has_unused_words():
            self.rounds.switch_team()
            self.timer.reset_timer()
            self._set_phase(Phase.ROUND_TRANSITION)
        else:
            self.rounds.last_transition_reason = TransitionReason.WORDS_EXHAUSTED
            self._advance(words_exhausted=True)
        self._publish()

    def _on_timer_tick(self, remaining: int):
        self._publish()

    def _setup_round(self):
        used_ids = self.rounds.used_word_ids
        self.words.setup_for_round(used_ids)
        if not used_ids:
            self.analytics.initialize_round_stats(self.rounds.current_round)
        self.analytics.record_round_start_time(self.rounds.current_team, self.rounds.current_round)

    def _start_next_turn(self):
        if self.words.has_unused_words():
            self.words.get_next_word()
        self.timer.start_timer()

    def _record_round_time(self):
        self.analytics.record_time_for_current_round(self.rounds.current_team, self.rounds.current_round)

    def _reset_progress(self):
        self.scores.reset_scores()
        self.rounds.reset_to_first_round()
        self.timer.reset_timer()
        self.analytics.reset_analytics()

    def _set_phase(self, phase: Phase):
        if phase is self.phase:
            return
        logger.info("[phase] %s -> %s", self.phase.value, phase.value)
        self.phase = phase
        if self.on_phase_changed:
            self.on_phase_changed(phase)

    def _ignored(self, intent: str) -> GameSnapshot:
        logger.debug("[intent-ignored] %s in phase %s", intent, self.phase.value)
        return self.snapshot()

    def _publish(self) -> GameSnapshot:
        snap = self.snapshot()
        if self.on_state_changed:
            self.on_state_changed(snap)
        return snap
