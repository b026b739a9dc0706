"""Per-word and per-round play statistics."""

import logging
import time
from typing import Callable, Dict, Iterable, List, Optional

import config
from game.models import (
    TEAMS,
    Round,
    RoundStat,
    RoundWordsPerMinute,
    Word,
    WordStat,
    validate_team,
)

logger = logging.getLogger(__name__)

# Each word is played once per round
ROUNDS_PER_WORD = 3


def words_per_minute(correct: int, seconds: int) -> Optional[float]:
    """Correct guesses per minute, or None when no time was recorded."""
    if seconds <= 0:
        return None
    return correct / (seconds / config.SECONDS_PER_MINUTE)


class AnalyticsRecorder:
    """Records skips, time per word and per-round correctness/time per team."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock

        self.skips_by_word: Dict[str, int] = {}
        self.time_spent_by_word: Dict[str, int] = {}
        self.round_stats: Dict[Round, RoundStat] = {}

        # team -> round -> instant the team's current stretch of play began
        self._team_round_start: Dict[int, Dict[Round, float]] = {team: {} for team in TEAMS}
        # Set once the current turn's time has been added
        self._turn_time_recorded: bool = False

    # Word events
    def record_word_skip(self, word_id: str):
        self.skips_by_word[word_id] = self.skips_by_word.get(word_id, 0) + 1

    def record_word_time(self, word_id: str, seconds: int):
        self.time_spent_by_word[word_id] = self.time_spent_by_word.get(word_id, 0) + seconds

    # Round events
    def initialize_round_stats(self, round_: Round):
        self.round_stats[round_] = RoundStat()

    def record_correct_guess(self, team: int, round_: Round):
        if round_ not in self.round_stats:
            self.initialize_round_stats(round_)
        self.round_stats[round_].add_correct(team)

    def record_round_start_time(self, team: int, round_: Round):
        """
        Mark the start of a turn.

        The start instant is only stamped the first time a team plays a
        round; later turns reuse the instant re-stamped when the previous
        turn's time was recorded. Always re-arms the per-turn guard.
        """
        starts = self._team_round_start[validate_team(team)]
        if round_ not in starts:
            starts[round_] = self._clock()
        self._turn_time_recorded = False

    def record_time_for_current_round(self, team: int, round_: Round):
        """Add the elapsed turn time to the team's round total, at most once per turn."""
        if self._turn_time_recorded:
            return

        started_at = self._team_round_start[validate_team(team)].get(round_)
        if started_at is None:
            return

        now = self._clock()
        elapsed = int(now - started_at)
        if round_ not in self.round_stats:
            self.initialize_round_stats(round_)
        self.round_stats[round_].add_time(team, elapsed)
        logger.debug("[round-time] team=%s round=%s +%ss", team, round_.short_name, elapsed)

        self._team_round_start[team][round_] = now
        self._turn_time_recorded = True

    # Reports
    def get_word_statistics(self, words: Iterable[Word]) -> List[WordStat]:
        """
        Build per-word stats for every word that was shown at least once.

        Returns:
            WordStat list sorted slowest first by average time
        """
        stats = []
        for word in words:
            skips = self.skips_by_word.get(word.word_id, 0)
            total_time = self.time_spent_by_word.get(word.word_id, 0)
            if total_time > 0 or skips > 0:
                stats.append(WordStat(
                    word=word,
                    skips=skips,
                    average_time=total_time / ROUNDS_PER_WORD,
                    total_time=total_time,
                ))
        return sorted(stats, key=lambda s: s.average_time, reverse=True)

    def get_words_per_minute(self) -> List[RoundWordsPerMinute]:
        """WPM for each round that has started, in round order."""
        rows = []
        for round_ in Round:
            stat = self.round_stats.get(round_)
            if stat is None:
                continue
            rows.append(RoundWordsPerMinute(
                round=round_,
                team1_wpm=words_per_minute(stat.correct[1], stat.time_seconds[1]),
                team2_wpm=words_per_minute(stat.correct[2], stat.time_seconds[2]),
            ))
        return rows

    def get_overall_words_per_minute(self) -> Dict[int, Optional[float]]:
        """WPM per team over all rounds combined."""
        overall = {}
        for team in TEAMS:
            correct = sum(s.correct[team] for s in self.round_stats.values())
            seconds = sum(s.time_seconds[team] for s in self.round_stats.values())
            overall[team] = words_per_minute(correct, seconds)
        return overall

    def reset_analytics(self):
        self.skips_by_word.clear()
        self.time_spent_by_word.clear()
        self.round_stats.clear()
        self._team_round_start = {team: {} for team in TEAMS}
        self._turn_time_recorded = False
