"""Game data structures."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Tuple
import uuid

import config
from utils.formatters import format_average_time, format_time, format_wpm

TEAMS = (1, 2)


def validate_team(team: int) -> int:
    """Return the team if it is 1 or 2, otherwise raise ValueError."""
    if team not in TEAMS:
        raise ValueError(f"Unknown team: {team!r} (expected 1 or 2)")
    return team


def other_team(team: int) -> int:
    """Get the opposing team."""
    return 2 if validate_team(team) == 1 else 1


class Phase(Enum):
    """Screens the game moves through."""
    SETUP = "setup"
    SETUP_VIEW = "setup_view"
    WORD_INPUT = "word_input"
    GAME_OVERVIEW = "game_overview"
    PLAYING = "playing"
    ROUND_TRANSITION = "round_transition"
    GAME_OVER = "game_over"


class TransitionReason(Enum):
    """Why the last turn ended."""
    TIMER_EXPIRED = "timer_expired"
    WORDS_EXHAUSTED = "words_exhausted"


class Round(Enum):
    """The three fixed rounds, played in order."""
    DESCRIBE = 1
    ACT_OUT = 2
    ONE_WORD = 3

    @property
    def title(self) -> str:
        return _ROUND_TEXT[self][0]

    @property
    def description(self) -> str:
        return _ROUND_TEXT[self][1]

    @property
    def short_name(self) -> str:
        return _ROUND_TEXT[self][2]

    @property
    def next(self) -> Optional["Round"]:
        """The round after this one, or None for the final round."""
        if self.value >= config.ROUND_COUNT:
            return None
        return Round(self.value + 1)


_ROUND_TEXT: Dict[Round, Tuple[str, str, str]] = {
    Round.DESCRIBE: (
        "Round 1: Describe the Word",
        "Describe the word without saying the word itself",
        "Describe",
    ),
    Round.ACT_OUT: (
        "Round 2: Act Out the Word",
        "Act out the word using gestures and body language",
        "Act Out",
    ),
    Round.ONE_WORD: (
        "Round 3: One Word Only",
        "Describe the word using only one word",
        "One Word",
    ),
}


class WordValidation(Enum):
    """Outcome of adding a word to the catalog."""
    SUCCESS = "success"
    EMPTY = "empty"
    TOO_LONG = "too_long"
    DUPLICATE = "duplicate"

    @property
    def error_message(self) -> Optional[str]:
        if self is WordValidation.EMPTY:
            return "Word cannot be empty"
        if self is WordValidation.TOO_LONG:
            return f"Word is too long (max {config.MAX_WORD_LENGTH} characters)"
        if self is WordValidation.DUPLICATE:
            return "Word already exists"
        return None


@dataclass
class Word:
    """A word in the catalog. Only `used` changes after creation."""
    text: str
    word_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    used: bool = False


@dataclass
class RoundStat:
    """Time played and words guessed by each team in one round."""
    time_seconds: Dict[int, int] = field(default_factory=lambda: {1: 0, 2: 0})
    correct: Dict[int, int] = field(default_factory=lambda: {1: 0, 2: 0})

    def add_time(self, team: int, seconds: int):
        self.time_seconds[validate_team(team)] += seconds

    def add_correct(self, team: int):
        self.correct[validate_team(team)] += 1

    @property
    def total_correct(self) -> int:
        return self.correct[1] + self.correct[2]


@dataclass(frozen=True)
class WordStat:
    """How a single word played across the game."""
    word: Word
    skips: int
    average_time: float
    total_time: int

    @property
    def average_display(self) -> str:
        return format_average_time(self.average_time)


@dataclass(frozen=True)
class RoundWordsPerMinute:
    """Words-per-minute for both teams in one round (None when no time recorded)."""
    round: Round
    team1_wpm: Optional[float]
    team2_wpm: Optional[float]

    def for_team(self, team: int) -> Optional[float]:
        return self.team1_wpm if validate_team(team) == 1 else self.team2_wpm

    def display(self, team: int) -> str:
        return format_wpm(self.for_team(team))


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of the game handed to the presentation layer."""
    phase: Phase
    current_round: Round
    current_team: int
    transition_reason: Optional[TransitionReason]
    current_word: Optional[Word]
    time_remaining: int
    timer_duration: int
    timer_running: bool
    scores: Dict[int, int]
    skip_enabled: bool
    unused_word_count: int
    total_word_count: int

    @property
    def time_display(self) -> str:
        return format_time(self.time_remaining)

    @property
    def current_word_text(self) -> Optional[str]:
        return self.current_word.text if self.current_word else None
