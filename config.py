"""Configuration constants for the Nouns On A Phone game engine."""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Turn timer (seconds)
DEFAULT_TURN_DURATION = int(os.getenv("TURN_DURATION_SEC", "60"))
TIMER_TICK_SECONDS = float(os.getenv("TIMER_TICK_SEC", "1.0"))

# Word catalog
MAX_WORD_LENGTH = 50
MIN_WORDS_TO_START = 3
SAMPLE_WORD_COUNT = 5

# Rounds
ROUND_COUNT = 3  # Describe, Act Out, One Word

# Analytics
SECONDS_PER_MINUTE = 60.0
MIN_WORD_TIME_SECONDS = 1  # Any displayed word counts at least one second

