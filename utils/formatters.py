"""Text formatting helpers."""

from typing import Optional


def format_time(seconds: float) -> str:
    """Format a countdown value as M:SS."""
    seconds = max(0, int(seconds))
    mins = seconds // 60
    secs = seconds % 60
    return f"{mins}:{secs:02d}"


def format_average_time(seconds: float) -> str:
    """Format an average time in seconds to readable string."""
    if seconds < 60:
        return f"{seconds:.1f}s"
    mins = int(seconds // 60)
    secs = seconds % 60
    return f"{mins}m {secs:.1f}s"


def format_wpm(wpm: Optional[float], decimals: int = 1) -> str:
    """Format words-per-minute; missing values render as a dash."""
    if wpm is None:
        return "-"
    return f"{wpm:.{decimals}f}"


def format_team(team: int) -> str:
    """Format a team number for display."""
    return f"Team {team}"
