"""Team scores and per-turn score history."""

from typing import Dict, List, Optional

from game.models import TEAMS, validate_team


class ScoreBoard:
    """Cumulative score per team plus the score after each completed turn."""

    def __init__(self):
        self.scores: Dict[int, int] = {}
        self.turn_scores: Dict[int, List[int]] = {}
        self.turn_count: Dict[int, int] = {}
        self.reset_scores()

    def increment_score(self, team: int):
        """Award one point to a team."""
        team = validate_team(team)
        self.scores[team] += 1
        self.turn_count[team] += 1

    def record_turn_score(self, team: int, score: int):
        """Append a cumulative score to the team's history."""
        self.turn_scores[validate_team(team)].append(score)

    def record_current_team_turn_score(self, team: int):
        """Append the team's current cumulative score to its history."""
        self.record_turn_score(team, self.get_score(team))

    def get_score(self, team: int) -> int:
        return self.scores[validate_team(team)]

    def get_winner(self) -> Optional[int]:
        """
        Get the team with the higher score.

        Returns:
            1 or 2, or None on a tie
        """
        if self.scores[1] > self.scores[2]:
            return 1
        if self.scores[2] > self.scores[1]:
            return 2
        return None

    def reset_scores(self):
        self.scores = {team: 0 for team in TEAMS}
        self.turn_scores = {team: [0] for team in TEAMS}
        self.turn_count = {team: 0 for team in TEAMS}

    def score_difference(self) -> int:
        return abs(self.scores[1] - self.scores[2])

    def is_tied(self) -> bool:
        return self.scores[1] == self.scores[2]

    def total_score(self) -> int:
        return sum(self.scores.values())
