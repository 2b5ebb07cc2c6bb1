"""errors raised when a rating update is given malformed input"""


class RatingUpdateError(ValueError):
    """base class for invalid input to update_ratings, raised before any rating is modified"""


class InputLengthMismatchError(RatingUpdateError):
    """the teams and ranks sequences are not the same length"""

    def __init__(self, num_teams, num_ranks):
        self.num_teams = num_teams
        self.num_ranks = num_ranks
        super().__init__(f'got {num_teams} teams but {num_ranks} ranks')


class InsufficientTeamsError(RatingUpdateError):
    """fewer than two teams took part"""

    def __init__(self, num_teams):
        self.num_teams = num_teams
        super().__init__(f'a match needs at least 2 teams, got {num_teams}')


class EmptyTeamError(RatingUpdateError):
    """the team at team_idx has no players"""

    def __init__(self, team_idx):
        self.team_idx = team_idx
        super().__init__(f'team {team_idx} is empty')
