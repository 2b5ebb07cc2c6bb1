"""Classes for working with logs of ranked matches"""

import logging
from typing import List, Sequence, Tuple
import polars as pl

logger = logging.getLogger(__name__)


class MatchDataset:
    """
    Ranked matches between teams in the order they were played.

    Built from a long format dataframe with one row per player per match. Matches and the
    teams inside each match keep the order in which they first appear in the dataframe.
    Iterating yields (teams, ranks) where teams is a list of lists of player ids.
    """

    def __init__(
        self,
        df: pl.DataFrame,
        match_col: str = 'match_id',
        team_col: str = 'team_id',
        player_col: str = 'player_id',
        rank_col: str = 'rank',
        verbose: bool = True,
    ):
        missing = [col for col in (match_col, team_col, player_col, rank_col) if col not in df.columns]
        if missing:
            raise ValueError(f'dataframe is missing columns {missing}')

        self.teams = []
        self.ranks = []
        for match_df in df.partition_by(match_col, maintain_order=True):
            match_teams = []
            match_ranks = []
            for team_df in match_df.partition_by(team_col, maintain_order=True):
                if team_df[rank_col].n_unique() != 1:
                    raise ValueError(
                        f'players of team {team_df[team_col][0]} in match {team_df[match_col][0]} have different ranks'
                    )
                match_teams.append(team_df[player_col].to_list())
                match_ranks.append(team_df[rank_col][0])
            self.teams.append(match_teams)
            self.ranks.append(match_ranks)
        self._init_players()

        if verbose:
            self._log_stats()

    def _init_players(self):
        """collect player ids in order of first appearance"""
        seen = {}
        for match_teams in self.teams:
            for team in match_teams:
                for player in team:
                    seen.setdefault(player, None)
        self.players = list(seen)
        self.num_players = len(self.players)

    def _log_stats(self):
        logger.info(f'Loaded dataset with {len(self)} matches and {self.num_players} unique players')

    def __len__(self):
        return len(self.teams)

    def __iter__(self):
        yield from zip(self.teams, self.ranks)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return self.init_from_lists(list(zip(self.teams[key], self.ranks[key])))
        raise ValueError('Only slice indexing supported')

    @classmethod
    def init_from_lists(cls, matches: Sequence[Tuple[List[list], List[int]]]):
        """Factory method for creating a dataset from (teams, ranks) pairs already in memory."""
        dataset = cls.__new__(cls)
        dataset.teams = [[list(team) for team in teams] for teams, _ in matches]
        dataset.ranks = [list(ranks) for _, ranks in matches]
        dataset._init_players()
        return dataset
