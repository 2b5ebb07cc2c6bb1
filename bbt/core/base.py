"""base class for ranked rating systems"""
import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence
from bbt.core.rating import Rating, Outcome
from bbt.utils.constants import DEFAULT_MU, DEFAULT_SIGMA

logger = logging.getLogger(__name__)


class RankedRatingSystem(ABC):
    """
    Base class for rating systems that learn from ranked matches between teams. It defines the
    update entry point every system implements and the conveniences built on top of it.

    Attributes:
        initial_mu (float): mean given to ratings created by the system
        initial_sigma (float): standard deviation given to ratings created by the system
    """

    def __init__(self, initial_mu: float = DEFAULT_MU, initial_sigma: float = DEFAULT_SIGMA):
        """
        Parameters:
            initial_mu (float): mean of newly created ratings
            initial_sigma (float): standard deviation of newly created ratings
        """
        self.initial_mu = initial_mu
        self.initial_sigma = initial_sigma

    def new_rating(self) -> Rating:
        """a fresh rating at the system's prior"""
        return Rating(self.initial_mu, self.initial_sigma)

    @abstractmethod
    def update_ratings(self, teams: Sequence[Sequence[Rating]], ranks: Sequence[int]) -> None:
        """
        Updates every rating of every team in place based on the finishing order of one match.

        Parameters:
            teams (sequence of sequences of Rating): the players of each team
            ranks (sequence of int): finishing rank of each team, lower is better and equal ranks are a draw

        Raises:
            RatingUpdateError: if the input is malformed, before any rating is modified
        """
        raise NotImplementedError

    def duel(self, p1: Rating, p2: Rating, outcome: Outcome):
        """
        Updates two players after a head to head game, outcome is from p1's perspective.

        Returns:
            tuple of (p1, p2), the same objects that were passed in
        """
        self.update_ratings([[p1], [p2]], Outcome(outcome).ranks())
        return p1, p2

    def win_probability(self, team_a: Sequence[Rating], team_b: Sequence[Rating]) -> float:
        """probability that team_a finishes ahead of team_b"""
        raise NotImplementedError

    def fit_dataset(self, dataset, ratings: Optional[dict] = None) -> dict:
        """
        Replays every match of a dataset in order.

        Parameters:
            dataset (MatchDataset): the matches to learn from
            ratings (dict, optional): player id to Rating, players missing from it start at the prior

        Returns:
            dict: player id to Rating, the passed in dict if one was given
        """
        if ratings is None:
            ratings = {}
        num_new = 0
        for teams, ranks in dataset:
            rating_teams = []
            for team in teams:
                rating_team = []
                for player in team:
                    if player not in ratings:
                        ratings[player] = self.new_rating()
                        num_new += 1
                    rating_team.append(ratings[player])
                rating_teams.append(rating_team)
            self.update_ratings(rating_teams, ranks)
        logger.info(f'fit {len(dataset)} matches, {num_new} new players, {len(ratings)} players rated')
        return ratings

    def print_leaderboard(self, ratings: dict, num_places: Optional[int] = None):
        """
        Prints players ordered by conservative estimate.

        Parameters:
            ratings (dict): player id to Rating
            num_places (int, optional): number of top places to show, all if None
        """
        ordered = sorted(ratings.items(), key=lambda item: item[1].conservative_estimate(), reverse=True)
        if num_places is not None:
            ordered = ordered[:num_places]
        max_len = min(max([len(str(player)) for player in ratings] + [10]), 25)
        print(f'{"competitor": <{max_len}}\t{"mu - (3 * sd)"}')
        for player, rating in ordered:
            print(f'{str(player): <{max_len}}\t{rating.conservative_estimate():.6f}')
