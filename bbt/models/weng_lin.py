"""Weng/Lin Bayesian Online Rating system for ranked team games"""
import logging
import math
from typing import Sequence
import numpy as np
from scipy.stats import norm
from bbt.core.base import RankedRatingSystem
from bbt.core.errors import InputLengthMismatchError, InsufficientTeamsError, EmptyTeamError
from bbt.core.rating import Rating
from bbt.utils.constants import DEFAULT_MU, DEFAULT_SIGMA, DEFAULT_BETA, KAPPA, MIN_COMBINED_DEV, SQRT_2
from bbt.utils.constants import DRAW_INFORMATION
from bbt.utils.math_utils import norm_cdf, sigmoid_scalar
from bbt.utils.math_utils import v_and_w_win_scalar, v_and_w_draw_scalar, v_and_w_tie_scalar

logger = logging.getLogger(__name__)


class Rater(RankedRatingSystem):
    """
    The Bayesian Online Rating System introduced by Weng and Lin (Algorithm 1), generalized to teams.

    Each team's skill is the sum of its players' skills. Every team plays a virtual duel against
    its opponents, the mean and variance corrections of those duels are summed per team and then
    split between the players in proportion to the share of the team variance each one holds.

    Parameters:
        beta (float): standard deviation of performance around true skill, how much luck decides a game
        draw_probability (float): chance that two evenly matched teams draw, sets the draw margin
        kappa (float): lower bound on the multiplier applied to a player's variance in one update
        model (str): 'bt' for Bradley-Terry (logistic) or 'tm' for Thurstone-Mosteller (gaussian)
        pairing (str): 'full' duels every pair of teams, 'partial' only teams in the same or adjacent rank groups.
            with 'partial' a middle finisher's win and loss cancel out, so evenly rated players ranked
            between first and last are not pushed apart from each other
        initial_mu (float): mean of ratings created by new_rating
        initial_sigma (float): standard deviation of ratings created by new_rating
    """

    def __init__(
        self,
        beta: float = DEFAULT_BETA,
        draw_probability: float = 0.0,
        kappa: float = KAPPA,
        model: str = 'bt',
        pairing: str = 'full',
        initial_mu: float = DEFAULT_MU,
        initial_sigma: float = DEFAULT_SIGMA,
    ):
        super().__init__(initial_mu=initial_mu, initial_sigma=initial_sigma)
        if beta < 0.0:
            raise ValueError(f'beta must be non negative, got {beta}')
        if not 0.0 <= draw_probability < 1.0:
            raise ValueError(f'draw_probability must be in [0, 1), got {draw_probability}')
        self._beta = float(beta)
        self.two_beta_squared = 2.0 * (self._beta**2.0)
        self.kappa = kappa
        self.draw_probability = draw_probability
        self.epsilon = float(norm.ppf((draw_probability + 1.0) / 2.0)) * SQRT_2 * self._beta

        if model == 'bt':
            self.model_func = self.bradley_terry_pair_updates
            self.prob_func = sigmoid_scalar
        elif model == 'tm':
            self.model_func = self.thurstone_mosteller_pair_updates
            self.prob_func = norm_cdf
        else:
            raise ValueError(f'Invalid model {model}')
        self.model = model

        if pairing == 'full':
            self.opponents_func = self.all_opponents
        elif pairing == 'partial':
            self.opponents_func = self.adjacent_opponents
        else:
            raise ValueError(f'Invalid pairing {pairing}')
        self.pairing = pairing

    @property
    def beta(self):
        return self._beta

    def __repr__(self):
        return f'Rater(beta={self._beta}, draw_probability={self.draw_probability}, model={self.model!r}, pairing={self.pairing!r})'

    @staticmethod
    def validate(teams, ranks):
        if len(teams) != len(ranks):
            raise InputLengthMismatchError(len(teams), len(ranks))
        if len(teams) < 2:
            raise InsufficientTeamsError(len(teams))
        for team_idx, team in enumerate(teams):
            if len(team) == 0:
                raise EmptyTeamError(team_idx)

    @staticmethod
    def score(rank, other_rank):
        """1 for finishing ahead, 0.5 for a draw, 0 for finishing behind"""
        if rank < other_rank:
            return 1.0
        if rank == other_rank:
            return 0.5
        return 0.0

    @staticmethod
    def all_opponents(ranks):
        num_teams = len(ranks)
        return [[other_idx for other_idx in range(num_teams) if other_idx != team_idx] for team_idx in range(num_teams)]

    @staticmethod
    def adjacent_opponents(ranks):
        """
        teams tied with each team plus the teams of the rank groups directly above and below it

        evenly rated middle finishers can end level with each other, a strict order among them needs full pairing
        """
        distinct_ranks = sorted(set(ranks))
        rank_to_group = {rank: group_idx for group_idx, rank in enumerate(distinct_ranks)}
        groups = [[] for _ in distinct_ranks]
        for team_idx, rank in enumerate(ranks):
            groups[rank_to_group[rank]].append(team_idx)

        opponents = []
        for team_idx, rank in enumerate(ranks):
            group_idx = rank_to_group[rank]
            neighbours = []
            for neighbour_group in groups[max(group_idx - 1, 0) : group_idx + 2]:
                neighbours.extend(other_idx for other_idx in neighbour_group if other_idx != team_idx)
            opponents.append(neighbours)
        return opponents

    def thurstone_mosteller_pair_updates(self, norm_diff, outcome, eps):
        """v and w for one team against one opponent, outcome is the team's score"""
        if outcome == 1.0:
            return v_and_w_win_scalar(norm_diff, eps)
        if outcome == 0.0:
            v, w = v_and_w_win_scalar(-norm_diff, eps)
            return -v, w
        if eps > 0.0:
            return v_and_w_draw_scalar(norm_diff, eps)
        return v_and_w_tie_scalar(norm_diff)

    def bradley_terry_pair_updates(self, norm_diff, outcome, eps):
        prob = sigmoid_scalar(norm_diff)
        w = prob * (1.0 - prob)
        if outcome == 0.5:
            w *= DRAW_INFORMATION
        return outcome - prob, w

    def combined_dev(self, sigma2, other_sigma2):
        return max(math.sqrt(sigma2 + other_sigma2 + self.two_beta_squared), MIN_COMBINED_DEV)

    def win_probability(self, team_a: Sequence[Rating], team_b: Sequence[Rating]) -> float:
        """probability that team_a finishes ahead of team_b"""
        mu_a = sum(player.mu for player in team_a)
        mu_b = sum(player.mu for player in team_b)
        combined_dev = self.combined_dev(
            sum(player.sigma2 for player in team_a),
            sum(player.sigma2 for player in team_b),
        )
        return self.prob_func((mu_a - mu_b) / combined_dev)

    def update_ratings(self, teams: Sequence[Sequence[Rating]], ranks: Sequence[int]) -> None:
        """
        Updates every rating of every team in place based on the finishing order of one match.

        Parameters:
            teams (sequence of sequences of Rating): the players of each team
            ranks (sequence of int): finishing rank of each team, lower is better and equal ranks are a draw

        Raises:
            InputLengthMismatchError: teams and ranks differ in length
            InsufficientTeamsError: fewer than two teams
            EmptyTeamError: a team has no players
        """
        self.validate(teams, ranks)
        num_teams = len(teams)

        # step 1: team skill and variance
        team_mus = np.array([sum(player.mu for player in team) for team in teams], dtype=np.float64)
        team_sigma2s = np.array([sum(player.sigma2 for player in team) for team in teams], dtype=np.float64)

        # step 2: accumulate the corrections of every virtual duel per team
        omegas = np.zeros(num_teams, dtype=np.float64)
        deltas = np.zeros(num_teams, dtype=np.float64)
        for team_idx, opponents in enumerate(self.opponents_func(ranks)):
            sigma2 = team_sigma2s[team_idx]
            for other_idx in opponents:
                combined_dev = self.combined_dev(sigma2, team_sigma2s[other_idx])
                combined_sigma2 = combined_dev**2.0
                norm_diff = (team_mus[team_idx] - team_mus[other_idx]) / combined_dev
                outcome = self.score(ranks[team_idx], ranks[other_idx])
                v, w = self.model_func(norm_diff, outcome, self.epsilon / combined_dev)
                gamma = math.sqrt(sigma2) / combined_dev
                omegas[team_idx] += (sigma2 / combined_dev) * v
                deltas[team_idx] += gamma * (sigma2 / combined_sigma2) * w

        # step 3: split the team corrections between players
        new_ratings = []
        for team_idx, team in enumerate(teams):
            for player in team:
                share = player.sigma2 / team_sigma2s[team_idx]
                new_mu = player.mu + share * omegas[team_idx]
                sigma2_multiplier = max(1.0 - share * deltas[team_idx], self.kappa)
                new_ratings.append((player, float(new_mu), math.sqrt(player.sigma2 * sigma2_multiplier)))

        for player, new_mu, new_sigma in new_ratings:
            player.mu = new_mu
            player.sigma = new_sigma
        logger.debug(f'updated {len(new_ratings)} ratings across {num_teams} teams with ranks {list(ranks)}')
