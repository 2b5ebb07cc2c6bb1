"""bbt, Bayesian skill ratings for ranked team games"""
from bbt.core.rating import Rating, Outcome
from bbt.core.errors import RatingUpdateError, InputLengthMismatchError, InsufficientTeamsError, EmptyTeamError
from bbt.models.weng_lin import Rater
from bbt.utils.data_utils import MatchDataset

__all__ = [
    'Rating',
    'Outcome',
    'Rater',
    'MatchDataset',
    'RatingUpdateError',
    'InputLengthMismatchError',
    'InsufficientTeamsError',
    'EmptyTeamError',
]
