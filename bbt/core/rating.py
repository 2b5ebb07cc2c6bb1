"""the per player skill belief and the outcome of a head to head duel"""
from collections.abc import Mapping
from enum import Enum
from bbt.utils.constants import DEFAULT_MU, DEFAULT_SIGMA, CONSERVATIVE_K


class Outcome(Enum):
    """outcome of a duel from the first player's perspective, valued like a match score"""

    WIN = 1.0
    LOSS = 0.0
    DRAW = 0.5

    def ranks(self):
        """the two team rank list equivalent to this outcome"""
        if self is Outcome.WIN:
            return [1, 2]
        if self is Outcome.LOSS:
            return [2, 1]
        return [1, 1]


class Rating:
    """
    Gaussian belief over a player's latent skill.

    Attributes:
        mu (float): mean of the skill estimate
        sigma (float): standard deviation of the skill estimate, expected to be > 0

    Ratings are plain values owned by the caller. A rater overwrites mu and sigma in place
    when the rating takes part in an update and never touches them otherwise.
    """

    __slots__ = ('mu', 'sigma')

    def __init__(self, mu: float = DEFAULT_MU, sigma: float = DEFAULT_SIGMA):
        self.mu = float(mu)
        self.sigma = float(sigma)

    @classmethod
    def default(cls):
        """a rating at the middle of the 0 to 50 scale"""
        return cls(DEFAULT_MU, DEFAULT_SIGMA)

    @property
    def sigma2(self):
        return self.sigma**2.0

    def conservative_estimate(self, k: float = CONSERVATIVE_K) -> float:
        """pessimistic skill score used for leaderboards"""
        return self.mu - k * self.sigma

    def to_dict(self) -> dict:
        return {'mu': self.mu, 'sigma': self.sigma}

    @classmethod
    def from_dict(cls, data):
        """accepts the mapping written by to_dict or the two field sequence [mu, sigma]"""
        if isinstance(data, Mapping):
            return cls(mu=data['mu'], sigma=data['sigma'])
        mu, sigma = data
        return cls(mu=mu, sigma=sigma)

    def __eq__(self, other):
        if not isinstance(other, Rating):
            return NotImplemented
        return (self.mu, self.sigma) == (other.mu, other.sigma)

    # mutable value type
    __hash__ = None

    def __lt__(self, other):
        if not isinstance(other, Rating):
            return NotImplemented
        return self.conservative_estimate() < other.conservative_estimate()

    def __gt__(self, other):
        if not isinstance(other, Rating):
            return NotImplemented
        return self.conservative_estimate() > other.conservative_estimate()

    def __repr__(self):
        return f'Rating(mu={self.mu:.6f}, sigma={self.sigma:.6f})'

    def __str__(self):
        return str(max(self.conservative_estimate(), 0.0))
