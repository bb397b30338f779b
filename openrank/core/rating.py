"""rating value types and the aggregation of player ratings into team ratings"""
import math
from collections import Counter
from dataclasses import dataclass
from typing import List, Optional, Sequence
import numpy as np
from openrank.utils.constants import DEFAULT_KAPPA, ORDINAL_Z


@dataclass(frozen=True)
class Rating:
    """
    A player's skill as a gaussian with mean mu and standard deviation sigma.

    Ratings are immutable, every update produces new instances.
    """

    mu: float
    sigma: float

    def ordinal(self, z: float = ORDINAL_Z) -> float:
        """conservative skill estimate, the true skill is ~99.7% likely to be higher for z=3"""
        return self.mu - (z * self.sigma)


@dataclass
class TeamRating:
    """intermediate aggregate of one team's players, only lives for the duration of a call"""

    mu: float
    sigma_squared: float
    team: Sequence[Rating]
    rank: int


def calculate_rankings(teams: Sequence[Sequence[Rating]], ranks: Optional[Sequence] = None) -> List[int]:
    """
    Assign a rank class to each team.

    ranks must already be sorted ascending. The class only moves forward (to the current
    index) when the rank strictly increases, so tied teams share a class. Without ranks
    each team's index is its class.
    """
    team_scores = list(ranks) if ranks is not None else list(range(len(teams)))
    rank_classes = []
    current = 0
    for idx, score in enumerate(team_scores):
        if idx > 0 and team_scores[idx - 1] < score:
            current = idx
        rank_classes.append(current)
    return rank_classes


def calculate_team_ratings(
    teams: Sequence[Sequence[Rating]],
    ranks: Optional[Sequence] = None,
    balance: bool = False,
    kappa: float = DEFAULT_KAPPA,
) -> List[TeamRating]:
    """
    Collapse each team into a single gaussian.

    The team mu is the (balance weighted) sum of player mus and the team variance the sum of
    the (balance weighted) player variances. With balance enabled, players further below the
    team's best ordinal count for more: w = 1 + (max_ordinal - ordinal) / (max_ordinal + kappa).
    """
    rank_classes = calculate_rankings(teams, ranks)
    team_ratings = []
    for team, rank in zip(teams, rank_classes):
        sorted_team = sorted(team, key=lambda player: player.ordinal(), reverse=True)
        mus = np.array([player.mu for player in sorted_team], dtype=np.float64)
        sigmas = np.array([player.sigma for player in sorted_team], dtype=np.float64)

        if balance:
            ordinals = np.array([player.ordinal() for player in sorted_team], dtype=np.float64)
            max_ordinal = ordinals[0]
            balance_weights = 1.0 + ((max_ordinal - ordinals) / (max_ordinal + kappa))
        else:
            balance_weights = np.ones_like(mus)

        team_ratings.append(
            TeamRating(
                mu=float(np.sum(mus * balance_weights)),
                sigma_squared=float(np.sum(np.square(sigmas * balance_weights))),
                team=team,
                rank=rank,
            )
        )
    return team_ratings


def count_rank_ties(team_ratings: Sequence[TeamRating]) -> List[int]:
    """for each team, how many teams (itself included) share its rank class"""
    rank_counts = Counter(team_rating.rank for team_rating in team_ratings)
    return [rank_counts[team_rating.rank] for team_rating in team_ratings]


def sum_team_sigmas(team_ratings: Sequence[TeamRating], beta: float) -> float:
    """shared scale of the plackett luce model, sqrt(sum(sigma_squared + beta^2))"""
    beta_squared = beta**2.0
    return math.sqrt(sum(team_rating.sigma_squared + beta_squared for team_rating in team_ratings))


def sum_q(team_ratings: Sequence[TeamRating], c: float) -> np.ndarray:
    """sum_q[j] is the total exp(mu_k / c) over every team k ranked at or below team j"""
    ranks = np.array([team_rating.rank for team_rating in team_ratings])
    exp_mus = np.exp(np.array([team_rating.mu for team_rating in team_ratings], dtype=np.float64) / c)
    masks = ranks[:, None] >= ranks[None, :]  # k x j
    return (exp_mus[:, None] * masks).sum(axis=0)


def team_rating_arrays(team_ratings: Sequence[TeamRating]):
    """mus, sigma_squareds and rank classes of the teams as numpy arrays"""
    mus = np.array([team_rating.mu for team_rating in team_ratings], dtype=np.float64)
    sigma2s = np.array([team_rating.sigma_squared for team_rating in team_ratings], dtype=np.float64)
    ranks = np.array([team_rating.rank for team_rating in team_ratings])
    return mus, sigma2s, ranks
