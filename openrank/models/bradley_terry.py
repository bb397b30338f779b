"""Weng/Lin Bayesian Online Rating system, Bradley Terry Edition"""
import math
import numpy as np
from openrank.core.base import TeamRatingSystem
from openrank.core.rating import team_rating_arrays
from openrank.utils.constants import DEFAULT_BETA, DEFAULT_KAPPA, DEFAULT_MU, DEFAULT_SIGMA, DEFAULT_TAU
from openrank.utils.math_utils import sigmoid, sigmoid_scalar
from openrank.utils.rank_utils import ladder_pairs


def outcome_scalar(rank_i, rank_q):
    """1 if team i finished ahead of team q, 0.5 for a tie and 0 otherwise"""
    if rank_q > rank_i:
        return 1.0
    if rank_q == rank_i:
        return 0.5
    return 0.0


def outcome_matrix(ranks: np.ndarray) -> np.ndarray:
    """outcome_scalar for every (i, q) pair at once"""
    rank_i = ranks[:, None]
    rank_q = ranks[None, :]
    return np.where(rank_q > rank_i, 1.0, np.where(rank_q == rank_i, 0.5, 0.0))


class BradleyTerryFull(TeamRatingSystem):
    """The Bayesian Online Rating System introduced by Weng and Lin, comparing every pair of teams"""

    def __init__(
        self,
        mu: float = DEFAULT_MU,
        sigma: float = DEFAULT_SIGMA,
        beta: float = DEFAULT_BETA,
        kappa: float = DEFAULT_KAPPA,
        tau: float = DEFAULT_TAU,
        limit_sigma: bool = False,
        balance: bool = False,
    ):
        super().__init__(mu=mu, sigma=sigma, beta=beta, kappa=kappa, limit_sigma=limit_sigma, balance=balance)
        self.tau = tau
        self.tau_squared = tau**2.0

    def inflate_sigma(self, sigma):
        """the drift is added to sigma itself rather than to the variance"""
        return sigma + self.tau_squared

    def compute_pressures(self, team_ratings):
        mus, sigma2s, ranks = team_rating_arrays(team_ratings)
        num_teams = mus.shape[0]
        not_self = ~np.eye(num_teams, dtype=np.bool_)

        combined_sigma2s = sigma2s[:, None] + sigma2s[None, :] + self.two_beta_squared  # i x q
        combined_devs = np.sqrt(combined_sigma2s)
        probs = sigmoid((mus[:, None] - mus[None, :]) / combined_devs)
        outcomes = outcome_matrix(ranks)

        sigma2_over_devs = sigma2s[:, None] / combined_devs
        gammas = np.sqrt(sigma2_over_devs)
        omega_terms = sigma2_over_devs * (outcomes - probs)
        delta_terms = ((gammas * sigma2_over_devs) / combined_devs) * probs * (1.0 - probs)

        omegas = (omega_terms * not_self).sum(axis=1)
        deltas = (delta_terms * not_self).sum(axis=1)
        return omegas, deltas


class BradleyTerryPartial(TeamRatingSystem):
    """The Bayesian Online Rating System introduced by Weng and Lin, comparing only rank adjacent teams"""

    def __init__(
        self,
        mu: float = DEFAULT_MU,
        sigma: float = DEFAULT_SIGMA,
        beta: float = DEFAULT_BETA,
        kappa: float = DEFAULT_KAPPA,
        tau: float = DEFAULT_TAU,
        limit_sigma: bool = False,
        balance: bool = False,
    ):
        super().__init__(mu=mu, sigma=sigma, beta=beta, kappa=kappa, limit_sigma=limit_sigma, balance=balance)
        self.tau = tau
        self.tau_squared = tau**2.0

    def inflate_sigma(self, sigma):
        return math.sqrt(sigma**2.0 + self.tau_squared)

    def compute_pressures(self, team_ratings):
        neighbours = ladder_pairs(team_ratings)
        omegas = np.zeros(len(team_ratings), dtype=np.float64)
        deltas = np.zeros(len(team_ratings), dtype=np.float64)

        for idx, team_i in enumerate(team_ratings):
            for team_q in neighbours[idx]:
                combined_dev = math.sqrt(team_i.sigma_squared + team_q.sigma_squared + self.two_beta_squared)
                prob = sigmoid_scalar((team_i.mu - team_q.mu) / combined_dev)
                sigma2_over_dev = team_i.sigma_squared / combined_dev
                gamma = math.sqrt(sigma2_over_dev)

                omegas[idx] += sigma2_over_dev * (outcome_scalar(team_i.rank, team_q.rank) - prob)
                deltas[idx] += ((gamma * sigma2_over_dev) / combined_dev) * prob * (1.0 - prob)
        return omegas, deltas
