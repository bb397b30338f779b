"""Weng/Lin Bayesian Online Rating system, Thurstone Mosteller Edition"""
import math
import numpy as np
from openrank.core.base import TeamRatingSystem
from openrank.core.rating import team_rating_arrays
from openrank.utils.constants import (
    DEFAULT_BETA,
    DEFAULT_EPSILON,
    DEFAULT_KAPPA,
    DEFAULT_MU,
    DEFAULT_SIGMA,
    DEFAULT_TAU,
)
from openrank.utils.math_utils import v, w, vt, wt, v_vector, w_vector, vt_vector, wt_vector
from openrank.utils.rank_utils import ladder_pairs


class ThurstoneMostellerBase(TeamRatingSystem):
    """shared parameters of the two Thurstone-Mosteller variants"""

    def __init__(
        self,
        mu: float = DEFAULT_MU,
        sigma: float = DEFAULT_SIGMA,
        beta: float = DEFAULT_BETA,
        kappa: float = DEFAULT_KAPPA,
        tau: float = DEFAULT_TAU,
        epsilon: float = DEFAULT_EPSILON,
        limit_sigma: bool = False,
        balance: bool = False,
    ):
        super().__init__(mu=mu, sigma=sigma, beta=beta, kappa=kappa, limit_sigma=limit_sigma, balance=balance)
        self.tau = tau
        self.tau_squared = tau**2.0
        self.epsilon = epsilon

    def inflate_sigma(self, sigma):
        return math.sqrt(sigma**2.0 + self.tau_squared)


class ThurstoneMostellerFull(ThurstoneMostellerBase):
    """The Bayesian Online Rating System introduced by Weng and Lin with gaussian comparisons between every pair of teams"""

    def compute_pressures(self, team_ratings):
        mus, sigma2s, ranks = team_rating_arrays(team_ratings)
        num_teams = mus.shape[0]
        not_self = ~np.eye(num_teams, dtype=np.bool_)

        combined_devs = np.sqrt(sigma2s[:, None] + sigma2s[None, :] + self.two_beta_squared)  # i x q
        norm_diffs = (mus[:, None] - mus[None, :]) / combined_devs
        sigma2_over_devs = sigma2s[:, None] / combined_devs
        gammas = np.sqrt(sigma2s)[:, None] / combined_devs
        delta_scales = (gammas * sigma2_over_devs) / combined_devs

        win_mask = ranks[None, :] > ranks[:, None]
        loss_mask = ranks[None, :] < ranks[:, None]
        draw_mask = (~win_mask) & (~loss_mask) & not_self

        omega_terms = np.zeros_like(norm_diffs)
        delta_terms = np.zeros_like(norm_diffs)
        if win_mask.any():
            omega_terms[win_mask] = sigma2_over_devs[win_mask] * v_vector(norm_diffs[win_mask], self.epsilon)
            delta_terms[win_mask] = delta_scales[win_mask] * w_vector(norm_diffs[win_mask], self.epsilon)
        if loss_mask.any():
            omega_terms[loss_mask] = -sigma2_over_devs[loss_mask] * v_vector(-norm_diffs[loss_mask], self.epsilon)
            delta_terms[loss_mask] = delta_scales[loss_mask] * w_vector(-norm_diffs[loss_mask], self.epsilon)
        if draw_mask.any():
            omega_terms[draw_mask] = sigma2_over_devs[draw_mask] * vt_vector(norm_diffs[draw_mask], self.epsilon)
            delta_terms[draw_mask] = delta_scales[draw_mask] * wt_vector(norm_diffs[draw_mask], self.epsilon)

        return omega_terms.sum(axis=1), delta_terms.sum(axis=1)


class ThurstoneMostellerPartial(ThurstoneMostellerBase):
    """The Bayesian Online Rating System introduced by Weng and Lin with gaussian comparisons between rank adjacent teams"""

    def compute_pressures(self, team_ratings):
        neighbours = ladder_pairs(team_ratings)
        omegas = np.zeros(len(team_ratings), dtype=np.float64)
        deltas = np.zeros(len(team_ratings), dtype=np.float64)

        for idx, team_i in enumerate(team_ratings):
            for team_q in neighbours[idx]:
                combined_dev = 2.0 * math.sqrt(team_i.sigma_squared + team_q.sigma_squared + self.two_beta_squared)
                norm_diff = (team_i.mu - team_q.mu) / combined_dev
                margin = self.epsilon / combined_dev
                sigma2_over_dev = team_i.sigma_squared / combined_dev
                gamma = math.sqrt(sigma2_over_dev)
                delta_scale = (gamma * sigma2_over_dev) / combined_dev

                if team_q.rank > team_i.rank:
                    omegas[idx] += sigma2_over_dev * v(norm_diff, margin)
                    deltas[idx] += delta_scale * w(norm_diff, margin)
                elif team_q.rank < team_i.rank:
                    omegas[idx] -= sigma2_over_dev * v(-norm_diff, margin)
                    deltas[idx] += delta_scale * w(-norm_diff, margin)
                else:
                    omegas[idx] += sigma2_over_dev * vt(norm_diff, margin)
                    deltas[idx] += delta_scale * wt(norm_diff, margin)
        return omegas, deltas
