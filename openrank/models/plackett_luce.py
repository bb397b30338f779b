"""Weng/Lin Bayesian Online Rating system, Plackett Luce Edition"""
import numpy as np
from openrank.core.base import TeamRatingSystem
from openrank.core.rating import count_rank_ties, sum_q, sum_team_sigmas, team_rating_arrays


class PlackettLuce(TeamRatingSystem):
    """
    Weng and Lin's generalization of the Plackett-Luce model. A ranking is treated as a
    sequence of eliminations where the team finishing in each place wins against everyone
    still left. All teams share a single scale c and no drift term is applied.

    A team only accumulates over the placings it contested (its own and every better one),
    so the winner of a 1v1 between equal teams gains +0.5*s2/c rather than losing mu.
    """

    def compute_pressures(self, team_ratings):
        mus, sigma2s, ranks = team_rating_arrays(team_ratings)
        num_teams = mus.shape[0]
        c = sum_team_sigmas(team_ratings, self.beta)
        tie_counts = np.array(count_rank_ties(team_ratings), dtype=np.float64)
        sum_qs = sum_q(team_ratings, c)

        # share of team i in the contest for place j, i x j
        shares = np.exp(mus / c)[:, None] / sum_qs[None, :]
        # team i only takes part in the contests for places at or above its own
        contested = ranks[None, :] <= ranks[:, None]

        omegas = (((np.eye(num_teams) - shares) / tie_counts[None, :]) * contested).sum(axis=1)
        deltas = ((shares * (1.0 - shares) / tie_counts[None, :]) * contested).sum(axis=1)

        gamma = self.sigma / c
        omegas *= sigma2s / c
        deltas *= (sigma2s / (c**2.0)) * gamma
        return omegas, deltas
