"""outcome probabilities for a match between teams with known ratings"""
import math
from typing import List, Sequence, Tuple
import numpy as np
from openrank.core.errors import check_teams
from openrank.core.rating import Rating, calculate_team_ratings, team_rating_arrays
from openrank.utils.constants import DEFAULT_BETA, DEFAULT_KAPPA, RANK_PROBABILITY_DECIMALS
from openrank.utils.log_utils import get_logger
from openrank.utils.math_utils import norm_cdf, norm_cdf_vector, norm_ppf

logger = get_logger(__name__)


class Predictor:
    """
    Predicts win, draw and ranking probabilities from current ratings under a gaussian
    performance model. Teams are aggregated exactly as the rating models aggregate them.

    Attributes:
        beta (float): performance noise of a single player.
        kappa (float): guard used by balance weighting.
        balance (bool): if set, weaker teammates count for more when aggregating a team.
    """

    def __init__(self, beta: float = DEFAULT_BETA, kappa: float = DEFAULT_KAPPA, balance: bool = False):
        self.beta = beta
        self.kappa = kappa
        self.balance = balance
        self.two_beta_squared = 2.0 * (beta**2.0)

    def team_arrays(self, teams: Sequence[Sequence[Rating]]):
        team_ratings = calculate_team_ratings(teams, balance=self.balance, kappa=self.kappa)
        mus, sigma2s, _ = team_rating_arrays(team_ratings)
        return mus, sigma2s

    def mean_win_probabilities(self, mus: np.ndarray, sigma2s: np.ndarray) -> np.ndarray:
        """each team's win probability against every other team, averaged over opponents"""
        num_teams = mus.shape[0]
        combined_devs = np.sqrt(self.two_beta_squared + sigma2s[:, None] + sigma2s[None, :])
        probs = norm_cdf_vector((mus[:, None] - mus[None, :]) / combined_devs)
        probs[np.eye(num_teams, dtype=np.bool_)] = 0.0
        return probs.sum(axis=1) / (num_teams - 1)

    def chance_of_winning(self, teams: Sequence[Sequence[Rating]]) -> List[float]:
        """
        Probability of each team winning the match.

        For two teams this is exact. For more teams each team's average pairwise win probability
        is renormalized so the result sums to one, an approximation rather than a joint probability.
        """
        check_teams(teams)
        logger.debug('chance_of_winning for %d teams', len(teams))
        mus, sigma2s = self.team_arrays(teams)

        if len(teams) == 2:
            prob = norm_cdf((mus[0] - mus[1]) / math.sqrt(self.two_beta_squared + sigma2s[0] + sigma2s[1]))
            return [prob, 1.0 - prob]

        win_probs = self.mean_win_probabilities(mus, sigma2s)
        return (win_probs / win_probs.sum()).tolist()

    def chance_of_draw(self, teams: Sequence[Sequence[Rating]]) -> float:
        """probability of the match ending in a draw, averaged over every pair of teams"""
        check_teams(teams)
        logger.debug('chance_of_draw for %d teams', len(teams))
        total_player_count = sum(len(team) for team in teams)
        draw_probability = 1.0 / total_player_count
        draw_margin = math.sqrt(total_player_count) * self.beta * norm_ppf((1.0 + draw_probability) / 2.0)

        mus, sigma2s = self.team_arrays(teams)
        pairwise_probs = []
        for idx_a in range(len(teams)):
            for idx_b in range(idx_a + 1, len(teams)):
                mu_a, mu_b = mus[idx_a], mus[idx_b]
                combined_dev = math.sqrt(self.two_beta_squared + sigma2s[idx_a] + sigma2s[idx_b])
                prob = norm_cdf((draw_margin - mu_a + mu_b) / combined_dev) - norm_cdf(
                    (mu_b - mu_a - draw_margin) / combined_dev
                )
                pairwise_probs.append(prob)
        return sum(pairwise_probs) / len(pairwise_probs)

    def chance_of_ranks(self, teams: Sequence[Sequence[Rating]]) -> Tuple[List[int], List[float]]:
        """
        Most likely finishing order and the probability behind it.

        Returns:
            (ranks, probs): ranks start at 1 and teams whose probabilities agree to six decimals
            share a rank, the next distinct team takes its position (1, 1, 3, ...).
        """
        check_teams(teams)
        logger.debug('chance_of_ranks for %d teams', len(teams))
        mus, sigma2s = self.team_arrays(teams)
        win_probs = self.mean_win_probabilities(mus, sigma2s)
        normalized_probs = (win_probs / win_probs.sum()).tolist()

        scale = 10**RANK_PROBABILITY_DECIMALS
        # round half away from zero, probabilities are never negative
        rounded = [math.floor(prob * scale + 0.5) for prob in normalized_probs]
        order = sorted(range(len(teams)), key=lambda idx: -rounded[idx])

        ranks = [0] * len(teams)
        current_rank = 1
        for position, team_idx in enumerate(order):
            if position > 0 and rounded[team_idx] < rounded[order[position - 1]]:
                current_rank = position + 1
            ranks[team_idx] = current_rank
        return ranks, normalized_probs
