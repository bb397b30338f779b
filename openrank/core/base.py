"""base class for multi team rating systems"""
import math
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple
import numpy as np
from openrank.core.errors import RateParameterError, check_rate_parameters
from openrank.core.rating import Rating, TeamRating, calculate_team_ratings
from openrank.utils.constants import (
    DEFAULT_BETA,
    DEFAULT_KAPPA,
    DEFAULT_MU,
    DEFAULT_SIGMA,
    WEIGHT_MAX,
    WEIGHT_MIN,
)
from openrank.utils.log_utils import get_logger
from openrank.utils.rank_utils import normalize, unwind

logger = get_logger(__name__)


class TeamRatingSystem(ABC):
    """
    Base class for the Weng-Lin family of team rating systems. Subclasses only decide how the
    per team mean shift (omega) and variance shrink (delta) are accumulated from a match result,
    everything else about a rating update is shared and lives here.

    Attributes:
        mu (float): mean skill assigned to new players.
        sigma (float): skill standard deviation assigned to new players.
        beta (float): performance noise, the spread of a player's showing around their skill.
        kappa (float): floor on the variance shrink factor so sigma stays positive.
        limit_sigma (bool): if set, an update can never increase a player's sigma.
        balance (bool): if set, weaker teammates count for more when aggregating a team.
    """

    def __init__(
        self,
        mu: float = DEFAULT_MU,
        sigma: float = DEFAULT_SIGMA,
        beta: float = DEFAULT_BETA,
        kappa: float = DEFAULT_KAPPA,
        limit_sigma: bool = False,
        balance: bool = False,
    ):
        self.mu = mu
        self.sigma = sigma
        self.beta = beta
        self.kappa = kappa
        self.limit_sigma = limit_sigma
        self.balance = balance
        self.beta_squared = beta**2.0
        self.two_beta_squared = 2.0 * self.beta_squared

    def rating(self, mu: Optional[float] = None, sigma: Optional[float] = None) -> Rating:
        """a fresh rating, anything not specified comes from the model defaults"""
        return Rating(
            mu=self.mu if mu is None else mu,
            sigma=self.sigma if sigma is None else sigma,
        )

    def inflate_sigma(self, sigma: float) -> float:
        """add the per match skill drift to a player's sigma, no drift by default"""
        return sigma

    @abstractmethod
    def compute_pressures(self, team_ratings: List[TeamRating]) -> Tuple[np.ndarray, np.ndarray]:
        """
        Accumulate the omega and delta of every team from the match result.

        Parameters:
            team_ratings (list of TeamRating): aggregated teams sorted best rank first.

        Returns:
            (omegas, deltas): arrays with one entry per team.
        """
        raise NotImplementedError

    def rate(
        self,
        teams: Sequence[Sequence[Rating]],
        ranks: Optional[Sequence] = None,
        scores: Optional[Sequence] = None,
        weights: Optional[Sequence[Sequence[float]]] = None,
    ) -> List[List[Rating]]:
        """
        Compute every player's rating after a match.

        Parameters:
            teams (list of lists of Rating): the players of each team.
            ranks (list, optional): finishing position of each team, lower is better, ties allowed.
            scores (list, optional): score of each team, higher is better. Exactly one of ranks or
                                     scores must be given.
            weights (list of lists of float, optional): per player contribution, same shape as teams.

        Returns:
            list of lists of Rating: new ratings in the same order as teams. The inputs are not modified.

        Raises:
            RateParameterError: if the shapes of the inputs are inconsistent.
        """
        try:
            check_rate_parameters(teams, ranks, scores, weights)
        except RateParameterError as err:
            logger.debug('rejected rate call: %s', err)
            raise

        working_teams = [[Rating(player.mu, self.inflate_sigma(player.sigma)) for player in team] for team in teams]
        if scores is not None:
            ranks = [-score for score in scores]
        ranks = list(ranks)

        ordered_teams, original_indices = unwind(ranks, working_teams)
        ordered_ranks = sorted(ranks)
        ordered_weights = None
        if weights is not None:
            ordered_weights = [normalize(weights[idx], WEIGHT_MIN, WEIGHT_MAX) for idx in original_indices]
        logger.debug(
            '%s rating %d teams with sizes %s and ranks %s',
            type(self).__name__,
            len(teams),
            [len(team) for team in teams],
            ranks,
        )

        updated_teams = self.update_teams(ordered_teams, ordered_ranks, ordered_weights)
        result, _ = unwind(original_indices, updated_teams)

        if self.limit_sigma:
            result = [
                [
                    Rating(player.mu, min(player.sigma, original.sigma))
                    for player, original in zip(new_team, original_team)
                ]
                for new_team, original_team in zip(result, teams)
            ]
        return result

    def update_teams(
        self,
        teams: List[List[Rating]],
        ranks: List,
        weights: Optional[List[List[float]]] = None,
    ) -> List[List[Rating]]:
        """apply omega and delta to every player of teams that are already sorted by rank"""
        team_ratings = calculate_team_ratings(teams, ranks, self.balance, self.kappa)
        omegas, deltas = self.compute_pressures(team_ratings)

        updated_teams = []
        for team_idx, team_rating in enumerate(team_ratings):
            omega = float(omegas[team_idx])
            delta = float(deltas[team_idx])
            updated_team = []
            for player_idx, player in enumerate(team_rating.team):
                weight = 1.0 if weights is None else weights[team_idx][player_idx]
                # the player's share of the team variance
                share = (player.sigma**2.0) / team_rating.sigma_squared
                if omega > 0.0:
                    mu = player.mu + (share * omega * weight)
                    sigma_multiplier = 1.0 - (share * delta * weight)
                else:
                    mu = player.mu + (share * omega / weight)
                    sigma_multiplier = 1.0 - (share * delta / weight)
                sigma = player.sigma * math.sqrt(max(sigma_multiplier, self.kappa))
                updated_team.append(Rating(mu=mu, sigma=sigma))
            updated_teams.append(updated_team)
        return updated_teams
