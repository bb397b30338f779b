"""exceptions raised when the inputs to a rating or prediction call are malformed"""
from typing import Optional, Sequence


class RateParameterError(ValueError):
    """base class for every malformed input to rate() or the predictor"""

    message = 'invalid rating parameters'

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class LessThanTwoTeamsError(RateParameterError):
    message = 'less than two teams'


class EmptyTeamError(RateParameterError):
    message = 'empty team'


class NoRanksOrScoresError(RateParameterError):
    message = 'ranks or scores must be provided'


class RanksAndScoresError(RateParameterError):
    message = 'ranks and scores cannot be provided together'


class RanksAndTeamsMismatchError(RateParameterError):
    message = 'ranks must have same shape as teams'


class ScoresAndTeamsMismatchError(RateParameterError):
    message = 'scores must have same shape as teams'


class WeightsAndTeamsMismatchError(RateParameterError):
    message = 'weights must have same shape as teams'


def check_teams(teams: Optional[Sequence[Sequence]]):
    """at least two teams, none of them empty"""
    if teams is None or len(teams) < 2:
        raise LessThanTwoTeamsError()
    for team in teams:
        if len(team) < 1:
            raise EmptyTeamError()


def check_rate_parameters(
    teams: Optional[Sequence[Sequence]],
    ranks: Optional[Sequence] = None,
    scores: Optional[Sequence] = None,
    weights: Optional[Sequence[Sequence[float]]] = None,
):
    """validate the shapes of the inputs to rate(), raising the first problem found"""
    check_teams(teams)

    if ranks is not None and scores is not None:
        raise RanksAndScoresError()
    if ranks is None and scores is None:
        raise NoRanksOrScoresError()

    if ranks is not None and len(ranks) != len(teams):
        raise RanksAndTeamsMismatchError()
    if scores is not None and len(scores) != len(teams):
        raise ScoresAndTeamsMismatchError()

    if weights is not None:
        if len(weights) != len(teams):
            raise WeightsAndTeamsMismatchError()
        for team, team_weights in zip(teams, weights):
            if len(team_weights) != len(team):
                raise WeightsAndTeamsMismatchError()
