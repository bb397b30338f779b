"""
regression values for the aggregation helpers come from the openskill test suites
"""
import dataclasses
import pytest
from openrank.core.rating import (
    Rating,
    calculate_rankings,
    calculate_team_ratings,
    count_rank_ties,
    sum_q,
    sum_team_sigmas,
)

MU = 25.0
SIGMA = 25.0 / 3.0
BETA = 25.0 / 6.0
KAPPA = 0.0001


def test_ordinal():
    assert Rating(25.0, 5.0).ordinal() == 10.0
    assert Rating(25.0, 5.0).ordinal(z=2.0) == 15.0
    # increasing in mu, decreasing in sigma
    assert Rating(26.0, 5.0).ordinal() > Rating(25.0, 5.0).ordinal()
    assert Rating(25.0, 6.0).ordinal() < Rating(25.0, 5.0).ordinal()


def test_rating_is_immutable():
    rating = Rating(MU, SIGMA)
    with pytest.raises(dataclasses.FrozenInstanceError):
        rating.mu = 30.0


def test_calculate_rankings():
    teams = [[Rating(MU, SIGMA)]] * 4
    assert calculate_rankings(teams) == [0, 1, 2, 3]
    assert calculate_rankings(teams, [1, 1, 1, 4]) == [0, 0, 0, 3]
    assert calculate_rankings(teams, [1, 2, 2, 5]) == [0, 1, 1, 3]
    assert calculate_rankings(teams, [-7, -7, 3, 3]) == [0, 0, 2, 2]


def test_calculate_team_ratings_sums():
    team_1 = [Rating(MU, SIGMA)]
    team_2 = [Rating(20.0, 2.0), Rating(30.0, 3.0)]
    team_ratings = calculate_team_ratings([team_1, team_2], [1, 2])
    assert team_ratings[0].mu == MU
    assert team_ratings[0].sigma_squared == pytest.approx(SIGMA**2.0)
    assert team_ratings[1].mu == 50.0
    assert team_ratings[1].sigma_squared == 13.0
    assert team_ratings[1].team is team_2
    assert [team_rating.rank for team_rating in team_ratings] == [0, 1]


def test_calculate_team_ratings_balance():
    # ordinals 27 and 17, the weaker player counts for more
    strong = Rating(30.0, 1.0)
    weak = Rating(20.0, 1.0)
    balance_weight = 1.0 + (10.0 / (27.0 + KAPPA))
    for team in ([strong, weak], [weak, strong]):
        team_rating = calculate_team_ratings([team, [strong]], balance=True, kappa=KAPPA)[0]
        assert team_rating.mu == pytest.approx(30.0 + (20.0 * balance_weight))
        assert team_rating.sigma_squared == pytest.approx(1.0 + balance_weight**2.0)


def test_c():
    team_1 = [Rating(MU, SIGMA)]
    team_2 = [Rating(MU, SIGMA), Rating(MU, SIGMA)]
    team_ratings = calculate_team_ratings([team_1, team_2], kappa=KAPPA)
    assert sum_team_sigmas(team_ratings, BETA) == pytest.approx(15.590239, abs=1e-3)

    team_5 = [Rating(MU, SIGMA) for _ in range(5)]
    team_ratings = calculate_team_ratings([team_5, list(team_5)], kappa=KAPPA)
    assert sum_team_sigmas(team_ratings, BETA) == pytest.approx(27.003, abs=1e-3)


def test_a():
    team_1 = [Rating(MU, SIGMA)]
    team_2 = [Rating(MU, SIGMA), Rating(MU, SIGMA)]
    teams = [team_1, team_2, list(team_2), list(team_1)]

    team_ratings = calculate_team_ratings(teams, kappa=KAPPA)
    assert count_rank_ties(team_ratings) == [1, 1, 1, 1]

    team_ratings = calculate_team_ratings(teams, [1, 1, 1, 4], kappa=KAPPA)
    assert count_rank_ties(team_ratings) == [3, 3, 3, 1]


def test_sum_q():
    team_1 = [Rating(MU, SIGMA)]
    team_2 = [Rating(MU, SIGMA), Rating(MU, SIGMA)]
    team_ratings = calculate_team_ratings([team_1, team_2], kappa=KAPPA)
    c = sum_team_sigmas(team_ratings, BETA)
    sums = sum_q(team_ratings, c)
    assert sums[0] == pytest.approx(29.67892702634643, abs=1e-3)
    assert sums[1] == pytest.approx(24.70819334370875, abs=1e-3)

    team_5 = [Rating(MU, SIGMA) for _ in range(5)]
    team_ratings = calculate_team_ratings([team_5, list(team_5)], kappa=KAPPA)
    c = sum_team_sigmas(team_ratings, BETA)
    sums = sum_q(team_ratings, c)
    assert sums[0] == pytest.approx(204.843788, abs=1e-3)
    assert sums[1] == pytest.approx(102.421894, abs=1e-3)
