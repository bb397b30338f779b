import math
import statistics
import pytest
from openrank.core.errors import EmptyTeamError, LessThanTwoTeamsError
from openrank.core.rating import Rating
from openrank.predictor import Predictor

MU = 25.0
SIGMA = 25.0 / 3.0
BETA = 25.0 / 6.0


def standard_normal_cdf(x):
    return statistics.NormalDist().cdf(x)


def test_defaults():
    predictor = Predictor()
    assert predictor.beta == BETA
    assert predictor.balance is False
    assert Predictor(beta=2.0).two_beta_squared == 8.0


def test_chance_of_winning_equal_teams():
    predictor = Predictor()
    assert predictor.chance_of_winning([[Rating(MU, SIGMA)], [Rating(MU, SIGMA)]]) == [0.5, 0.5]


def test_chance_of_winning_two_teams():
    predictor = Predictor()
    teams = [[Rating(30.0, 4.0)], [Rating(20.0, 2.0), Rating(5.0, 3.0)]]
    expected = standard_normal_cdf(5.0 / math.sqrt(2.0 * BETA**2.0 + 16.0 + 13.0))
    prob_1, prob_2 = predictor.chance_of_winning(teams)
    assert prob_1 == pytest.approx(expected)
    assert prob_1 + prob_2 == pytest.approx(1.0)
    assert prob_1 > prob_2


def test_chance_of_winning_many_teams():
    predictor = Predictor()
    equal = predictor.chance_of_winning([[Rating(MU, SIGMA)] for _ in range(3)])
    assert equal == pytest.approx([1.0 / 3.0] * 3)

    probs = predictor.chance_of_winning([[Rating(35.0, 3.0)], [Rating(25.0, 3.0)], [Rating(15.0, 3.0)]])
    assert sum(probs) == pytest.approx(1.0)
    assert probs[0] > probs[1] > probs[2]


def test_chance_of_draw_two_players():
    predictor = Predictor()
    draw_margin = math.sqrt(2.0) * BETA * statistics.NormalDist().inv_cdf(0.75)
    combined_dev = math.sqrt(2.0 * BETA**2.0 + 2.0 * SIGMA**2.0)
    expected = standard_normal_cdf(draw_margin / combined_dev) - standard_normal_cdf(-draw_margin / combined_dev)
    assert predictor.chance_of_draw([[Rating(MU, SIGMA)], [Rating(MU, SIGMA)]]) == pytest.approx(expected)


def test_chance_of_draw_drops_with_skill_gap():
    predictor = Predictor()
    close = predictor.chance_of_draw([[Rating(25.0, 3.0)], [Rating(26.0, 3.0)]])
    far = predictor.chance_of_draw([[Rating(25.0, 3.0)], [Rating(45.0, 3.0)]])
    assert 0.0 < far < close < 1.0

    # averaged over every pair of teams
    three = predictor.chance_of_draw([[Rating(MU, SIGMA)] for _ in range(3)])
    assert 0.0 < three < 1.0


def test_chance_of_ranks():
    predictor = Predictor()
    teams = [[Rating(30.0, SIGMA)], [Rating(25.0, SIGMA)], [Rating(25.0, SIGMA)], [Rating(20.0, SIGMA)]]
    ranks, probs = predictor.chance_of_ranks(teams)
    assert ranks == [1, 2, 2, 4]
    assert sum(probs) == pytest.approx(1.0)
    assert probs[1] == pytest.approx(probs[2])
    assert probs[0] > probs[1] > probs[3]


def test_chance_of_ranks_follows_input_order():
    predictor = Predictor()
    ranks, _ = predictor.chance_of_ranks([[Rating(10.0, 2.0)], [Rating(40.0, 2.0)], [Rating(25.0, 2.0)]])
    assert ranks == [3, 1, 2]


def test_balance_is_used_for_teams():
    teams = [[Rating(35.0, 2.0), Rating(15.0, 2.0)], [Rating(25.0, 2.0), Rating(25.0, 2.0)]]
    assert Predictor().chance_of_winning(teams)[0] == pytest.approx(0.5)
    assert Predictor(balance=True).chance_of_winning(teams)[0] > 0.5


def test_rejects_bad_teams():
    predictor = Predictor()
    with pytest.raises(LessThanTwoTeamsError):
        predictor.chance_of_winning([[Rating(MU, SIGMA)]])
    with pytest.raises(EmptyTeamError):
        predictor.chance_of_draw([[Rating(MU, SIGMA)], []])
    with pytest.raises(LessThanTwoTeamsError):
        predictor.chance_of_ranks([])
