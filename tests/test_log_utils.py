import logging
import pytest
from openrank.core.errors import LessThanTwoTeamsError
from openrank.models.bradley_terry import BradleyTerryFull
from openrank.predictor import Predictor
from openrank.utils.log_utils import PACKAGE_LOGGER_NAME, get_logger


def test_single_handler_on_package_logger():
    get_logger('openrank.some_module')
    get_logger('openrank.some_module')
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    assert len(package_logger.handlers) == 1
    assert isinstance(package_logger.handlers[0], logging.StreamHandler)

    for name in ['openrank.core.base', 'openrank.predictor', 'openrank.some_module']:
        module_logger = logging.getLogger(name)
        assert module_logger.handlers == []
        assert module_logger.level == logging.NOTSET
        assert module_logger.propagate


def test_package_level_enables_rate_debug(caplog):
    model = BradleyTerryFull()
    with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER_NAME):
        model.rate([[model.rating()], [model.rating()]], ranks=[1, 2])
    messages = [record.getMessage() for record in caplog.records]
    assert any('rating 2 teams' in message for message in messages)
    assert all(record.name == 'openrank.core.base' for record in caplog.records)


def test_package_level_enables_rejection_and_predictor_debug(caplog):
    model = BradleyTerryFull()
    with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER_NAME):
        with pytest.raises(LessThanTwoTeamsError):
            model.rate([[model.rating()]], ranks=[1])
        Predictor().chance_of_winning([[model.rating()], [model.rating()]])
    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith('rejected rate call') for message in messages)
    assert 'chance_of_winning for 2 teams' in messages


def test_silent_by_default(caplog):
    model = BradleyTerryFull()
    with caplog.at_level(logging.DEBUG):
        logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(logging.WARNING)
        model.rate([[model.rating()], [model.rating()]], ranks=[1, 2])
    assert not [record for record in caplog.records if record.name.startswith(PACKAGE_LOGGER_NAME)]
