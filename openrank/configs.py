"""default parameters for every rating model and a helper to build models from them"""
from openrank.models.bradley_terry import BradleyTerryFull, BradleyTerryPartial
from openrank.models.plackett_luce import PlackettLuce
from openrank.models.thurstone_mosteller import ThurstoneMostellerFull, ThurstoneMostellerPartial
from openrank.utils.constants import (
    DEFAULT_BETA,
    DEFAULT_EPSILON,
    DEFAULT_KAPPA,
    DEFAULT_MU,
    DEFAULT_SIGMA,
    DEFAULT_TAU,
)

MODELS = {
    'bradley_terry_full': BradleyTerryFull,
    'bradley_terry_partial': BradleyTerryPartial,
    'plackett_luce': PlackettLuce,
    'thurstone_mosteller_full': ThurstoneMostellerFull,
    'thurstone_mosteller_partial': ThurstoneMostellerPartial,
}

shared_params = {
    'mu': DEFAULT_MU,
    'sigma': DEFAULT_SIGMA,
    'beta': DEFAULT_BETA,
    'kappa': DEFAULT_KAPPA,
    'limit_sigma': False,
    'balance': False,
}

DEFAULT_PARAMS = {
    'bradley_terry_full': {**shared_params, 'tau': DEFAULT_TAU},
    'bradley_terry_partial': {**shared_params, 'tau': DEFAULT_TAU},
    'plackett_luce': dict(shared_params),
    'thurstone_mosteller_full': {**shared_params, 'tau': DEFAULT_TAU, 'epsilon': DEFAULT_EPSILON},
    'thurstone_mosteller_partial': {**shared_params, 'tau': DEFAULT_TAU, 'epsilon': DEFAULT_EPSILON},
}


def build_model(name: str, **overrides):
    """construct the named model from its default parameters updated with overrides"""
    if name not in MODELS:
        raise ValueError(f'Invalid model name {name}, expected one of {sorted(MODELS)}')
    params = {**DEFAULT_PARAMS[name], **overrides}
    return MODELS[name](**params)
