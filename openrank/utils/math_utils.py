"""gaussian and logistic helper functions shared by the rating models and the predictor"""
import math
import statistics
import numpy as np
from scipy.special import erf, expit
from openrank.utils.constants import (
    INV_SQRT_2,
    INV_SQRT_2PI,
    SMALLEST_POSITIVE,
    V_TIE_DENOM_THRESHOLD,
)


def sigmoid(x):
    """a little faster than implementing it in numpy for d < 100000"""
    return expit(x)


def sigmoid_scalar(x):
    """no need to use numpy on scalars"""
    if x < 0.0:
        # exp(-x) overflows for very negative x
        exp_x = math.exp(x)
        return exp_x / (1.0 + exp_x)
    return 1.0 / (1.0 + math.exp(-x))


def norm_cdf(x):
    """cdf of standard normal"""
    return 0.5 * (1.0 + math.erf(x * INV_SQRT_2))


def norm_cdf_vector(x):
    """cdf of standard normal, elementwise over an array"""
    return 0.5 * (1.0 + erf(np.asarray(x, dtype=np.float64) * INV_SQRT_2))


STANDARD_NORMAL = statistics.NormalDist()


def norm_pdf(x):
    """pdf of standard normal"""
    return STANDARD_NORMAL.pdf(x)


def norm_pdf_vector(x):
    """pdf of standard normal, elementwise over an array"""
    x = np.asarray(x, dtype=np.float64)
    return np.exp(-0.5 * np.square(x)) * INV_SQRT_2PI


def norm_ppf(p):
    """
    Inverse cdf of the standard normal.

    Uses Wichura's AS241 rational approximations: one for the central region
    |p - 0.5| <= 0.425 and two for the tails split on sqrt(-log(min(p, 1 - p))) <= 5.
    Accurate to about 1e-16 over the open interval (0, 1).
    """
    q = p - 0.5
    if math.fabs(q) <= 0.425:
        r = 0.180625 - q * q
        num = (
            ((((((2.5090809287301227e3 * r + 3.3430575583588128e4) * r + 6.7265770927008709e4) * r
                + 4.5921953931549872e4) * r + 1.3731693765509461e4) * r + 1.9715909503065514e3) * r
             + 1.3314166789178437e2) * r
            + 3.3871328727963666e0
        ) * q
        den = (
            ((((((5.2264952788528546e3 * r + 2.8729085735721943e4) * r + 3.9307895800092710e4) * r
                + 2.1213794301586599e4) * r + 5.3941960214247511e3) * r + 6.8718700749205790e2) * r
             + 4.2313330701600911e1) * r
            + 1.0
        )
        return num / den

    r = 1.0 - p if q > 0.0 else p
    r = math.sqrt(-math.log(r))

    if r <= 5.0:
        r = r - 1.6
        num = (
            ((((((7.7454501427834141e-4 * r + 2.2723844989269185e-2) * r + 2.4178072517745061e-1) * r
                + 1.2704582524523684e0) * r + 3.6478483247632046e0) * r + 5.7694972214606914e0) * r
             + 4.6303378461565453e0) * r
            + 1.4234371107496838e0
        )
        den = (
            ((((((1.0507500716444168e-9 * r + 5.4759380849953445e-4) * r + 1.5198666563616457e-2) * r
                + 1.4810397642748007e-1) * r + 6.8976733498510000e-1) * r + 1.6763848301838038e0) * r
             + 2.0531916266377588e0) * r
            + 1.0
        )
    else:
        r = r - 5.0
        num = (
            ((((((2.0103343992922881e-7 * r + 2.7115555687434876e-5) * r + 1.2426609473880784e-3) * r
                + 2.6532189526576123e-2) * r + 2.9656057182850489e-1) * r + 1.7848265399172911e0) * r
             + 5.4637849111641144e0) * r
            + 6.6579046435011038e0
        )
        den = (
            ((((((2.0442631033899398e-15 * r + 1.4215117583164459e-7) * r + 1.8463183175100547e-5) * r
                + 7.8686913114561326e-4) * r + 1.4875361290850615e-2) * r + 1.3692988092273581e-1) * r
             + 5.9983220655588794e-1) * r
            + 1.0
        )

    x = num / den
    if q < 0.0:
        x = -x
    return x


def v(x, t):
    """mean correction for a win with margin t"""
    xt = x - t
    denom = norm_cdf(xt)
    if denom < SMALLEST_POSITIVE:
        return -xt
    return norm_pdf(xt) / denom


def w(x, t):
    """variance correction for a win with margin t"""
    xt = x - t
    denom = norm_cdf(xt)
    if denom < SMALLEST_POSITIVE:
        return 1.0 if x < 0.0 else 0.0
    v_xt = v(x, t)
    return v_xt * (v_xt + xt)


def vt(x, t):
    """mean correction for a draw with margin t"""
    abs_x = math.fabs(x)  # the papers do NOT do this but ALL open source implementations DO...
    b = norm_cdf(t - abs_x) - norm_cdf(-t - abs_x)
    if b < V_TIE_DENOM_THRESHOLD:
        if x < 0.0:
            return -x - t
        return -x + t
    a = norm_pdf(-t - abs_x) - norm_pdf(t - abs_x)
    if x < 0.0:
        return -a / b
    return a / b


def wt(x, t):
    """variance correction for a draw with margin t"""
    abs_x = math.fabs(x)
    b = norm_cdf(t - abs_x) - norm_cdf(-t - abs_x)
    if b < SMALLEST_POSITIVE:
        return 1.0
    num = (t - abs_x) * norm_pdf(t - abs_x) + (t + abs_x) * norm_pdf(-t - abs_x)
    return (num / b) + vt(x, t) ** 2.0


def v_vector(x, t):
    """calculate v for a win in a vectorized fashion"""
    x, t = np.broadcast_arrays(np.asarray(x, dtype=np.float64), np.asarray(t, dtype=np.float64))
    diff = x - t
    denom = norm_cdf_vector(diff)
    bad_mask = denom < SMALLEST_POSITIVE
    out = np.empty_like(diff)
    out[bad_mask] = -diff[bad_mask]
    out[~bad_mask] = norm_pdf_vector(diff[~bad_mask]) / denom[~bad_mask]
    return out


def w_vector(x, t):
    """calculate w for a win in a vectorized fashion"""
    x, t = np.broadcast_arrays(np.asarray(x, dtype=np.float64), np.asarray(t, dtype=np.float64))
    diff = x - t
    denom = norm_cdf_vector(diff)
    bad_mask = denom < SMALLEST_POSITIVE
    good_mask = ~bad_mask
    out = np.empty_like(diff)
    out[bad_mask] = np.where(x[bad_mask] < 0.0, 1.0, 0.0)
    v_good = norm_pdf_vector(diff[good_mask]) / denom[good_mask]
    out[good_mask] = v_good * (v_good + diff[good_mask])
    return out


def vt_vector(x, t):
    """calculate v for a draw in a vectorized fashion"""
    x, t = np.broadcast_arrays(np.asarray(x, dtype=np.float64), np.asarray(t, dtype=np.float64))
    abs_x = np.abs(x)
    diff_a = t - abs_x
    diff_b = -t - abs_x
    shared_denom = norm_cdf_vector(diff_a) - norm_cdf_vector(diff_b)
    v_num = norm_pdf_vector(diff_b) - norm_pdf_vector(diff_a)
    neg_mask = x < 0.0

    bad_mask = shared_denom < V_TIE_DENOM_THRESHOLD
    good_mask = ~bad_mask
    out = np.empty_like(abs_x)
    out[bad_mask] = np.where(neg_mask, -x - t, -x + t)[bad_mask]
    signed_num = np.where(neg_mask, -v_num, v_num)
    out[good_mask] = signed_num[good_mask] / shared_denom[good_mask]
    return out


def wt_vector(x, t):
    """calculate w for a draw in a vectorized fashion"""
    x, t = np.broadcast_arrays(np.asarray(x, dtype=np.float64), np.asarray(t, dtype=np.float64))
    abs_x = np.abs(x)
    diff_a = t - abs_x
    diff_b = -t - abs_x
    shared_denom = norm_cdf_vector(diff_a) - norm_cdf_vector(diff_b)

    bad_mask = shared_denom < SMALLEST_POSITIVE
    good_mask = ~bad_mask
    out = np.empty_like(abs_x)
    out[bad_mask] = 1.0
    w_num = (diff_a * norm_pdf_vector(diff_a)) + ((t + abs_x) * norm_pdf_vector(diff_b))
    vts = vt_vector(x[good_mask], t[good_mask])
    out[good_mask] = (w_num[good_mask] / shared_denom[good_mask]) + np.square(vts)
    return out
