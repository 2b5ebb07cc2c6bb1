"""math utility functions for the rating update"""
import math
import statistics
from bbt.utils.constants import CDF_FLOOR, DRAW_DENOM_FLOOR, DRAW_INFORMATION


def sigmoid_scalar(x):
    """no need to use numpy on scalars"""
    if x >= 0.0:
        return 1.0 / (1.0 + math.exp(-x))
    # avoid overflow in exp for very negative x
    z = math.exp(x)
    return z / (1.0 + z)


INV_SQRT_2 = 1.0 / math.sqrt(2.0)


def norm_cdf(x):
    """cdf of standard normal"""
    return 0.5 * (1.0 + math.erf(x * INV_SQRT_2))


STANDARD_NORMAL = statistics.NormalDist()


def norm_pdf(x):
    """pdf of standard normal"""
    return STANDARD_NORMAL.pdf(x)


def v_and_w_win_scalar(t, eps):
    """
    calculate v and w for a win

    t is the normalized mean difference (winner minus loser) and eps the normalized draw margin.
    v is the additive correction to the winner's normalized mean, w the multiplicative shrink of its variance.
    """
    diff = t - eps
    cdf = norm_cdf(diff)
    if cdf > CDF_FLOOR:
        v = norm_pdf(diff) / cdf
    else:
        v = -diff
    w = v * (v + diff)
    return v, w


def v_and_w_draw_scalar(t, eps):
    """
    calculate v and w for a draw inside a margin of eps

    the sign of v pulls the favoured side (t > 0) down and the underdog up.
    w is capped below the w of the less surprising decisive result so a draw never shrinks variance more than a win or loss
    """
    abs_t = math.fabs(t)  # the papers do NOT do this but ALL open source implementations DO...
    diff_a = eps - abs_t
    diff_b = -eps - abs_t

    cdf_a = norm_cdf(diff_a)
    cdf_b = norm_cdf(diff_b)

    pdf_a = norm_pdf(diff_a)
    pdf_b = norm_pdf(diff_b)
    v_num = pdf_a - pdf_b
    shared_denom = cdf_a - cdf_b
    sign = math.copysign(1.0, t)
    if shared_denom < DRAW_DENOM_FLOOR:
        v = -t + (sign * eps)
    else:
        v = -sign * v_num / shared_denom
    if shared_denom < 1e-50:
        w = 1.0
    else:
        w_num = (diff_a * pdf_a) - (diff_b * pdf_b)
        w = (w_num / shared_denom) + (v**2.0)
    _, w_decisive = v_and_w_win_scalar(math.fabs(t), eps)
    return v, min(w, DRAW_INFORMATION * w_decisive)


def v_and_w_tie_scalar(t):
    """
    calculate v and w for a tie when there is no draw margin

    a draw has zero probability under a margin free model so its mean correction is half a win and half a loss,
    and it carries a fraction of the information of the less surprising decisive result
    """
    v_win, _ = v_and_w_win_scalar(t, 0.0)
    v_loss, _ = v_and_w_win_scalar(-t, 0.0)
    _, w_decisive = v_and_w_win_scalar(math.fabs(t), 0.0)
    return 0.5 * (v_win - v_loss), DRAW_INFORMATION * w_decisive
