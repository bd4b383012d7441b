import numpy as np

from .errors import SingularityError


def exponential_saturation(t0, nintervals, horizon=5):
    """Sample a first-order saturation curve

    Returns the times and coverages ``1-exp(-t/t0)`` on a uniform grid of
    ``nintervals`` intervals spanning ``horizon`` time constants. The last
    sample lies exactly at ``horizon*t0``.

    """
    if not np.isfinite(t0) or t0 <= 0:
        raise SingularityError(
            "No saturation curve for characteristic time t0 = %g s" % t0)
    t = np.linspace(0, horizon*t0, nintervals+1)
    cov = 1 - np.exp(-t/t0)
    return t, cov
