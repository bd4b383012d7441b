"""
Calibration of the kinetic parameters from measured uptake curves
"""

import logging

import numpy as np
from scipy.optimize import curve_fit

from .errors import DomainError, SingularityError

logger = logging.getLogger(__name__)


def _saturation(t, t0):
    return 1 - np.exp(-t/t0)


def fit_saturation_curve(t, cov):
    """Fit a first-order saturation curve to measured coverages

    Parameters
    ----------

    t : array_like
        dose times in s
    cov : array_like
        normalized surface coverage, or normalized growth per cycle,
        at each dose time

    Returns
    -------

    t0, t0_std : float
        characteristic time of saturation and its standard deviation

    """
    t = np.asarray(t, dtype=float)
    cov = np.asarray(cov, dtype=float)
    if t.shape != cov.shape or t.ndim != 1:
        raise DomainError("Times and coverages must be 1D arrays of equal size")
    if t.size < 2:
        raise DomainError("At least two points are needed to fit t0")
    if np.any(t < 0):
        raise DomainError("Dose times must be non-negative")

    # initial guess: time closest to 1-1/e coverage
    guess = t[np.argmin(np.abs(cov - (1-np.exp(-1))))]
    if guess <= 0:
        guess = t.max()/5
    if guess <= 0:
        raise SingularityError("Cannot fit t0 when all dose times are zero")

    popt, pcov = curve_fit(_saturation, t, cov, p0=[guess],
                           bounds=(0, np.inf))
    t0 = popt[0]
    t0_std = np.sqrt(pcov[0, 0])
    logger.debug("Fitted t0 = %g +- %g s from %d points", t0, t0_std, t.size)
    return t0, t0_std


def beta0_from_t0(chem, t0, T, p):
    """Bare reaction probability reproducing a characteristic time t0

    Parameters
    ----------

    chem : SurfaceKinetics
        surface kinetics providing the site area and the precursor flux
    t0 : float
        characteristic time of saturation in s
    T : float
        temperature in K
    p : float
        precursor pressure in Pa

    """
    if t0 <= 0:
        raise DomainError("Characteristic time must be positive, got %g" % t0)
    den = t0*chem.site_area*chem.wall_flux(T, p)
    if den == 0:
        raise SingularityError("beta0 is undefined at zero precursor pressure")
    return 1.0/den
