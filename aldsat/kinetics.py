"""
Self-limited surface kinetics

A fraction f of the surface is reactive and comprised of reaction sites
of equal area. The site area, the number of sites per unit area and the
reactive fraction are tied by ``site_area*nsites = f``: site_area and f
are stored and nsites is derived from them.

All units are in SI unless specifically mentioned:

  - nsites: sites per m^2
  - site_area: m^2
  - T: temperature, Kelvin
  - p: precursor pressure, Pa
  - t0: characteristic time of saturation, s

"""

import logging
from abc import ABC, abstractmethod

import numpy as np

from .constants import Nav
from .errors import DomainError, SingularityError
from .sampling import exponential_saturation

logger = logging.getLogger(__name__)


def _check_density(name, value):
    if not np.isfinite(value) or value < 0:
        raise DomainError("%s must be positive, got %g" % (name, value))
    if value == 0:
        raise SingularityError("%s cannot be zero" % name)


def _check_fraction(name, value):
    value = np.asarray(value)
    if not np.all(np.isfinite(value)) or np.any(value < 0) or np.any(value > 1):
        raise DomainError("%s must lie in [0, 1], got %s" % (name, value))


class SurfaceKinetics(ABC):
    """Base class for self-limited kinetics

    Parameters
    ----------

    prec : Precursor
        precursor reacting with the surface
    nsites : float
        number of reactive sites per unit area, in m^-2
    f : float
        fraction of the surface that is reactive. The default is that
        all the surface is reactive.

    """

    name = None

    def __init__(self, prec, nsites, f=1):
        self.prec = prec
        self.f = f
        _check_density("nsites", nsites)
        self._s0 = f/nsites

    @property
    def site_area(self):
        """Area of a single reaction site"""
        return self._s0

    @site_area.setter
    def site_area(self, value):
        _check_density("site_area", value)
        self._s0 = value

    @property
    def nsites(self):
        """Number of reactive sites per surface area"""
        return self._f/self._s0

    @nsites.setter
    def nsites(self, value):
        _check_density("nsites", value)
        self._s0 = self._f/value

    @property
    def nsites_mol(self):
        """Number of reactive sites per surface area in mols"""
        return self.nsites/Nav

    @property
    def f(self):
        """Fraction of reactive sites"""
        return self._f

    @f.setter
    def f(self, value):
        if not 0 < value <= 1:
            raise DomainError("Reactive fraction must lie in (0, 1], got %g" % value)
        self._f = value

    @abstractmethod
    def beta(self, cov=0):
        pass

    @abstractmethod
    def beta_av(self, av):
        pass

    @abstractmethod
    def t0(self, T, p):
        pass

    @abstractmethod
    def saturation_curve(self, T, p):
        pass

    def vth(self, T):
        return self.prec.vth(T)

    def wall_flux(self, T, p, in_mols=False):
        return self.prec.wall_flux(T, p, in_mols)


class ALDideal(SurfaceKinetics):
    """Ideal first-order irreversible Langmuir kinetics

    Parameters
    ----------

    prec : Precursor
        precursor reacting with the surface
    nsites : float
        number of reactive sites per unit area, in m^-2
    beta0 : float
        bare reaction probability of a precursor collision with a
        reactive site. A zero value describes an inert surface.
    f : float
        fraction of the surface that is reactive
    dm : float
        thickness or mass deposited per reaction event

    """

    name = 'ideal'
    nintervals = 100

    def __init__(self, prec, nsites, beta0, f=1, dm=1):
        super().__init__(prec, nsites, f)
        self.beta0 = beta0
        self.dm = dm

    @property
    def beta0(self):
        """Bare reaction probability per collision with a reactive site"""
        return self._beta0

    @beta0.setter
    def beta0(self, value):
        _check_fraction("beta0", value)
        self._beta0 = value

    def beta(self, cov=0):
        _check_fraction("Coverage", cov)
        return self.f*self.beta0*(1-np.asarray(cov))

    def beta_av(self, av):
        _check_fraction("Site availability", av)
        return self.f*self.beta0*np.asarray(av)

    def t0(self, T, p):
        """Characteristic time for saturation

        Returns infinity when no reaction is possible, either because
        beta0 or the pressure is zero.
        """
        den = self.site_area*self.wall_flux(T, p)*self.beta0
        if den == 0:
            return np.inf
        t0 = 1.0/den
        logger.debug("%s: t0 = %g s at T = %g K, p = %g Pa",
                     self.prec.name, t0, T, p)
        return t0

    def coverage(self, t, T, p):
        """Surface coverage after a dose time t (scalar or array)"""
        t = np.asarray(t)
        if not np.all(t >= 0):
            raise DomainError("Dose time must be non-negative, got %s" % t)
        t0 = self.t0(T, p)
        return 1 - np.exp(-t/t0)

    def saturation_time(self, T, p, cov=0.99):
        """Dose time needed to reach a given surface coverage"""
        if not 0 <= cov < 1:
            raise DomainError("Target coverage must lie in [0, 1), got %g" % cov)
        if cov == 0:
            return 0.0
        return -self.t0(T, p)*np.log(1-cov)

    def saturation_curve(self, T, p):
        """Return the saturation curve as a (time, coverage) tuple

        The curve spans five characteristic times, reaching 99.3%
        of the saturation coverage.
        """
        return exponential_saturation(self.t0(T, p), self.nintervals)


kinetics_models = {
    ALDideal.name: ALDideal,
}
