"""
Dose models

A dose model couples a surface kinetics model to the process conditions
of a reactor and produces the observable saturation curve.

"""

import logging
from abc import ABC, abstractmethod

import numpy as np

from .errors import DomainError
from .sampling import exponential_saturation

logger = logging.getLogger(__name__)


class DoseModel(ABC):
    """Base class for dose models

    Parameters
    ----------

    chem : SurfaceKinetics
        surface kinetics of the precursor
    T : float
        temperature in K
    p : float
        precursor pressure in Pa

    """

    name = None

    def __init__(self, chem, T, p):
        self.chem = chem
        self.p = p
        self.T = T

    @property
    def T(self):
        return self._T

    @T.setter
    def T(self, value):
        self._vth = self.chem.vth(value)
        self._T = value
        logger.debug("%s: vth = %g m/s at T = %g K",
                     self.chem.prec.name, self._vth, value)

    @property
    def p(self):
        return self._p

    @p.setter
    def p(self, value):
        if not np.isfinite(value) or value < 0:
            raise DomainError("Pressure must be non-negative, got %g" % value)
        self._p = value

    @property
    def vth(self):
        """Mean thermal velocity of the precursor at the current temperature"""
        return self._vth

    @property
    def site_area(self):
        return self.chem.site_area

    @site_area.setter
    def site_area(self, value):
        self.chem.site_area = value

    @property
    def mass(self):
        return self.chem.prec.mass

    def t0(self):
        """Characteristic time for saturation at the current conditions"""
        return self.chem.t0(self.T, self.p)

    @abstractmethod
    def saturation_curve(self):
        pass


class ZeroD(DoseModel):
    """Zero-dimensional, well-mixed reactor

    The precursor pressure is uniform and there are no transport
    limitations, so the surface saturates with the characteristic time
    of its kinetics. The curve is sampled every 0.01 t0.

    """

    name = 'zeroD'
    nintervals = 500

    @property
    def nu(self):
        """Impingement-limited rate constant, in 1/s"""
        return 1.0/self.t0()

    def saturation_curve(self):
        return exponential_saturation(self.t0(), self.nintervals)


dose_models = {
    ZeroD.name: ZeroD,
}
