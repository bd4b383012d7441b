"""
Average area of a reactive surface site from experimental data

Three independent estimates are available, from growth per cycle,
quartz crystal microbalance (QCM) and Rutherford backscattering (RBS)
measurements. All areas are returned in m^2.

"""

import numpy as np

from .constants import Nav
from .errors import DomainError, SingularityError


def _positive(**kwargs):
    for name, value in kwargs.items():
        if not np.isfinite(value) or value <= 0:
            raise DomainError("%s must be positive, got %g" % (name, value))


def _measurement(name, value):
    if not np.isfinite(value) or value < 0:
        raise DomainError("%s must be finite and non-negative, got %g" % (name, value))
    if value == 0:
        raise SingularityError("Site area is undefined for zero %s" % name)


def sitearea_fromgpc(gpc, M, density, nmol=1):
    """Site area from growth per cycle

    Parameters
    ----------
    gpc : float
        growth per cycle, in Angstroms
    M : float
        molecular mass of the solid, in atomic mass units
    density : float
        density of the film, in g/cm3
    nmol : int
        number of precursor molecules per unit formula of the solid

    """
    _positive(M=M, density=density, nmol=nmol)
    _measurement("growth per cycle", gpc)
    masscm2 = density*gpc*1e-8
    molcm2 = masscm2/M*Nav
    return 1e-4/(nmol*molcm2)


def sitearea_fromqcm(mpc, M, nmol=1):
    """Site area from the QCM mass per cycle in ng/cm2"""
    _positive(M=M, nmol=nmol)
    _measurement("mass per cycle", mpc)
    return M/(mpc*1e-5*Nav*nmol)


def sitearea_fromrbs(atoms_area, atoms_permol=1.0):
    """Site area from the atoms per sq. meter deposited in one cycle"""
    _positive(atoms_permol=atoms_permol)
    _measurement("areal atom density", atoms_area)
    return atoms_permol/atoms_area
