"""
Kinetic theory of gases

  - M: molecular mass, atomic mass units
  - T: temperature, Kelvin
  - p: precursor pressure, Pa

"""

import numpy as np

from .constants import kb, amu, Rgas
from .errors import DomainError, SingularityError


def mean_thermal_velocity(M, T):
    """Mean thermal velocity of a gas molecule, in m/s"""
    M = np.asarray(M)
    T = np.asarray(T)
    if not np.all(np.isfinite(M)) or np.any(M <= 0):
        raise DomainError("Molecular mass must be positive, got %s" % M)
    if not np.all(np.isfinite(T)) or np.any(T < 0):
        raise DomainError("Temperature must be non-negative, got %s" % T)
    return np.sqrt(8*kb*T/(np.pi*amu*M))


def wall_flux(M, T, p, in_mols=False):
    """Impingement flux per unit area

    Parameters
    ----------
    M : float
        molecular mass in atomic mass units
    T : float
        temperature in K
    p : float
        pressure in Pa
    in_mols : bool
        if True, the flux is returned in mol/(m^2 s) instead of
        molecules/(m^2 s)

    """
    p = np.asarray(p)
    if not np.all(np.isfinite(p)) or np.any(p < 0):
        raise DomainError("Pressure must be non-negative, got %s" % p)
    v = mean_thermal_velocity(M, T)
    den = Rgas*np.asarray(T) if in_mols else kb*np.asarray(T)
    if np.any(den == 0):
        raise SingularityError("Wall flux is undefined at T = 0 K")
    return 0.25*v*p/den
