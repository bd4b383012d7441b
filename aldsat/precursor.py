import numpy as np

from .transport import mean_thermal_velocity, wall_flux
from .errors import DomainError

# molecular masses in atomic mass units
_precursor_mass = {
    'TMA': 144.17,
    'H2O': 18.01,
    'TTIP': 284.22,
    'WF6': 297.83,
    'Si2H6': 62.22,
}


class Precursor:
    """Gas-phase precursor molecule

    Parameters
    ----------

    name : str
        name of the precursor
    mass : float
        molecular mass in atomic mass units. If None, it is taken from
        the table of known precursors.
    ligands : optional
        descriptor of the precursor ligands

    """

    def __init__(self, name='None', mass=None, ligands=None):
        if mass is None:
            try:
                mass = _precursor_mass[name]
            except KeyError:
                raise DomainError(
                    "Unknown precursor %s, molecular mass required" % name)
        if not np.isfinite(mass) or mass <= 0:
            raise DomainError("Molecular mass must be positive, got %g" % mass)
        self._name = name
        self._mass = mass
        self.ligands = ligands

    @property
    def name(self):
        return self._name

    @property
    def mass(self):
        return self._mass

    def vth(self, T):
        """Mean thermal velocity at temperature T (in K)"""
        return mean_thermal_velocity(self.mass, T)

    def wall_flux(self, T, p, in_mols=False):
        """Flux per unit area at temperature T (in K) and pressure p (in Pa)"""
        return wall_flux(self.mass, T, p, in_mols)

    def __repr__(self):
        return "Precursor(%r, mass=%g)" % (self.name, self.mass)
