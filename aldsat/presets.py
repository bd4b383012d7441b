"""
Process presets

Named ALD processes used to set up a saturation model without having to
provide every parameter by hand.

"""

import logging

from .precursor import Precursor
from .kinetics import kinetics_models
from .dose import dose_models
from .errors import DomainError

logger = logging.getLogger(__name__)

# prec: (name, M), M is the molecular mass in atomic mass units
# p: precursor pressure (Pa)
# T: temperature in K
# beta0: sticking probability
# sitearea: area of a surface site, in m^2

systems = {
    'TMA-500K': dict(prec=('TMA', 144.17), T=500, p=13.157894736842104,
                     beta0=1e-3, sitearea=1e-19),
    'H2O-500K': dict(prec=('H2O', 18.01), T=500, p=13.157894736842104,
                     beta0=1e-3, sitearea=1e-19),
    'Al2O3-200C': dict(prec=('TMA', 72), T=473, p=26.66,
                       beta0=1e-3, sitearea=0.225e-18),
    'Al2O3-100C': dict(prec=('TMA', 72), T=373, p=26.66,
                       beta0=1e-4, sitearea=0.251e-18),
    'TiO2-200C': dict(prec=('TTIP', 284), T=473, p=0.6665,
                      beta0=1e-4, sitearea=1.17e-18),
    'W-200C': dict(prec=('WF6', 297), T=473, p=6.665,
                   beta0=0.2, sitearea=0.036e-18),
}


def ALDinitialize(system='TMA-500K', T=None, p=None, f=1, dm=1,
                  kinetics='ideal', dose='zeroD'):
    """Build the dose model of a named ALD process

    Parameters
    ----------

    system : str
        name of the process, one of the keys of ``systems``
    T, p : float
        temperature (K) and pressure (Pa) overriding the preset values
    f : float
        fraction of the surface that is reactive
    dm : float
        thickness or mass deposited per reaction event
    kinetics, dose : str
        names of the surface kinetics and dose model variants

    """

    try:
        preset = systems[system]
        kin_cls = kinetics_models[kinetics]
        dose_cls = dose_models[dose]
    except KeyError as e:
        raise DomainError("Unknown preset, kinetics or dose model: %s" % e)

    name, M = preset['prec']
    prec = Precursor(name, M)
    nsites = f/preset['sitearea']
    chem = kin_cls(prec, nsites, preset['beta0'], f=f, dm=dm)

    if T is None:
        T = preset['T']
    if p is None:
        p = preset['p']

    logger.info("%s: %s kinetics, %s dose model at T = %g K, p = %g Pa",
                system, kinetics, dose, T, p)
    return dose_cls(chem, T, p)
