from .constants import kb, amu, Nav, Rgas
from .errors import ALDError, DomainError, SingularityError
from .transport import mean_thermal_velocity, wall_flux
from .sitearea import sitearea_fromgpc, sitearea_fromqcm, sitearea_fromrbs
from .precursor import Precursor
from .kinetics import SurfaceKinetics, ALDideal, kinetics_models
from .dose import DoseModel, ZeroD, dose_models
from .presets import ALDinitialize

__all__ = ['kb', 'amu', 'Nav', 'Rgas',
           'ALDError', 'DomainError', 'SingularityError',
           'mean_thermal_velocity', 'wall_flux',
           'sitearea_fromgpc', 'sitearea_fromqcm', 'sitearea_fromrbs',
           'Precursor',
           'SurfaceKinetics', 'ALDideal', 'kinetics_models',
           'DoseModel', 'ZeroD', 'dose_models',
           'ALDinitialize']
