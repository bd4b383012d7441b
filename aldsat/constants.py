"""
Physical constants

All values in SI units, matching the precision used throughout the models.
"""

kb = 1.38e-23  # J/K
amu = 1.660e-27  # kg
Nav = 6.022e23  # 1/mol
Rgas = 8.31  # J/(mol K)
