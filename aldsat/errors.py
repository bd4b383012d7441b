class ALDError(Exception):
    """Base class for the errors raised by aldsat"""


class DomainError(ALDError, ValueError):
    """Non-physical input: negative temperature, non-positive mass,
    density or molar quantity, coverage outside [0, 1]...
    """


class SingularityError(ALDError, ZeroDivisionError):
    """Division by a quantity that is structurally zero, such as zero
    absolute temperature in a flux law or a zero site density.
    """
