# exceptions.py


class AirfoilConverterError(Exception):
    "Base class for every error raised by the converter"


class FormatError(AirfoilConverterError, ValueError):
    "Raised when a coordinate listing cannot describe a usable airfoil"


class InvalidParameterError(AirfoilConverterError, ValueError):
    "Raised when a chord, thickness or viewport value is out of its domain"


class EmptyGeometryError(AirfoilConverterError, ValueError):
    "Raised when an operation needs at least one point and gets none"
