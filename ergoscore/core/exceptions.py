"""
Custom Exceptions - ErgoScore

Scoring itself never raises for bad observations (values are clamped or
defaulted). These cover the seams around it: picking a method by name.
"""


class ErgoScoreException(Exception):
    """Base exception for the engine."""

    pass


class UnknownMethodError(ErgoScoreException, ValueError):
    """Assessment method name is not one of REBA, RULA, OWAS, NIOSH."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Unknown assessment method: {method!r}")
