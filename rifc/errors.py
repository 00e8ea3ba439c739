"""
Exception types raised by the cipher.
"""


class RIFCError(Exception):
    """Base error for all cipher failures"""
    pass


class ConfigurationError(RIFCError, ValueError):
    """Invalid base, alphabet, key material or symbol lookup"""
    pass


class DecodeAmbiguityError(RIFCError):
    """No root branch reproduces the coordinate within tolerance"""

    def __init__(self, message, step=None, z=None):
        super().__init__(message)
        self.step = step
        self.z = z


class NumericOverflowError(RIFCError):
    """An intermediate coordinate stopped being finite"""
    pass
