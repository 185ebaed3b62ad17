"""spnctl - inspect chain launches registered on Starport Network."""

__version__ = "0.1.0"
