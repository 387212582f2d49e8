"""Exceptions raised at the oracle boundary."""


class OracleError(Exception):
    """Transport or provider failure while asking the oracle for a completion."""
    pass
