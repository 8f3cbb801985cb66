"""Custom exceptions for carbon-lens."""


class CarbonLensError(Exception):
    """Base exception for carbon-lens."""

    pass


class ProductDataError(CarbonLensError):
    """Raised when a product payload cannot be read or holds no product."""

    pass
