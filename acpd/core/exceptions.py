"""Domain exceptions for acpd.

All of these are startup-time failures. Request handling never raises
them; the route layer reports missing objects with ``HTTPException``.
"""


class AcpdError(Exception):
    """Base class for acpd errors."""


class ConfigError(AcpdError):
    """The daemon settings file is unreadable or malformed."""


class CatalogError(AcpdError):
    """The primer catalog violates one of its invariants."""


class SnapshotLoadError(AcpdError):
    """The code intelligence snapshot could not be loaded."""
