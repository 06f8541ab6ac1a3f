"""acpd - read-only REST daemon over an ACP code intelligence snapshot."""

__version__ = "0.1.0"
