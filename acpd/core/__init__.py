"""Core of acpd: settings, snapshot access and the primer engine.

Kept free of web framework imports so the engine can be used directly::

    from acpd.core.primer import PrimerEngine, load_catalog
    from acpd.core.snapshot import SnapshotStore
"""
