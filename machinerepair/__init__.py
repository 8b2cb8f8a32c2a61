"""Users, machines, services and repair orders for a machine repair shop, stored in SQLite."""

__version__ = "0.1.0"