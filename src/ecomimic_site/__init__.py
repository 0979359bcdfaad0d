"""EcoMimic 3.0 landing page and token endpoint."""

__version__ = "3.0.0"
