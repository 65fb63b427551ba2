"""XC3 carbon-credit project verification engine."""

__version__ = "1.0.0"
