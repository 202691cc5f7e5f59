"""Console record keeping demos built on a generic keyed repository and a persistable log."""

__version__ = "0.1.0"
