"""Client for the tsgo API server, with its wire protocol, syntax kinds and virtual file systems."""

__version__ = "0.1.0"