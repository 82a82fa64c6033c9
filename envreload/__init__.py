"""envreload - command line front end for envreload_library."""

__version__ = "0.1.0"
