"""dvplconv package

Converts files to and from the DVPL container (payload plus a 20 byte
footer) used by the game's asset delivery pipeline.

The codec lives in :mod:`dvplconv.codec`, the directory-walking batch
driver in :mod:`dvplconv.api`, and the command-line front end in
:mod:`dvplconv.cli`.
"""

from ._version import __version__  # noqa: F401

__all__ = ["__version__"]
