"""pdbflags: Resolve compiler settings from command lines recorded in PDBs."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
