"""pdbflags exception hierarchy.

All public exceptions inherit from PdbFlagsError, giving callers a single
base class to catch when they want to handle any pdbflags-specific failure
without swallowing unrelated errors.

The command-line resolver itself never raises: every string, however
malformed, resolves to a settings record. These exceptions cover the
surfaces around it (configuration and batch input).
"""


class PdbFlagsError(Exception):
    """Base exception for all pdbflags errors."""


class ConfigError(PdbFlagsError):
    """Raised when a configuration file is invalid or unreadable.

    Covers YAML syntax errors, documents that are not a mapping, and
    values of the wrong type or range.
    """


class InputError(PdbFlagsError):
    """Raised when a batch input file cannot be read.

    Covers missing files, permission problems, and text that is not
    valid UTF-8.
    """
