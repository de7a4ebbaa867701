"""Global constants and configuration defaults for the atlas packer.

These values are used as constructor defaults throughout the package. Nothing
in this module is mutated at runtime; pass explicit arguments to the packers
to override them.
"""

# Gap reserved after every packed rectangle on both axes
DEFAULT_PADDING = 2

# Upper bound for a single atlas side, before padding is added internally
DEFAULT_MAX_SIZE = 4096

MAX_PADDING = 64
MAX_ATLAS_SIZE = 16384
