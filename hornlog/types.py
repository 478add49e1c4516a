"""
Type aliases for HornLog.
"""

from typing import AbstractSet, Dict


# Set of accepted built-in names for filtering rule atoms, e.g. {"swrlb:add"}
BuiltInNames = AbstractSet[str]

# Prefix label to namespace IRI
PrefixMap = Dict[str, str]
