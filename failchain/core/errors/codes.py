# failchain/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"
INTERNAL_ERROR: Final[str] = "INTERNAL_ERROR"
INVALID_ARGUMENT: Final[str] = "INVALID_ARGUMENT"
PRECONDITION_FAILED: Final[str] = "PRECONDITION_FAILED"

# engine
MUTATION_DENIED: Final[str] = "MUTATION_DENIED"

# configuration
INVALID_CONFIG: Final[str] = "INVALID_CONFIG"


# ---- semantic groups (internal helpers) ----

# Caller mistakes: the engine was handed something its contract rejects.
CONTRACT_CODES: Final[set[str]] = {
    INVALID_ARGUMENT,
    PRECONDITION_FAILED,
}

# The engine cannot honour its contract on this runtime or with this setup.
# These MUST surface immediately and never be downgraded.
FATAL_CONFIGURATION_CODES: Final[set[str]] = {
    MUTATION_DENIED,
    INVALID_CONFIG,
}

DEFAULT_FALLBACK_CODES: Final[set[str]] = {
    UNKNOWN,
    INTERNAL_ERROR,
}

KNOWN_CODES: Final[set[str]] = CONTRACT_CODES | FATAL_CONFIGURATION_CODES | DEFAULT_FALLBACK_CODES
