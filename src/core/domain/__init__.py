"""
Domain models and value objects.

Contains the calculator's value objects: locale number symbols, error kinds
with their messages, and the persisted engine state.
"""

from src.core.domain.engine_state import ENGINE_STATE_SCHEMA_VERSION, EngineState
from src.core.domain.errors import ErrorKind, ErrorMessages
from src.core.domain.number_symbols import (
    DEFAULT_SYMBOLS,
    RESERVED_SYMBOLS,
    NumberSymbols,
    SymbolsProvider,
    system_number_symbols,
)

__all__ = [
    # Engine state
    "ENGINE_STATE_SCHEMA_VERSION",
    "EngineState",
    # Errors
    "ErrorKind",
    "ErrorMessages",
    # Number symbols
    "DEFAULT_SYMBOLS",
    "RESERVED_SYMBOLS",
    "NumberSymbols",
    "SymbolsProvider",
    "system_number_symbols",
]
