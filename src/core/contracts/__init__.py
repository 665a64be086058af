"""
Contracts — JSON Schema контракт сохраняемого состояния калькулятора.
"""

from .validators import (
    SCHEMA_DIR,
    ContractValidator,
    EngineStateValidator,
    SchemaLoader,
    load_engine_state,
    validate_engine_state,
)

__all__ = [
    "SCHEMA_DIR",
    "SchemaLoader",
    "ContractValidator",
    "EngineStateValidator",
    "validate_engine_state",
    "load_engine_state",
]
