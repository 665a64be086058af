"""
EngineState — Модель сохраняемого состояния калькулятора

Immutable Pydantic модель: снапшот экрана и регистра памяти, который хост
сохраняет перед приостановкой и восстанавливает после.
Полная совместимость с JSON Schema (src/core/contracts/schema/engine_state.json).

Значения по умолчанию соответствуют восстановлению без сохранённого
состояния: пустой экран (движок инициализирует его заново) и память 0.0.
"""

from pydantic import BaseModel, Field

ENGINE_STATE_SCHEMA_VERSION = "1"


class EngineState(BaseModel):
    """
    Снапшот состояния движка калькулятора.

    Immutable модель (frozen=True):
    - screen: текст экрана (число, выражение, текст ошибки или "")
    - memory: значение регистра памяти (finite float)
    """

    schema_version: str = Field(
        ENGINE_STATE_SCHEMA_VERSION,
        pattern="^1$",
        description="Версия схемы для tracking совместимости",
    )
    screen: str = Field("", description="Текст экрана")
    memory: float = Field(
        0.0, allow_inf_nan=False, description="Значение регистра памяти"
    )

    model_config = {"frozen": True}
