"""
Engine State Contract

Проверка сохранённого состояния калькулятора перед восстановлением.
Хост хранит снапшот как JSON; до передачи в CalculatorEngine.restore()
payload проверяется по формальной схеме engine_state.json (Draft 2020-12)
и только затем превращается в EngineState.

Схема и Pydantic модель описывают одно и то же состояние: схема — контракт
для внешнего хранилища, модель — тип внутри движка.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.engine_state import EngineState

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Чтение *.json схем из каталога с кэшированием.

    Каждая схема при первой загрузке проходит meta-validation.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self.schema_dir = schema_dir or SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    def path_of(self, name: str) -> Path:
        return self.schema_dir / f"{name}.json"

    def load_schema(self, name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения.

        Raises:
            FileNotFoundError: нет файла <name>.json
            ValueError: файл не является валидной JSON Schema
        """
        cached = self._cache.get(name)
        if cached is not None:
            return cached

        path = self.path_of(name)
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"{path.name} is not a valid JSON Schema: {e.message}") from e

        self._cache[name] = schema
        return schema


_DEFAULT_LOADER = SchemaLoader()


# =============================================================================
# VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор payload против одной схемы."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _DEFAULT_LOADER).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: первое найденное нарушение
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        return self._validator.iter_errors(data)

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """Все нарушения в виде "путь: сообщение", отсортированные по пути."""
        messages = []
        for error in sorted(self.iter_errors(data), key=lambda e: list(e.absolute_path)):
            location = "/".join(str(part) for part in error.absolute_path) or "<root>"
            messages.append(f"{location}: {error.message}")
        return messages


class EngineStateValidator(ContractValidator):
    """Контракт engine_state.json."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("engine_state", loader)

    def validate_state(self, state: EngineState) -> None:
        """Проверка, что снапшот сериализуется в валидный payload."""
        self.validate(state.model_dump(mode="json"))


# =============================================================================
# FUNCTIONS
# =============================================================================


def validate_engine_state(data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: payload не соответствует engine_state.json
    """
    EngineStateValidator().validate(data)


def load_engine_state(data: Dict[str, Any]) -> EngineState:
    """
    Payload хранилища → EngineState.

    Сначала проверка по схеме, затем конструирование модели (Pydantic
    дополнительно отклоняет NaN/Infinity в memory).

    Raises:
        jsonschema.ValidationError: нарушение схемы
        pydantic.ValidationError: нарушение ограничений модели
    """
    validate_engine_state(data)
    return EngineState.model_validate(data)
