"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema; ссылки между схемами ($ref) разрешаются
через реестр referencing, собранный из каталога schema/.

Схемы (поставляются вместе с пакетом):
- closed_range.json — сериализованный ClosedRange
- range_report.json — результат одного вызова CLI (режим --json),
  ссылается на closed_range.json для полей range и container
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator
from referencing import Registry, Resource


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию читает каталог schema/ рядом с этим модулем. Каждая схема
    регистрируется в реестре под своим $id.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._registry: Registry | None = None

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка и meta-валидация схемы по имени файла без расширения.

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name not in self._schemas:
            schema_path = self._schema_dir / f"{schema_name}.json"
            if not schema_path.exists():
                raise FileNotFoundError(f"Schema not found: {schema_path}")

            schema = json.loads(schema_path.read_text(encoding="utf-8"))
            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e}") from e

            self._schemas[schema_name] = schema

        return self._schemas[schema_name]

    def registry(self) -> Registry:
        """
        Реестр всех схем каталога, ключ — $id схемы.

        Схемы без $id не регистрируются: на них нельзя сослаться.
        """
        if self._registry is None:
            resources = []
            for path in sorted(self._schema_dir.glob("*.json")):
                schema = self.load_schema(path.stem)
                if "$id" in schema:
                    resources.append((schema["$id"], Resource.from_contents(schema)))
            self._registry = Registry().with_resources(resources)
        return self._registry


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор данных против одной схемы каталога.

    Args:
        schema_name: Имя схемы (например, 'closed_range')
        loader: Загрузчик схем; по умолчанию пакетный каталог schema/
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        loader = loader or _SCHEMA_LOADER
        self.schema_name = schema_name
        self.validator = Draft202012Validator(
            loader.load_schema(schema_name), registry=loader.registry()
        )

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)


class RangeReportValidator(ContractValidator):
    """Валидатор для range_report контракта."""

    def __init__(self):
        super().__init__("range_report")


def validate_range_report(data: Dict[str, Any]) -> None:
    """
    Валидация отчёта CLI.

    Порядок границ (lower <= upper) схема не выражает: его проверяет модель.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    RangeReportValidator().validate(data)
