"""
JSON Schema Contract Validators

Модуль для валидации dict-данных, которыми cointoss обменивается с внешними
коллабораторами (charting, notebook/CLI обёртки), согласно JSON Schema контрактам.
Использует библиотеку jsonschema.

Схемы (src/cointoss/contracts/schema/):
- toss_series.json (TossSeries.model_dump(mode="json"))
- chart_feed.json (ChartFeed.to_contract())
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются внутри пакета (schema/ рядом с этим модулем).
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'toss_series')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class TossSeriesValidator(ContractValidator):
    """Валидатор для toss_series контракта."""

    def __init__(self):
        super().__init__("toss_series")

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация схемы + согласованности производных счётчиков.

        JSON Schema не выражает total == len(outcomes) и
        heads_count + tails_count == total, поэтому они проверяются отдельно.

        Raises:
            ValidationError: Если данные не соответствуют контракту
        """
        super().validate(data)

        total = data["total"]
        if total != len(data["outcomes"]):
            raise ValidationError(
                f"total {total} != len(outcomes) {len(data['outcomes'])}"
            )
        if data["heads_count"] + data["tails_count"] != total:
            raise ValidationError(
                f"heads_count + tails_count != total ({total})"
            )

    def is_valid(self, data: Dict[str, Any]) -> bool:
        try:
            self.validate(data)
        except ValidationError:
            return False
        return True


class ChartFeedValidator(ContractValidator):
    """Валидатор для chart_feed контракта."""

    def __init__(self):
        super().__init__("chart_feed")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_toss_series(data: Dict[str, Any]) -> None:
    """
    Валидация toss_series данных.

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    TossSeriesValidator().validate(data)


def validate_chart_feed(data: Dict[str, Any]) -> None:
    """
    Валидация chart_feed данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ChartFeedValidator().validate(data)
