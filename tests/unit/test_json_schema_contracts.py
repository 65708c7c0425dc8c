"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация вывода моделей
- Детекция null и нарушений типов
- Загрузчик схем: кэш, отсутствующие файлы, битые схемы
- Проверка контракта при рендеринге графика
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.chart import (
    Chart,
    ChartOptions,
    ChartScale,
    Dataset,
    NoAnnotations,
    RenderConfig,
    ScaleTicks,
    SinglePointDataset,
    XYDataset,
)
from src.core.contracts import (
    ChartScaleValidator,
    ChartValidator,
    ContractValidator,
    MinMaxPointValidator,
    SchemaLoader,
    XYPointValidator,
    get_validator,
    validate_chart,
    validate_chart_scale,
    validate_contract,
    validate_min_max_point,
    validate_xy_point,
)
from src.core.domain import XYPoint, min_max_point, to_dataset_data


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def bar_chart() -> Chart:
    """Bar-график с подписями и осью y."""
    return Chart[list[SinglePointDataset], NoAnnotations](
        type_="bar",
        data=Dataset[list[SinglePointDataset]](
            datasets=[SinglePointDataset(label="Sales", data=[3, "4.5", 7])],
            labels=["Jan", "Feb", "Mar"],
        ),
        options=ChartOptions[NoAnnotations](
            scales={"y": ChartScale(beginAtZero=True, ticks=ScaleTicks(stepSize=1))},
            responsive=True,
        ),
    )


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    @pytest.mark.parametrize("name", ["chart", "chart_scale", "xy_point", "min_max_point", "common"])
    def test_schemas_load(self, name: str) -> None:
        """Все схемы загружаются и проходят meta-validation"""
        schema = SchemaLoader().load_schema(name)
        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("chart") is loader.load_schema("chart")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema(self, tmp_path: Path) -> None:
        """Схема, не прошедшая meta-validation, отклоняется"""
        (tmp_path / "broken.json").write_text(json.dumps({"type": 5}), encoding="utf-8")
        with pytest.raises(ValueError):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_registry_holds_shared_definitions(self) -> None:
        """Общие определения доступны по $id common.json"""
        registry = SchemaLoader().registry
        assert "nonNull" in registry["common.json"].contents["$defs"]
        assert registry["chart.json"].contents["title"] == "Chart"

    def test_custom_directory_with_shared_reference(self, tmp_path: Path) -> None:
        """Схемы произвольного каталога разрешают $ref друг на друга"""
        shared = {
            "$schema": "https://json-schema.org/draft/2020-12/schema",
            "$id": "shared.json",
            "$defs": {"positive": {"type": "number", "exclusiveMinimum": 0}},
        }
        width = {
            "$schema": "https://json-schema.org/draft/2020-12/schema",
            "$id": "width.json",
            "$ref": "shared.json#/$defs/positive",
        }
        (tmp_path / "shared.json").write_text(json.dumps(shared), encoding="utf-8")
        (tmp_path / "width.json").write_text(json.dumps(width), encoding="utf-8")

        validator = ContractValidator("width", loader=SchemaLoader(tmp_path))
        assert validator.is_valid(2)
        assert not validator.is_valid(0)


# =============================================================================
# VALIDATOR LOOKUP
# =============================================================================


class TestValidatorLookup:
    """Валидаторы по имени схемы"""

    def test_subclass_schema_names(self) -> None:
        assert ChartValidator().schema_name == "chart"
        assert XYPointValidator().schema == SchemaLoader().load_schema("xy_point")

    def test_schema_name_required(self) -> None:
        with pytest.raises(ValueError):
            ContractValidator()

    def test_get_validator_cached(self) -> None:
        assert get_validator("chart") is get_validator("chart")

    def test_validate_contract_by_name(self) -> None:
        validate_contract("xy_point", {"x": 1, "y": "2024-01-01"})
        with pytest.raises(ValidationError):
            validate_contract("xy_point", {"x": None})

    def test_validate_contract_unknown_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            validate_contract("does_not_exist", {})


# =============================================================================
# POINTS
# =============================================================================


class TestPointContracts:
    """Контракты точек"""

    def test_points_valid(self) -> None:
        validate_xy_point(XYPoint.from_tuple((1, 2)).to_dict())
        validate_xy_point(XYPoint.nan().to_dict())
        validate_xy_point(XYPoint().to_dict())

    def test_null_rejected(self) -> None:
        with pytest.raises(ValidationError):
            validate_xy_point({"x": None, "y": 1})

    def test_unknown_key_rejected(self) -> None:
        assert not XYPointValidator().is_valid({"x": 1, "z": 2})

    def test_min_max_valid(self) -> None:
        for item in to_dataset_data([min_max_point(1, "2024-01-01")]).value:
            validate_min_max_point(item)

    @pytest.mark.parametrize("payload", [[1], [1, 2, 3], [1, None], [True, 2]])
    def test_min_max_invalid(self, payload: list) -> None:
        assert not MinMaxPointValidator().is_valid(payload)


# =============================================================================
# SCALES
# =============================================================================


class TestScaleContract:
    """Контракт оси"""

    def test_empty_scale_valid(self) -> None:
        validate_chart_scale(ChartScale().to_dict())

    def test_full_scale_valid(self) -> None:
        scale = ChartScale(type_="linear", min=0, max="100", grace="5%", stacked=True)
        validate_chart_scale(scale.to_dict())

    @pytest.mark.parametrize(
        "payload",
        [{"min": None}, {"min": True}, {"type": ""}, {"ticks": {"stepSize": None}}],
    )
    def test_invalid_scale(self, payload: dict) -> None:
        with pytest.raises(ValidationError):
            validate_chart_scale(payload)

    def test_iter_errors_reports_each_field(self) -> None:
        errors = list(ChartScaleValidator().iter_errors({"min": None, "max": None}))
        assert len(errors) == 2


# =============================================================================
# CHART
# =============================================================================


class TestChartContract:
    """Контракт полного объекта графика"""

    def test_model_output_valid(self, bar_chart: Chart) -> None:
        validate_chart(bar_chart.to_dict())
        assert ChartValidator().is_valid(bar_chart.to_dict())

    def test_xy_chart_valid(self) -> None:
        chart = Chart[list[XYDataset], NoAnnotations](
            type_="scatter",
            data=Dataset[list[XYDataset]](
                datasets=[XYDataset(data=XYPoint.to_dataset_data([XYPoint.nan()]))]
            ),
        )
        validate_chart(chart.to_dict())

    def test_null_in_options_rejected(self, bar_chart: Chart) -> None:
        payload = bar_chart.to_dict()
        payload["options"]["scales"]["y"]["max"] = None
        with pytest.raises(ValidationError):
            validate_chart(payload)

    def test_missing_datasets_rejected(self) -> None:
        with pytest.raises(ValidationError):
            validate_chart({"type": "bar", "data": {}})

    def test_render_compact(self, bar_chart: Chart) -> None:
        rendered = bar_chart.render()
        assert json.loads(rendered) == bar_chart.to_dict()
        assert "\n" not in rendered

    def test_render_with_contract(self, bar_chart: Chart) -> None:
        rendered = bar_chart.render(RenderConfig(indent=2, validate_contract=True))
        assert json.loads(rendered)["data"]["labels"] == ["Jan", "Feb", "Mar"]
        assert "\n" in rendered

    def test_render_contract_violation(self) -> None:
        """Пустой type графика нарушает контракт"""
        chart = Chart[list[XYDataset], NoAnnotations](
            type_="", data=Dataset[list[XYDataset]](datasets=[])
        )
        assert chart.to_dict() == {"type": "", "data": {"datasets": []}}
        with pytest.raises(ValidationError):
            chart.render(RenderConfig(validate_contract=True))
