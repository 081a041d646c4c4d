import pytest

from airgradient_api.schemas import FIELD_RANGES
from airgradient_api.validation import (
    CHIP_ID_REQUIRED,
    CHIP_ID_TOO_LONG,
    validate_chip_id,
    validate_reading,
)

from .utils import VALID_PAYLOAD


class TestChipId:
    @pytest.mark.parametrize("chip_id", [None, "", "   ", "\t\n"])
    def test_missing_or_blank_is_rejected(self, chip_id):
        assert validate_chip_id(chip_id) == [CHIP_ID_REQUIRED]

    def test_longer_than_fifty_characters_is_rejected(self):
        assert validate_chip_id("A" * 51) == [CHIP_ID_TOO_LONG]

    @pytest.mark.parametrize("chip_id", ["A", "TEST-CHIP-001", "A" * 50])
    def test_one_to_fifty_characters_is_accepted(self, chip_id):
        assert validate_chip_id(chip_id) == []

    def test_invalid_chip_id_rejects_a_valid_body(self):
        result = validate_reading("A" * 51, VALID_PAYLOAD)

        assert not result.ok
        assert result.reading is None
        assert result.chip_id_errors == [CHIP_ID_TOO_LONG]
        assert result.field_errors == {}


class TestRanges:
    def test_valid_reading_is_accepted(self):
        result = validate_reading("TEST-CHIP-001", VALID_PAYLOAD)

        assert result.ok
        assert result.reading.chip_id == "TEST-CHIP-001"
        assert result.reading.wifi == -50
        assert result.reading.atmp == 72.5

    @pytest.mark.parametrize("bound", [0, 1], ids=["minimum", "maximum"])
    def test_every_field_at_its_bound_is_accepted(self, bound):
        payload = {name: limits[bound] for name, limits in FIELD_RANGES.items()}

        assert validate_reading("CHIP", payload).ok

    @pytest.mark.parametrize(
        "field,value",
        [
            ("wifi", -101),
            ("wifi", 1),
            ("rco2", -1),
            ("rco2", 50001),
            ("pm02", -1),
            ("pm02", 1001),
            ("atmp", -41),
            ("atmp", 177),
            ("rhum", -1),
            ("rhum", 101),
        ],
    )
    def test_one_unit_beyond_a_bound_names_the_field(self, field, value):
        result = validate_reading("CHIP", {**VALID_PAYLOAD, field: value})

        assert not result.ok
        assert list(result.field_errors) == [field]
        assert result.field_errors[field] == [FIELD_RANGES[field][2]]

    def test_range_messages_name_the_unit(self):
        result = validate_reading("CHIP", {**VALID_PAYLOAD, "pm02": 1500, "atmp": 200})

        assert result.field_errors["pm02"] == ["PM2.5 reading must be between 0 and 1000 µg/m³"]
        assert result.field_errors["atmp"] == ["Temperature must be between -40 and 176°F"]


class TestCollection:
    def test_all_violations_are_collected(self):
        payload = {"wifi": -150, "rco2": 60000, "pm02": 15, "atmp": 72.5, "rhum": 150}

        result = validate_reading("", payload)

        assert result.chip_id_errors == [CHIP_ID_REQUIRED]
        assert set(result.field_errors) == {"wifi", "rco2", "rhum"}

    def test_missing_field_is_reported(self):
        payload = dict(VALID_PAYLOAD)
        del payload["rhum"]

        result = validate_reading("CHIP", payload)

        assert list(result.field_errors) == ["rhum"]

    def test_wrong_type_is_reported(self):
        result = validate_reading("CHIP", {**VALID_PAYLOAD, "rco2": "lots"})

        assert list(result.field_errors) == ["rco2"]

    @pytest.mark.parametrize("payload", [None, [], "text", 42])
    def test_non_object_body_is_rejected(self, payload):
        result = validate_reading("CHIP", payload)

        assert not result.ok
        assert "body" in result.field_errors
