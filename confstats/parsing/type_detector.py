import re
from typing import Any, Tuple


class TypeDetector:
    BOOL_TRUE_VARIANTS = {"true"}
    BOOL_FALSE_VARIANTS = {"false"}

    INT_PATTERN = re.compile(r'^[-+]?\d+$')
    FLOAT_PATTERN = re.compile(r'^[-+]?(\d+\.\d*|\.\d+)$')

    @classmethod
    def detect(cls, value: Any) -> str:
        if value is None:
            return "null"

        if isinstance(value, bool):
            return "bool"

        if isinstance(value, int):
            return "int"

        if isinstance(value, float):
            return "float"

        if isinstance(value, str):
            value_stripped = value.strip()

            if cls.INT_PATTERN.match(value_stripped):
                return "int"

            if cls.FLOAT_PATTERN.match(value_stripped):
                return "float"

            if value_stripped.lower() in cls.BOOL_TRUE_VARIANTS | cls.BOOL_FALSE_VARIANTS:
                return "bool"

            return "str"

        return "str"

    @classmethod
    def coerce(cls, value: Any) -> Tuple[Any, str]:
        if not isinstance(value, str):
            return value, cls.detect(value)

        value = value.strip()
        detected_type = cls.detect(value)

        if detected_type == "int":
            return int(value), "int"

        if detected_type == "float":
            return float(value), "float"

        if detected_type == "bool":
            return value.lower() in cls.BOOL_TRUE_VARIANTS, "bool"

        return value, "str"

    @classmethod
    def to_number(cls, value: Any) -> float:
        """Numeric value of an int/float or numeral string; ValueError otherwise."""
        if isinstance(value, bool):
            raise ValueError(f"Expected a number, got boolean {value!r}")
        if isinstance(value, (int, float)):
            return value
        coerced, detected_type = cls.coerce(value)
        if detected_type not in ("int", "float"):
            raise ValueError(f"Expected a number, got {value!r}")
        return coerced
