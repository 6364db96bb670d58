"""Temperature scales, scaled units and values with conversion between them."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from decimal import Decimal

UNIT_CELSIUS = "°C"
UNIT_FARENHEIT = "°F"
DEVICE_CLASS_TEMPERATURE = "temperature"

_CELSIUS_NAMES = frozenset({"c", "C", "°c", "°C", "Celsius", "celsius"})
_FARENHEIT_NAMES = frozenset({"f", "F", "°f", "°F", "Farenheit", "farenheit"})


def _format_number(value: float) -> str:
    """Format a float the short way: no trailing '.0' and no exponent."""
    if value != value or value in (float("inf"), float("-inf")):
        return repr(value)
    if float(value).is_integer():
        return str(int(value))
    text = repr(float(value))
    if "e" in text or "E" in text:
        return format(Decimal(text), "f")
    return text


class TemperatureScale(enum.Enum):
    """A temperature scale."""

    CELSIUS = UNIT_CELSIUS
    FARENHEIT = UNIT_FARENHEIT

    def unit_of_measurement(self) -> str:
        """The unit string for this scale, such as '°C'."""
        return self.value

    @classmethod
    def parse(cls, s: str) -> TemperatureScale:
        """Parse a scale name; raises ValueError for an unknown name."""
        if s in _CELSIUS_NAMES:
            return cls.CELSIUS
        if s in _FARENHEIT_NAMES:
            return cls.FARENHEIT
        raise ValueError(f"Unknown temperature scale {s}")

    def __str__(self) -> str:
        return self.unit_of_measurement()


class TemperatureUnits(enum.Enum):
    """A temperature scale, possibly multiplied by a fixed factor."""

    CELSIUS = "celsius"
    CELSIUS_TIMES_100 = "celsius*100"
    FARENHEIT = "farenheit"
    FARENHEIT_TIMES_100 = "farenheit*100"

    def factor(self) -> float:
        """The multiplier applied to readings in these units."""
        if self in (TemperatureUnits.CELSIUS_TIMES_100, TemperatureUnits.FARENHEIT_TIMES_100):
            return 100.0
        return 1.0

    def scale(self) -> TemperatureScale:
        """The underlying temperature scale."""
        if self in (TemperatureUnits.CELSIUS, TemperatureUnits.CELSIUS_TIMES_100):
            return TemperatureScale.CELSIUS
        return TemperatureScale.FARENHEIT

    def unit_of_measurement(self) -> str | None:
        """The unit string, or None for scaled units."""
        if self.factor() == 1.0:
            return self.scale().unit_of_measurement()
        return None

    @classmethod
    def from_scale(cls, scale: TemperatureScale) -> TemperatureUnits:
        """The unscaled units for a scale."""
        if scale is TemperatureScale.CELSIUS:
            return cls.CELSIUS
        return cls.FARENHEIT

    def __str__(self) -> str:
        factor = self.factor()
        scale = self.scale()
        if factor == 1.0:
            return str(scale)
        return f"{scale}*{_format_number(factor)}"


def ftoc(f: float) -> float:
    """Convert farenheit to celsius."""
    return (f - 32.0) * (5.0 / 9.0)


def ctof(c: float) -> float:
    """Convert celsius to farenheit."""
    return (c * 9.0 / 5.0) + 32.0


def _split_number(text: str) -> tuple[float, str]:
    """Split a string into its numeric prefix and the trimmed remainder."""
    text = text.strip()
    end = next(
        (pos for pos, ch in enumerate(text) if not ch.isnumeric() and ch != "."),
        len(text),
    )
    prefix = text[:end]
    try:
        number = float(prefix)
    except ValueError:
        raise ValueError(f"invalid float literal {prefix!r}") from None
    return number, text[end:].strip()


@dataclass(frozen=True)
class TemperatureValue:
    """A temperature reading in specific units."""

    value: float
    unit: TemperatureUnits

    @classmethod
    def with_celsius(cls, value: float) -> TemperatureValue:
        return cls(value, TemperatureUnits.CELSIUS)

    @classmethod
    def with_farenheit(cls, value: float) -> TemperatureValue:
        return cls(value, TemperatureUnits.FARENHEIT)

    def normalize(self) -> TemperatureValue:
        """Return the value with any scaling factor removed."""
        return TemperatureValue(
            self.value / self.unit.factor(),
            TemperatureUnits.from_scale(self.unit.scale()),
        )

    def as_unit(self, unit: TemperatureUnits) -> TemperatureValue:
        """Convert to the given units."""
        if self.unit == unit:
            return self
        normalized = self.value / self.unit.factor()
        source, target = self.unit.scale(), unit.scale()
        if source is target:
            converted = normalized
        elif source is TemperatureScale.CELSIUS:
            converted = ctof(normalized)
        else:
            converted = ftoc(normalized)
        return TemperatureValue(converted * unit.factor(), unit)

    def as_celsius(self) -> float:
        return self.as_unit(TemperatureUnits.CELSIUS).value

    def as_farenheit(self) -> float:
        return self.as_unit(TemperatureUnits.FARENHEIT).value

    @classmethod
    def parse_with_optional_scale(
        cls, s: str, scale: TemperatureScale | None = None
    ) -> TemperatureValue:
        """Parse text such as '23', '23.5F' or ' 23 C '.

        A scale suffix in the text wins; otherwise ``scale`` is used,
        defaulting to Celsius.
        """
        value, suffix = _split_number(s)
        if suffix:
            resolved = TemperatureScale.parse(suffix)
        else:
            resolved = scale if scale is not None else TemperatureScale.CELSIUS
        return cls(value, TemperatureUnits.from_scale(resolved))

    def __str__(self) -> str:
        normalized = self.normalize()
        return f"{_format_number(normalized.value)}{normalized.unit}"