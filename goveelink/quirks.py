"""Per-model knowledge that overrides or completes what the cloud APIs report."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Iterable

from goveelink.temperature import TemperatureUnits


class DeviceType(enum.Enum):
    """The primary function of a device."""

    LIGHT = "light"
    HEATER = "heater"
    HUMIDIFIER = "humidifier"
    THERMOMETER = "thermometer"
    KETTLE = "kettle"


class HumidityUnits(enum.Enum):
    """How a humidity sensor reports its readings."""

    RELATIVE_PERCENT = "relative_percent"
    RELATIVE_PERCENT_TIMES_100 = "relative_percent*100"

    def from_reading_to_relative_percent(self, value: float) -> float:
        """Convert a raw reading to relative humidity in percent."""
        if self is HumidityUnits.RELATIVE_PERCENT_TIMES_100:
            return value / 100.0
        return value


STRIP = "mdi:led-strip-variant"
STRIP_ALT = "mdi:led-strip"
FLOOD = "mdi:light-flood-down"
STRING = "mdi:string-lights"
BULB = "mdi:light-bulb"
FLOOR_LAMP = "mdi:floor-lamp"
TV_BACK = "mdi:television-ambient-light"
DESK = "mdi:desk-lamp"
HEX = "mdi:hexagon-multiple"
TRIANGLE = "mdi:triangle"
NIGHTLIGHT = "mdi:lightbulb-night"
WALL_SCONCE = "mdi:wall-sconce"
OUTDOOR_LAMP = "mdi:outdoor-lamp"
SPOTLIGHT = "mdi:lightbulb-spot"

DEFAULT_COLOR_TEMP_RANGE = (2000, 9000)


@dataclass(frozen=True)
class Quirk:
    """Known facts about a device model.

    The ``with_*`` methods return an amended copy and leave the
    original untouched.
    """

    sku: str
    icon: str
    device_type: DeviceType
    supports_rgb: bool = False
    supports_brightness: bool = False
    color_temp_range: tuple[int, int] | None = None
    avoid_platform_api: bool = False
    ble_only: bool = False
    lan_api_capable: bool = False
    platform_temperature_sensor_units: TemperatureUnits | None = None
    platform_humidity_sensor_units: HumidityUnits | None = None
    # True when every relevant packet from the IoT subscription can be
    # parsed and applied as device state.
    iot_api_supported: bool = False
    show_as_preset_buttons: tuple[str, ...] | None = None

    @classmethod
    def device(cls, sku: str, device_type: DeviceType, icon: str) -> Quirk:
        return cls(sku=sku, icon=icon, device_type=device_type)

    @classmethod
    def light(cls, sku: str, icon: str) -> Quirk:
        return (
            cls.device(sku, DeviceType.LIGHT, icon)
            .with_rgb()
            .with_brightness()
            .with_color_temp()
            .with_iot_api_support(True)
        )

    @classmethod
    def space_heater(cls, sku: str) -> Quirk:
        return cls.device(sku, DeviceType.HEATER, "mdi:heat-wave")

    @classmethod
    def humidifier(cls, sku: str) -> Quirk:
        return cls.device(sku, DeviceType.HUMIDIFIER, "mdi:air-humidifier")

    @classmethod
    def thermometer(cls, sku: str) -> Quirk:
        return cls.device(sku, DeviceType.THERMOMETER, "mdi:thermometer")

    @classmethod
    def lan_api_capable_light(cls, sku: str, icon: str) -> Quirk:
        return cls.light(sku, icon).with_lan_api()

    def with_rgb(self) -> Quirk:
        return replace(self, supports_rgb=True)

    def with_brightness(self) -> Quirk:
        return replace(self, supports_brightness=True)

    def with_platform_temperature_sensor_units(self, units: TemperatureUnits) -> Quirk:
        return replace(self, platform_temperature_sensor_units=units)

    def with_platform_humidity_sensor_units(self, units: HumidityUnits) -> Quirk:
        return replace(self, platform_humidity_sensor_units=units)

    def with_iot_api_support(self, supported: bool) -> Quirk:
        return replace(self, iot_api_supported=supported)

    def with_color_temp(self) -> Quirk:
        return replace(self, color_temp_range=DEFAULT_COLOR_TEMP_RANGE)

    def with_lan_api(self) -> Quirk:
        return replace(self, lan_api_capable=True)

    def with_show_as_preset_modes(self, modes: Iterable[str]) -> Quirk:
        return replace(self, show_as_preset_buttons=tuple(modes))

    def with_broken_platform(self) -> Quirk:
        return replace(self, avoid_platform_api=True)

    def with_ble_only(self, ble_only: bool) -> Quirk:
        return replace(self, ble_only=ble_only)

    def should_show_mode_as_preset(self, mode: str) -> bool:
        """Whether the named mode should be offered as preset buttons."""
        return self.show_as_preset_buttons is not None and mode in self.show_as_preset_buttons


def _known_quirks() -> list[Quirk]:
    f = TemperatureUnits.FARENHEIT
    rh = HumidityUnits.RELATIVE_PERCENT
    lan = Quirk.lan_api_capable_light
    return [
        lan("H610A", STRIP),
        # Platform metadata for these is bogus.
        Quirk.light("H6141", STRIP).with_broken_platform(),
        Quirk.light("H6159", STRIP).with_broken_platform(),
        # These don't behave like the others over IoT.
        Quirk.light("H6121", STRIP).with_iot_api_support(False),
        Quirk.light("H6154", STRIP).with_iot_api_support(False),
        Quirk.light("H6176", STRIP).with_iot_api_support(False),
        # BLE-only devices.
        Quirk.light("H6102", STRIP).with_broken_platform().with_ble_only(True),
        Quirk.light("H6053", STRIP).with_broken_platform().with_ble_only(True),
        Quirk.light("H617C", STRIP).with_broken_platform().with_ble_only(True),
        Quirk.light("H617E", STRIP).with_broken_platform().with_ble_only(True),
        Quirk.light("H617F", STRIP).with_broken_platform().with_ble_only(True),
        Quirk.light("H6119", STRIP).with_broken_platform().with_ble_only(True),
        # Humidifier with mangled platform data.
        Quirk.humidifier("H7160")
        .with_broken_platform()
        .with_iot_api_support(True)
        .with_rgb()
        .with_brightness(),
        Quirk.space_heater("H7130").with_platform_temperature_sensor_units(f),
        Quirk.space_heater("H7131")
        .with_platform_temperature_sensor_units(f)
        .with_show_as_preset_modes(["gearMode"])
        .with_rgb()
        .with_brightness(),
        Quirk.space_heater("H713A").with_platform_temperature_sensor_units(f),
        Quirk.space_heater("H713B").with_platform_temperature_sensor_units(f),
        Quirk.space_heater("H7132").with_platform_temperature_sensor_units(f),
        Quirk.space_heater("H7135").with_platform_temperature_sensor_units(f),
        Quirk.thermometer("H5051")
        .with_platform_temperature_sensor_units(f)
        .with_platform_humidity_sensor_units(rh),
        Quirk.thermometer("H5103")
        .with_platform_temperature_sensor_units(f)
        .with_platform_humidity_sensor_units(rh),
        Quirk.thermometer("H5179")
        .with_platform_temperature_sensor_units(f)
        .with_platform_humidity_sensor_units(rh),
        Quirk.device("H7170", DeviceType.KETTLE, "mdi:kettle")
        .with_platform_temperature_sensor_units(f),
        Quirk.device("H7171", DeviceType.KETTLE, "mdi:kettle")
        .with_platform_temperature_sensor_units(f)
        .with_show_as_preset_modes(["M1", "M2", "M3", "M4"]),
        Quirk.device("H7173", DeviceType.KETTLE, "mdi:kettle")
        .with_platform_temperature_sensor_units(f)
        .with_show_as_preset_modes(["Tea", "Coffee", "DIY"]),
        # Lights documented as LAN API capable.
        lan("H6072", FLOOR_LAMP),
        lan("H619B", STRIP),
        lan("H619C", STRIP),
        lan("H619Z", STRIP),
        lan("H7060", FLOOD),
        lan("H6046", TV_BACK),
        lan("H6047", TV_BACK),
        lan("H6051", DESK),
        lan("H6056", STRIP_ALT),
        lan("H6059", NIGHTLIGHT),
        lan("H6061", HEX),
        lan("H6062", STRIP),
        lan("H6065", STRIP),
        lan("H6066", HEX),
        lan("H6067", TRIANGLE),
        lan("H6073", FLOOR_LAMP),
        lan("H6076", FLOOR_LAMP),
        lan("H6078", FLOOR_LAMP),
        lan("H6087", WALL_SCONCE),
        lan("H610A", STRIP),
        lan("H610B", STRIP),
        lan("H6117", STRIP),
        lan("H6159", STRIP),
        lan("H615E", STRIP),
        lan("H6163", STRIP),
        lan("H6168", TV_BACK),
        lan("H6172", STRIP),
        lan("H6173", STRIP),
        lan("H618A", STRIP),
        lan("H618C", STRIP),
        lan("H618E", STRIP),
        lan("H618F", STRIP),
        lan("H619A", STRIP),
        lan("H619D", STRIP),
        lan("H619E", STRIP),
        lan("H61A0", STRIP),
        lan("H61A1", STRIP),
        lan("H61A2", STRIP),
        lan("H61A3", STRIP),
        lan("H61A5", STRIP),
        lan("H61A8", STRIP),
        lan("H61B2", TV_BACK),
        lan("H61E1", STRIP),
        lan("H7012", STRING),
        lan("H7013", STRING),
        lan("H7021", STRING),
        lan("H7028", STRING),
        lan("H7041", STRING),
        lan("H7042", STRING),
        lan("H7050", BULB),
        lan("H7051", BULB),
        lan("H7055", BULB),
        lan("H705A", OUTDOOR_LAMP),
        lan("H705B", OUTDOOR_LAMP),
        lan("H7061", FLOOD),
        lan("H7062", FLOOD),
        lan("H7065", SPOTLIGHT),
    ]


# Later entries for the same sku replace earlier ones.
_QUIRKS: dict[str, Quirk] = {quirk.sku: quirk for quirk in _known_quirks()}


def resolve_quirk(sku: str) -> Quirk | None:
    """Return the known quirk for a model, or None."""
    return _QUIRKS.get(sku)