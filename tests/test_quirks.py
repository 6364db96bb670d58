import pytest

from goveelink.quirks import (
    BULB,
    DeviceType,
    HumidityUnits,
    Quirk,
    resolve_quirk,
)
from goveelink.temperature import TemperatureUnits


def test_unknown_sku_has_no_quirk():
    assert resolve_quirk("NOPE123") is None


def test_light_defaults():
    q = Quirk.light("X1", BULB)
    assert q.device_type is DeviceType.LIGHT
    assert q.supports_rgb and q.supports_brightness
    assert q.color_temp_range == (2000, 9000)
    assert q.iot_api_supported is True
    assert q.lan_api_capable is False
    assert q.avoid_platform_api is False
    assert q.icon == "mdi:light-bulb"


def test_lan_api_capable_light():
    q = Quirk.lan_api_capable_light("X2", BULB)
    assert q.lan_api_capable is True
    assert q.device_type is DeviceType.LIGHT


def test_builders_do_not_mutate_original():
    base = Quirk.humidifier("X3")
    changed = base.with_rgb().with_broken_platform().with_ble_only(True)
    assert base.supports_rgb is False
    assert base.avoid_platform_api is False
    assert base.ble_only is False
    assert changed.supports_rgb and changed.avoid_platform_api and changed.ble_only
    assert changed.sku == "X3"


def test_constructors_set_type_and_icon():
    assert Quirk.space_heater("A").device_type is DeviceType.HEATER
    assert Quirk.space_heater("A").icon == "mdi:heat-wave"
    assert Quirk.humidifier("B").icon == "mdi:air-humidifier"
    assert Quirk.thermometer("C").device_type is DeviceType.THERMOMETER
    assert Quirk.thermometer("C").icon == "mdi:thermometer"


def test_later_entry_overrides_earlier():
    q = resolve_quirk("H6159")
    assert q.lan_api_capable is True
    assert q.avoid_platform_api is False


def test_h7160_humidifier():
    q = resolve_quirk("H7160")
    assert q.device_type is DeviceType.HUMIDIFIER
    assert q.avoid_platform_api is True
    assert q.iot_api_supported is True
    assert q.supports_rgb and q.supports_brightness
    assert q.color_temp_range is None


def test_ble_only_devices():
    for sku in ["H6102", "H6053", "H617C", "H617E", "H617F", "H6119"]:
        q = resolve_quirk(sku)
        assert q.ble_only is True
        assert q.avoid_platform_api is True


def test_iot_unsupported_lights():
    for sku in ["H6121", "H6154", "H6176"]:
        assert resolve_quirk(sku).iot_api_supported is False


def test_thermometer_units():
    q = resolve_quirk("H5179")
    assert q.platform_temperature_sensor_units is TemperatureUnits.FARENHEIT
    assert q.platform_humidity_sensor_units is HumidityUnits.RELATIVE_PERCENT


@pytest.mark.parametrize(
    "sku,mode,expected",
    [
        ("H7131", "gearMode", True),
        ("H7131", "fanMode", False),
        ("H7173", "Tea", True),
        ("H7171", "M3", True),
        ("H7170", "M1", False),
    ],
)
def test_should_show_mode_as_preset(sku, mode, expected):
    assert resolve_quirk(sku).should_show_mode_as_preset(mode) is expected


def test_kettle_type():
    q = resolve_quirk("H7173")
    assert q.device_type is DeviceType.KETTLE
    assert q.icon == "mdi:kettle"


def test_lan_lights_icons():
    assert resolve_quirk("H6072").icon == "mdi:floor-lamp"
    assert resolve_quirk("H7065").icon == "mdi:lightbulb-spot"
    assert resolve_quirk("H7050").lan_api_capable is True


def test_humidity_units_conversion():
    assert HumidityUnits.RELATIVE_PERCENT.from_reading_to_relative_percent(45.0) == 45.0
    assert HumidityUnits.RELATIVE_PERCENT_TIMES_100.from_reading_to_relative_percent(4500.0) == 45.0


def test_preset_modes_stored():
    q = Quirk.device("X4", DeviceType.KETTLE, "mdi:kettle").with_show_as_preset_modes(["A", "B"])
    assert q.show_as_preset_buttons == ("A", "B")
    assert q.should_show_mode_as_preset("B") is True
    assert Quirk.light("X5", BULB).should_show_mode_as_preset("A") is False