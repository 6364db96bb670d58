# goveelink

goveelink models Govee smart home devices. It combines a device's state
from several sources and provides helpers for presenting devices to Home
Assistant over MQTT. It is a library and has no command of its own.

## Modules

- `goveelink.temperature`
  - `TemperatureScale` (`CELSIUS`, `FARENHEIT`) and `TemperatureUnits`.
    `TemperatureUnits` also has the scaled forms `CELSIUS_TIMES_100` and
    `FARENHEIT_TIMES_100`.
  - `TemperatureValue` converts between units with `as_unit`, `as_celsius`
    and `as_farenheit`, and removes scaling with `normalize`.
  - `TemperatureValue.parse_with_optional_scale` reads strings such as
    `"23"`, `"23.3"` or `" 23 C "`. A scale suffix in the text takes
    precedence over the scale passed in. If there is neither, the value is
    Celsius. An unknown suffix raises `ValueError`.
  - `ftoc` and `ctof` convert plain numbers.
- `goveelink.quirks`
  - `resolve_quirk(sku)` looks a model up in the table of known models.
  - Each `Quirk` records the model's `DeviceType` and icon, together with
    RGB and brightness support, colour temperature range, LAN and IoT API
    support, BLE-only status, sensor units and preset modes.
  - `HumidityUnits` converts raw humidity readings to relative percent.
- `goveelink.device`
  - `Device` holds what is known about one device from the LAN API, the
    Platform API, the account API and AWS IoT.
  - `device_state()` returns the most recently updated `DeviceState` from
    those sources.
  - `Device` also works out the device's name, its type and what the device
    supports.
  - It tracks the active scene and clears it when the colour or colour
    temperature changes.
- `goveelink.topics`
  - MQTT topic names: `light_state_topic`, `light_segment_state_topic`,
    `switch_instance_state_topic`, `availability_topic`, `oneclick_topic`
    and `purge_cache_topic`.
  - `topic_safe_id` and `topic_safe_string` make identifiers safe to use in
    topics.
  - `mired_to_kelvin` and `kelvin_to_mired` convert colour temperatures.
  - `camel_case_to_space_separated` turns a name such as `powerSwitch` into
    `Power Switch`.
- `goveelink.hass_config`
  - `HassArguments` holds the MQTT broker and Home Assistant settings.
  - Any setting that is not given falls back to one of the environment
    variables `GOVEE_MQTT_HOST`, `GOVEE_MQTT_PORT` (default 1883),
    `GOVEE_MQTT_USER`, `GOVEE_MQTT_PASSWORD` and `GOVEE_TEMPERATURE_SCALE`
    (default Celsius).
  - A missing host or an invalid environment value raises
    `ConfigurationError`.
- `goveelink.scenes`
  - `sort_and_dedup_scenes` sorts scene names without regard to ASCII case.
    It then drops adjacent names that are exactly the same.

## Example

```python
from goveelink.device import Device
from goveelink.temperature import TemperatureValue
from goveelink.topics import light_state_topic

device = Device("H6000", "00:00:00:00:00:00:00:01")
print(device.name())               # H6000_0001
print(light_state_topic(device))   # gv2mqtt/light/0000000000000001/state

temp = TemperatureValue.parse_with_optional_scale("76F", None)
print(round(temp.as_celsius(), 1))  # 24.4
```

## What it does not do

goveelink does not connect to an MQTT broker, an HTTP API or AWS IoT. It
does not send commands to devices. It keeps no registry of devices and
serves no web interface. It provides the models and helpers that such a
bridge would use.

## Tests

Install the test extra:

    pip install -e ".[test]"

Then run the tests:

    pytest