"""The combined view of one device, built from every source of facts about it."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from goveelink.quirks import BULB, DEFAULT_COLOR_TEMP_RANGE, DeviceType, Quirk, resolve_quirk

log = logging.getLogger(__name__)

_U32_MAX = 0xFFFFFFFF


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DeviceColor:
    """An RGB color with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0


@dataclass
class DeviceState:
    """Device state synthesized from the facts held by a Device."""

    on: bool
    light_on: bool | None
    online: bool | None
    kelvin: int
    color: DeviceColor
    brightness: int
    scene: str | None
    source: str
    updated: datetime


@dataclass
class UndocDeviceInfo:
    """Device entry from the account API, with the room it is placed in."""

    entry: Any
    room_name: str | None = None


@dataclass
class _ActiveSceneInfo:
    name: str
    color: DeviceColor
    kelvin: int


def _integer_value(state: Any) -> int | None:
    if not isinstance(state, dict):
        return None
    value = state.get("value")
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if not 0 <= value <= _U32_MAX:
        return None
    return value


def _bool_value(state: Any) -> bool | None:
    if not isinstance(state, dict):
        return None
    value = state.get("value")
    return value if isinstance(value, bool) else None


def _ascii_upper(text: str) -> str:
    return "".join(ch.upper() if ch.isascii() else ch for ch in text)


@dataclass
class Device:
    """Everything known about one device.

    The source objects are used by their attributes: a LAN device has
    ``ip``; a status has ``on``, ``brightness``, ``color`` and
    ``color_temperature_kelvin``; platform info has ``device_name``,
    ``device_type``, ``supports_rgb()``, ``supports_brightness()``,
    ``capability_by_instance()`` and ``get_color_temperature_range()``;
    platform state has ``capabilities`` (each with ``instance`` and a
    JSON ``state``) and ``capability_by_instance()``.
    """

    sku: str
    id: str

    lan_device: Any = None
    last_lan_device_update: datetime | None = None

    lan_device_status: Any = None
    last_lan_device_status_update: datetime | None = None

    http_device_info: Any = None
    last_http_device_update: datetime | None = None

    http_device_state: Any = None
    last_http_device_state_update: datetime | None = None

    undoc_device_info: UndocDeviceInfo | None = None
    last_undoc_device_info_update: datetime | None = None

    iot_device_status: Any = None
    last_iot_device_status_update: datetime | None = None

    nightlight_state: Any = None
    target_humidity_percent: int | None = None
    humidifier_work_mode: int | None = None
    humidifier_param_by_mode: dict[int, int] = field(default_factory=dict)

    last_polled: datetime | None = None

    _active_scene: _ActiveSceneInfo | None = field(default=None, init=False, repr=False)

    def __str__(self) -> str:
        return f"{self.name()} ({self.id} {self.sku})"

    # Naming

    def name(self) -> str:
        """The name set in the Govee app, or else a computed one."""
        govee = self.govee_name()
        return govee if govee is not None else self.computed_name()

    def govee_name(self) -> str | None:
        if self.http_device_info is None:
            return None
        return self.http_device_info.device_name

    def room_name(self) -> str | None:
        if self.undoc_device_info is None:
            return None
        return self.undoc_device_info.room_name

    def computed_name(self) -> str:
        """The sku plus the last four characters of the normalized id."""
        normalized = _ascii_upper(self.id.replace(":", ""))
        return f"{self.sku}_{normalized[-4:]}"

    def ip_addr(self) -> Any:
        return None if self.lan_device is None else self.lan_device.ip

    # Recording facts

    def set_last_polled(self) -> None:
        self.last_polled = _now()

    def set_nightlight_state(self, params: Any) -> None:
        self.nightlight_state = params

    def set_target_humidity(self, percent: int) -> None:
        self.target_humidity_percent = percent

    def set_humidifier_work_mode_and_param(self, mode: int, param: int) -> None:
        self.humidifier_work_mode = mode
        self.humidifier_param_by_mode[mode] = param

    def set_lan_device(self, device: Any) -> None:
        self.lan_device = device
        self.last_lan_device_update = _now()

    def set_lan_device_status(self, status: Any) -> bool:
        """Record a LAN status; return whether it differs from the prior one."""
        changed = self.lan_device_status is None or self.lan_device_status != status
        self.lan_device_status = status
        self.last_lan_device_status_update = _now()
        self.clear_scene_if_color_changed()
        return changed

    def set_iot_device_status(self, status: Any) -> None:
        self.iot_device_status = status
        self.last_iot_device_status_update = _now()
        self.clear_scene_if_color_changed()

    def set_http_device_info(self, info: Any) -> None:
        self.http_device_info = info
        self.last_http_device_update = _now()

    def set_http_device_state(self, state: Any) -> None:
        self.http_device_state = state
        self.last_http_device_state_update = _now()
        self.clear_scene_if_color_changed()

    def set_undoc_device_info(self, entry: Any, room_name: str | None = None) -> None:
        self.undoc_device_info = UndocDeviceInfo(entry=entry, room_name=room_name)
        self.last_undoc_device_info_update = _now()
        self.clear_scene_if_color_changed()

    # State synthesis

    def _scene_name(self) -> str | None:
        return None if self._active_scene is None else self._active_scene.name

    def compute_iot_device_state(self) -> DeviceState | None:
        updated = self.last_iot_device_status_update
        status = self.iot_device_status
        if updated is None or status is None:
            return None
        if self.device_type() is DeviceType.LIGHT:
            light_on = status.on
        elif self.nightlight_state is not None:
            light_on = self.nightlight_state.on
        else:
            light_on = None
        return DeviceState(
            on=status.on,
            light_on=light_on,
            online=None,
            brightness=status.brightness,
            color=status.color,
            kelvin=status.color_temperature_kelvin,
            scene=self._scene_name(),
            source="AWS IoT API",
            updated=updated,
        )

    def compute_lan_device_state(self) -> DeviceState | None:
        updated = self.last_lan_device_status_update
        status = self.lan_device_status
        if updated is None or status is None:
            return None
        return DeviceState(
            on=status.on,
            light_on=status.on,  # a LAN API device is assumed to be a light
            online=None,
            brightness=status.brightness,
            color=status.color,
            kelvin=status.color_temperature_kelvin,
            scene=self._scene_name(),
            source="LAN API",
            updated=updated,
        )

    def compute_http_device_state(self) -> DeviceState | None:
        updated = self.last_http_device_state_update
        state = self.http_device_state
        if updated is None or state is None:
            return None

        online: bool | None = None
        on = False
        light_on: bool | None = None
        brightness = 0
        color = DeviceColor()
        kelvin = 0

        light_instance = self.get_light_power_toggle_instance_name()

        for cap in state.capabilities:
            value = _integer_value(cap.state)
            if value is not None:
                if light_instance is not None and light_instance == cap.instance:
                    light_on = value != 0
                if cap.instance == "powerSwitch":
                    on = value != 0
                elif cap.instance == "colorRgb":
                    color = DeviceColor(
                        r=(value >> 16) & 0xFF,
                        g=(value >> 8) & 0xFF,
                        b=value & 0xFF,
                    )
                elif cap.instance == "brightness":
                    brightness = value & 0xFF
                elif cap.instance == "colorTemperatureK":
                    kelvin = value
            elif cap.instance == "online":
                flag = _bool_value(cap.state)
                if flag is not None:
                    online = flag

        return DeviceState(
            on=on,
            light_on=light_on,
            online=online,
            brightness=brightness,
            color=color,
            kelvin=kelvin,
            scene=self._scene_name(),
            source="PLATFORM API",
            updated=updated,
        )

    def device_state(self) -> DeviceState | None:
        """The most recently updated state among all sources."""
        candidates = [
            state
            for state in (
                self.compute_lan_device_state(),
                self.compute_http_device_state(),
                self.compute_iot_device_state(),
            )
            if state is not None
        ]
        if not candidates:
            return None
        return sorted(candidates, key=lambda s: s.updated)[-1]

    def _color_and_kelvin(self) -> tuple[DeviceColor, int]:
        state = self.device_state()
        if state is None:
            return DeviceColor(), 0
        return state.color, state.kelvin

    def set_active_scene(self, scene: str | None) -> None:
        """Record the active scene, or clear it when given None."""
        if scene is None:
            self._active_scene = None
            return
        color, kelvin = self._color_and_kelvin()
        self._active_scene = _ActiveSceneInfo(name=scene, color=color, kelvin=kelvin)

    def clear_scene_if_color_changed(self) -> None:
        info = self._active_scene
        if info is None:
            return
        current = self._color_and_kelvin()
        scene_state = (info.color, info.kelvin)
        if current != scene_state:
            log.info("Clearing reported scene because current %r != %r", current, scene_state)
            self._active_scene = None

    # Capabilities

    def device_type(self) -> DeviceType:
        if self.http_device_info is not None:
            return self.http_device_info.device_type
        quirk = resolve_quirk(self.sku)
        if quirk is not None:
            return quirk.device_type
        return DeviceType.LIGHT

    def needs_platform_poll(self) -> bool:
        """Whether platform API data is needed to report this device correctly."""
        if not self.iot_api_supported():
            return True
        if self.sku == "H7160":
            return False
        device_type = self.device_type()
        if device_type is DeviceType.HUMIDIFIER:
            return True
        if device_type is DeviceType.LIGHT:
            return False
        return True

    def pollable_via_lan(self) -> bool:
        return self.lan_device is not None

    def pollable_via_iot(self) -> bool:
        if not self.iot_api_supported():
            return False
        return self.sku == "H7160" or self.device_type() is DeviceType.LIGHT

    def avoid_platform_api(self) -> bool:
        quirk = self.resolve_quirk()
        if quirk is None:
            return False
        if quirk.avoid_platform_api:
            return True
        # LAN support says "light" even when the platform says otherwise;
        # in that case the platform data is not trusted.
        platform_rgb = self.http_device_info is not None and self.http_device_info.supports_rgb()
        return self.lan_device is not None and not platform_rgb

    def resolve_quirk(self) -> Quirk | None:
        quirk = resolve_quirk(self.sku)
        if quirk is not None:
            return quirk
        # An unknown model found on the LAN is assumed to be a light.
        if self.lan_device is not None:
            return Quirk.light(self.sku, BULB).with_lan_api()
        return None

    def get_capability_by_instance(self, instance: str) -> Any:
        if self.http_device_info is None:
            return None
        return self.http_device_info.capability_by_instance(instance)

    def get_state_capability_by_instance(self, instance: str) -> Any:
        if self.http_device_state is None:
            return None
        return self.http_device_state.capability_by_instance(instance)

    def get_light_power_toggle_instance_name(self) -> str | None:
        if self.device_type() is DeviceType.LIGHT:
            return "powerSwitch"
        # For devices that are not primarily lights, control the
        # nightlight rather than the main function.
        if self.get_capability_by_instance("nightlightToggle") is not None:
            return "nightlightToggle"
        return None

    def get_color_temperature_range(self) -> tuple[int, int] | None:
        quirk = self.resolve_quirk()
        if quirk is not None:
            return quirk.color_temp_range
        if self.lan_device is not None:
            return DEFAULT_COLOR_TEMP_RANGE
        if self.http_device_info is None:
            return None
        return self.http_device_info.get_color_temperature_range()

    def supports_brightness(self) -> bool:
        quirk = self.resolve_quirk()
        if quirk is not None:
            return quirk.supports_brightness
        if self.lan_device is not None:
            return True
        return self.http_device_info is not None and bool(
            self.http_device_info.supports_brightness()
        )

    def iot_api_supported(self) -> bool:
        quirk = self.resolve_quirk()
        return quirk is not None and quirk.iot_api_supported

    def supports_rgb(self) -> bool:
        quirk = self.resolve_quirk()
        if quirk is not None:
            return quirk.supports_rgb
        if self.lan_device is not None:
            return True
        return self.http_device_info is not None and bool(self.http_device_info.supports_rgb())

    def is_ble_only_device(self) -> bool | None:
        """True or False when known; None when it cannot be told."""
        quirk = self.resolve_quirk()
        if quirk is not None:
            return quirk.ble_only
        if self.http_device_info is not None:
            # BLE-only devices are not returned by the platform API.
            return False
        if self.undoc_device_info is not None:
            settings = self.undoc_device_info.entry.device_ext.device_settings
            return settings.wifi_name is None
        return None

    def is_controllable(self) -> bool:
        return self.is_ble_only_device() is not True