"""Settings for the Home Assistant MQTT integration, with environment fallbacks."""

from __future__ import annotations

import os
from typing import Callable, TypeVar

from goveelink.temperature import TemperatureScale

DEFAULT_MQTT_PORT = 1883
DEFAULT_DISCOVERY_PREFIX = "homeassistant"

_T = TypeVar("_T")


class ConfigurationError(ValueError):
    """A required setting is missing or an environment value is invalid."""


def _parse_port(text: str) -> int:
    port = int(text)
    if not 0 <= port <= 0xFFFF:
        raise ValueError(f"port {port} is out of range")
    return port


def _opt_env_var(name: str, parse: Callable[[str], _T]) -> _T | None:
    raw = os.environ.get(name)
    if raw is None:
        return None
    try:
        return parse(raw)
    except ValueError as err:
        raise ConfigurationError(f"while parsing ${name} value {raw!r}: {err}") from err


class HassArguments:
    """MQTT broker and Home Assistant settings.

    Settings not given explicitly are taken from GOVEE_* environment
    variables when they are asked for.
    """

    def __init__(
        self,
        *,
        mqtt_host: str | None = None,
        mqtt_port: int | None = None,
        mqtt_username: str | None = None,
        mqtt_password: str | None = None,
        mqtt_bind_address: str | None = None,
        hass_discovery_prefix: str = DEFAULT_DISCOVERY_PREFIX,
        temperature_scale: str | None = None,
    ) -> None:
        if mqtt_port is not None:
            _parse_port(str(mqtt_port))
        self._mqtt_host = mqtt_host
        self._mqtt_port = mqtt_port
        self._mqtt_username = mqtt_username
        self._mqtt_password = mqtt_password
        self._temperature_scale = temperature_scale
        self.mqtt_bind_address = mqtt_bind_address
        self.hass_discovery_prefix = hass_discovery_prefix

    def opt_mqtt_host(self) -> str | None:
        if self._mqtt_host is not None:
            return self._mqtt_host
        return _opt_env_var("GOVEE_MQTT_HOST", str)

    def mqtt_host(self) -> str:
        host = self.opt_mqtt_host()
        if host is None:
            raise ConfigurationError(
                "Please specify the mqtt broker either via the "
                "--mqtt-host parameter or by setting $GOVEE_MQTT_HOST"
            )
        return host

    def mqtt_port(self) -> int:
        if self._mqtt_port is not None:
            return self._mqtt_port
        port = _opt_env_var("GOVEE_MQTT_PORT", _parse_port)
        return DEFAULT_MQTT_PORT if port is None else port

    def mqtt_username(self) -> str | None:
        if self._mqtt_username is not None:
            return self._mqtt_username
        return _opt_env_var("GOVEE_MQTT_USER", str)

    def mqtt_password(self) -> str | None:
        if self._mqtt_password is not None:
            return self._mqtt_password
        return _opt_env_var("GOVEE_MQTT_PASSWORD", str)

    def temperature_scale(self) -> TemperatureScale:
        if self._temperature_scale is not None:
            return TemperatureScale.parse(self._temperature_scale)
        scale = _opt_env_var("GOVEE_TEMPERATURE_SCALE", TemperatureScale.parse)
        return TemperatureScale.CELSIUS if scale is None else scale