"""MQTT topic names and small value conversions for Home Assistant."""

from __future__ import annotations

from goveelink.device import Device

_TOPIC_UNSAFE = frozenset(":\\/'\" ")


def topic_safe_string(s: str) -> str:
    """Lowercase (ASCII) and replace characters unsafe in topics with '_'."""
    return "".join(
        "_" if ch in _TOPIC_UNSAFE else (ch.lower() if ch.isascii() else ch) for ch in s
    )


def topic_safe_id(device: Device) -> str:
    """The device id with colons and spaces removed."""
    return device.id.replace(":", "").replace(" ", "")


def switch_instance_state_topic(device: Device, instance: str) -> str:
    return f"gv2mqtt/switch/{topic_safe_id(device)}/{instance}/state"


def light_state_topic(device: Device) -> str:
    return f"gv2mqtt/light/{topic_safe_id(device)}/state"


def light_segment_state_topic(device: Device, segment: int) -> str:
    return f"gv2mqtt/light/{topic_safe_id(device)}/state/{segment}"


def availability_topic() -> str:
    """Shared by all entities so that a last-will marks them all unavailable."""
    return "gv2mqtt/availability"


def oneclick_topic() -> str:
    return "gv2mqtt/oneclick"


def purge_cache_topic() -> str:
    return "gv2mqtt/purge-caches"


def mired_to_kelvin(mired: int) -> int:
    return 0 if mired == 0 else 1_000_000 // mired


def kelvin_to_mired(kelvin: int) -> int:
    return 0 if kelvin == 0 else 1_000_000 // kelvin


def camel_case_to_space_separated(camel: str) -> str:
    """Turn 'powerSwitch' into 'Power Switch'."""
    if not camel:
        raise ValueError("cannot convert an empty name")
    first = camel[0].upper() if camel[0].isascii() else camel[0]
    rest = "".join(f" {ch}" if ch.isupper() else ch for ch in camel[1:])
    return first + rest