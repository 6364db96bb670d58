import pytest

from goveelink.device import Device
from goveelink.topics import (
    availability_topic,
    camel_case_to_space_separated,
    kelvin_to_mired,
    light_segment_state_topic,
    light_state_topic,
    mired_to_kelvin,
    oneclick_topic,
    purge_cache_topic,
    switch_instance_state_topic,
    topic_safe_id,
    topic_safe_string,
)


def _device():
    return Device("H6000", "AA:BB:CC:DD:EE:FF:00:01")


def test_camel_case_to_space_separated():
    assert camel_case_to_space_separated("powerSwitch") == "Power Switch"
    assert camel_case_to_space_separated("oscillationToggle") == "Oscillation Toggle"


def test_camel_case_empty_raises():
    with pytest.raises(ValueError):
        camel_case_to_space_separated("")


def test_topic_safe_string():
    assert topic_safe_string("Living Room/Lamp:1") == "living_room_lamp_1"
    assert topic_safe_string("a'b\"c\\d") == "a_b_c_d"


def test_topic_safe_id_strips_colons_and_spaces():
    assert topic_safe_id(_device()) == "AABBCCDDEEFF0001"
    assert topic_safe_id(Device("H6000", "AA BB:CC")) == "AABBCC"


def test_device_topics():
    device = _device()
    assert light_state_topic(device) == "gv2mqtt/light/AABBCCDDEEFF0001/state"
    assert light_segment_state_topic(device, 3) == "gv2mqtt/light/AABBCCDDEEFF0001/state/3"
    assert (
        switch_instance_state_topic(device, "powerSwitch")
        == "gv2mqtt/switch/AABBCCDDEEFF0001/powerSwitch/state"
    )


def test_fixed_topics():
    assert availability_topic() == "gv2mqtt/availability"
    assert oneclick_topic() == "gv2mqtt/oneclick"
    assert purge_cache_topic() == "gv2mqtt/purge-caches"


def test_mired_kelvin_zero():
    assert mired_to_kelvin(0) == 0
    assert kelvin_to_mired(0) == 0


@pytest.mark.parametrize("kelvin", [2000, 2500, 4000, 5000])
def test_mired_kelvin_round_trip(kelvin):
    assert mired_to_kelvin(kelvin_to_mired(kelvin)) == kelvin


def test_mired_to_kelvin_truncates():
    assert mired_to_kelvin(1_000_000) == 1
    assert mired_to_kelvin(3) == 333333