"""Device state, model quirks, temperature units and MQTT topic helpers for Govee devices."""

__version__ = "0.1.0"