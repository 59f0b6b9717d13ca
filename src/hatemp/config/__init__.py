from .core_config import AttributeSource, ExtractionConfig, StateSource, TemperatureSource

__all__ = ["AttributeSource", "ExtractionConfig", "StateSource", "TemperatureSource"]
