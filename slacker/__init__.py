"""
slacker package initialization.
"""

from .core.config_builder import build_config, build_config_from_settings
from .core.errors import ConfigInvalid, DeliveryFailed, SlackerError, StoreUnavailable
from .core.notifier import Slacker, send
from .core.record_store import InMemoryRecordStore, JsonFileRecordStore, RecordStore
from .models.common import FrequencyPolicy, NotifierConfig, Recipient

__all__ = [
    "Slacker",
    "send",
    "build_config",
    "build_config_from_settings",
    "FrequencyPolicy",
    "NotifierConfig",
    "Recipient",
    "RecordStore",
    "JsonFileRecordStore",
    "InMemoryRecordStore",
    "SlackerError",
    "ConfigInvalid",
    "StoreUnavailable",
    "DeliveryFailed",
]
