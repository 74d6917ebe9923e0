"""Persistence for the task list: codec, key-value backends, gateway."""

from ticklist.storage.backends import JsonFileStorage, KeyValueStorage, MemoryStorage
from ticklist.storage.codec import decode, encode
from ticklist.storage.gateway import PersistenceGateway

__all__ = [
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "PersistenceGateway",
    "decode",
    "encode",
]
