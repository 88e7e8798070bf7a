from frontdoor.infrastructure.storage.storage_protocol import StorageFactory, StorageProtocol

__all__ = ["StorageFactory", "StorageProtocol"]
