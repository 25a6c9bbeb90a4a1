from app.models.blobs import StoredBlob

__all__ = ["StoredBlob"]
