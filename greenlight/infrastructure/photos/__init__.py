from .filesystem_photo_provider import FilesystemPersonPhotoProvider

__all__ = ["FilesystemPersonPhotoProvider"]
