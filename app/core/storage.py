import logging
import os
import uuid
from pathlib import Path
from typing import Optional, Protocol

from app.core.config import Settings

logger = logging.getLogger(__name__)

LOCAL_URL_PREFIX = "/uploads/pets"


class PhotoStorage(Protocol):
    def save(self, content: bytes, filename: str, content_type: str) -> str:
        ...

    def delete(self, url: Optional[str]) -> bool:
        ...


class LocalPhotoStorage:
    """UPLOAD_DIR 에 <uuid><ext> 로 저장하고 /uploads/pets/... URL 반환."""

    def __init__(self, upload_dir: str):
        self.upload_dir = Path(upload_dir)
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    def save(self, content: bytes, filename: str, content_type: str) -> str:
        ext = os.path.splitext(filename or "")[1].lower()
        name = f"{uuid.uuid4()}{ext}"
        (self.upload_dir / name).write_bytes(content)
        logger.info("Stored pet photo %s (%d bytes)", name, len(content))
        return f"{LOCAL_URL_PREFIX}/{name}"

    def delete(self, url: Optional[str]) -> bool:
        if not url or not url.startswith(f"{LOCAL_URL_PREFIX}/"):
            return False
        target = self.upload_dir / os.path.basename(url)
        if not target.exists():
            return False
        target.unlink()
        return True


class FirebasePhotoStorage:
    def __init__(self, settings: Settings):
        from app.core.firebase import init_firebase

        init_firebase(settings)
        self.bucket_name = settings.FIREBASE_STORAGE_BUCKET

    def save(self, content: bytes, filename: str, content_type: str) -> str:
        from app.core.firebase import upload_file_to_storage

        ext = os.path.splitext(filename or "")[1].lower()
        return upload_file_to_storage(
            file_content=content,
            file_name=f"{uuid.uuid4()}{ext}",
            content_type=content_type,
            folder="pet_photos",
            bucket_name=self.bucket_name,
        )

    def delete(self, url: Optional[str]) -> bool:
        from app.core.firebase import delete_file_from_storage

        if not url:
            return False
        return delete_file_from_storage(url, bucket_name=self.bucket_name)


def build_photo_storage(settings: Settings) -> PhotoStorage:
    if settings.PHOTO_STORAGE == "firebase":
        return FirebasePhotoStorage(settings)
    return LocalPhotoStorage(settings.UPLOAD_DIR)
