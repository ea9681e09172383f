import logging
from datetime import datetime
from typing import Optional
from urllib.parse import unquote, urlparse

import firebase_admin
from firebase_admin import credentials, auth, storage

from app.core.config import Settings

logger = logging.getLogger(__name__)


def init_firebase(settings: Settings):
    """
    Firebase Admin 앱 초기화 (중복 초기화 방지).
    import 시점이 아니라 provider/storage 생성 시점에 호출된다.
    """
    if firebase_admin._apps:
        return firebase_admin.get_app()

    logger.info("Loading Firebase credentials from: %s", settings.FIREBASE_CREDENTIALS)
    cred = (
        credentials.Certificate(settings.FIREBASE_CREDENTIALS)
        if settings.FIREBASE_CREDENTIALS
        else credentials.ApplicationDefault()
    )
    options = {}
    if settings.FIREBASE_STORAGE_BUCKET:
        options["storageBucket"] = settings.FIREBASE_STORAGE_BUCKET

    app = firebase_admin.initialize_app(cred, options)
    logger.info("Firebase Admin SDK initialized (bucket=%s)", settings.FIREBASE_STORAGE_BUCKET)
    return app


def verify_firebase_token(id_token: str) -> Optional[dict]:
    try:
        # clock_skew_seconds=60으로 시계 오차 60초까지 허용
        return auth.verify_id_token(
            id_token,
            check_revoked=False,
            clock_skew_seconds=60,
        )
    except Exception as e:
        logger.warning("Firebase token verification failed: %s: %s", type(e).__name__, e)
        if "used too early" in str(e) or "clock" in str(e).lower():
            logger.warning("This is a clock synchronization issue. Please sync your system time.")
        return None


def create_custom_token(uid: str) -> str:
    token = auth.create_custom_token(uid)
    return token.decode("utf-8") if isinstance(token, bytes) else token


def upload_file_to_storage(
    file_content: bytes,
    file_name: str,
    content_type: str = "image/jpeg",
    folder: str = "pet_photos",
    bucket_name: Optional[str] = None,
) -> str:
    """
    Firebase Storage에 파일 업로드

    Returns:
        str: 업로드된 파일의 public URL
    """
    bucket = storage.bucket(bucket_name) if bucket_name else storage.bucket()

    timestamp = datetime.utcnow().strftime("%Y%m%d_%H%M%S")
    blob = bucket.blob(f"{folder}/{timestamp}_{file_name}")
    blob.upload_from_string(file_content, content_type=content_type)

    blob.make_public()
    return blob.public_url


def delete_file_from_storage(public_url: str, bucket_name: Optional[str] = None) -> bool:
    """public URL 에서 blob 경로를 복원해 삭제. 없는 파일이면 False."""
    bucket = storage.bucket(bucket_name) if bucket_name else storage.bucket()

    # https://storage.googleapis.com/<bucket>/<blob path>
    path = unquote(urlparse(public_url).path).lstrip("/")
    prefix = f"{bucket.name}/"
    if not path.startswith(prefix):
        return False

    blob = bucket.blob(path[len(prefix):])
    if not blob.exists():
        return False
    blob.delete()
    return True
