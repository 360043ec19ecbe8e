from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool
from pathlib import Path
from typing import BinaryIO, Optional
import re
import shutil
import time
import logging

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def build_upload_filename(original_name: str, now_ms: Optional[int] = None) -> str:
    """Upload time in epoch milliseconds, then the client's name with whitespace runs replaced"""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    # Drop any client-supplied directory part
    name = Path(original_name or "upload").name
    return f"{now_ms}-{_WHITESPACE_RE.sub('_', name)}"


def _copy_to(source: BinaryIO, target: Path) -> None:
    with target.open("wb") as out:
        shutil.copyfileobj(source, out)


class PhotoStorage:
    """Stores uploaded profile photos on local disk; only the path goes to the database"""

    def __init__(self, upload_dir: str):
        self.upload_dir = Path(upload_dir)

    def ensure_dir(self) -> Path:
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        return self.upload_dir

    async def save(self, upload: Optional[UploadFile]) -> Optional[str]:
        """Persist an uploaded file and return its stored path, or None if nothing was attached"""
        if upload is None or not upload.filename:
            return None

        target = self.ensure_dir() / build_upload_filename(upload.filename)
        # Disk writes stay off the event loop
        await run_in_threadpool(_copy_to, upload.file, target)

        logger.info(f"Stored profile photo {target}")
        return target.as_posix()
