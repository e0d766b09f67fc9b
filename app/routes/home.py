import json
import platform
from datetime import datetime, timezone
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.settings import settings

router = APIRouter()


def load_git_meta():
    meta_file = Path(__file__).parent.parent / "git_meta.json"
    if meta_file.exists():
        return json.loads(meta_file.read_text())
    return {}


GIT_META = load_git_meta()
BUILD_TIME = datetime.now(timezone.utc)


@router.get("/healthz", response_class=JSONResponse)
def healthz():
    return {"status": "ok"}


@router.get("/meta")
async def get_meta():
    return {
        "app_name": "FlexFrame",
        "version": settings.VERSION,
        "build_time": BUILD_TIME,
        "python_version": platform.python_version(),
        "environment": settings.ENV,
        **GIT_META,
    }
