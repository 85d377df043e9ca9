from pathlib import Path

from fastapi import HTTPException
from fastapi.responses import FileResponse

from portfolio.core import config


def download_resume():
    resume = Path(config.RESUME_PATH)
    if not resume.is_file():
        raise HTTPException(status_code=404, detail='Resume not available.')
    return FileResponse(resume, filename=config.RESUME_DOWNLOAD_NAME)
