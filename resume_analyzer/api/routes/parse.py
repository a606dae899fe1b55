import asyncio
import logging

from fastapi import APIRouter, UploadFile, File, HTTPException

from resume_analyzer.core.config import settings
from resume_analyzer.core.document_assembler import parse, parse_text
from resume_analyzer.core.exceptions import DecodeError
from resume_analyzer.core.result_cache import content_key, result_cache
from resume_analyzer.core.schemas import ParsedDocument

logger = logging.getLogger(__name__)

router = APIRouter(tags=["parse"])


@router.post(
    "/parse",
    response_model=ParsedDocument,
    summary="Parse Resume",
    description="Turn a resume (PDF or TXT) into a structured document with contact details, sections, contextual skills and a quality score.",
    responses={
        200: {"description": "Successfully parsed resume"},
        400: {"description": "Empty file uploaded"},
        415: {"description": "Unsupported file format"},
        422: {"description": "File could not be decoded"},
        504: {"description": "Parsing timed out"},
    }
)
async def parse_resume(
    file: UploadFile = File(..., description="Resume file (PDF or TXT format)")
):
    """
    Parse a resume file.

    **Supported formats:**
    - PDF (.pdf) - Text-layer extraction only, OCR not supported
    - TXT (.txt)

    **Returns:**
    - **contact**: name, email, phone (10 digits), linkedin, github, website
    - **sections**: typed sections in document order
    - **skills / skillAnalysis**: detected skills with confidence and level
    - **qualityMetrics**: overall score, sub-metrics and recommendations
    """
    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")

    filename = file.filename or ""
    lowered = filename.lower()
    content_type = (file.content_type or "").lower()

    if lowered.endswith(".pdf") or content_type == "application/pdf":
        kind = "pdf"
        job = lambda: parse(raw, file_name=filename or None)
    elif lowered.endswith(".txt") or content_type == "text/plain":
        text = raw.decode("utf-8", errors="replace")
        kind = "txt"
        job = lambda: parse_text(text, file_name=filename or None)
    else:
        raise HTTPException(status_code=415, detail=f"Unsupported content type for now: {file.content_type}")

    key = content_key(raw, kind)
    if settings.RESULT_CACHE_ENABLED:
        cached = result_cache.get(key)
        if cached is not None:
            logger.debug(f"Result cache hit for {key[:16]}")
            return cached.model_copy(update={"file_name": filename or None})

    try:
        loop = asyncio.get_running_loop()
        document = await asyncio.wait_for(loop.run_in_executor(None, job), timeout=settings.PARSE_TIMEOUT_SECONDS)
    except DecodeError as e:
        logger.warning(f"Decode failed for '{filename}': {e}")
        raise HTTPException(status_code=422, detail="Could not analyze this file.") from e
    except asyncio.TimeoutError as e:
        logger.warning(f"Parse timed out after {settings.PARSE_TIMEOUT_SECONDS}s for '{filename}'")
        raise HTTPException(status_code=504, detail="Parsing timed out.") from e

    if settings.RESULT_CACHE_ENABLED:
        result_cache.set(key, document)
    return document
