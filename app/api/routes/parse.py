import logging

from fastapi import APIRouter, UploadFile, File, HTTPException

from app.core.config import settings
from app.core.schemas import ParsedResume, ParseTextRequest
from app.core.text_parser import parse_resume

logger = logging.getLogger(__name__)

router = APIRouter(tags=["parse"])

BINARY_DOCUMENT_TYPES = {
    "application/pdf",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


def _run_parser(text: str) -> ParsedResume:
    return parse_resume(
        text,
        current_year=settings.REFERENCE_YEAR,
        summary_max_chars=settings.SUMMARY_MAX_CHARS,
    )


@router.post(
    "/parse",
    response_model=ParsedResume,
    summary="Parse Resume",
    description="Structure a plain-text resume (already decoded from PDF/DOCX) into personal info, experience, education and skills with confidence scores and validation issues.",
    responses={
        200: {
            "description": "Successfully parsed resume",
            "content": {
                "application/json": {
                    "example": {
                        "personalInfo": {
                            "name": "Jane A Smith",
                            "email": "jane@example.com",
                            "phone": "555-123-4567",
                            "address": None,
                            "confidence": 0.93
                        },
                        "experience": [
                            {
                                "company": "Acme Corp",
                                "position": "Senior Engineer",
                                "description": "Built scalable systems for five years.",
                                "startDate": "2018-01-01",
                                "endDate": "2023-01-01",
                                "confidence": 1.0
                            }
                        ],
                        "confidence": 0.87,
                        "parseQuality": "high",
                        "issues": []
                    }
                }
            }
        },
        400: {"description": "Empty file uploaded"},
        413: {"description": "File exceeds the upload size limit"},
        415: {"description": "Unsupported file format"}
    }
)
async def parse_upload(
    file: UploadFile = File(..., description="Plain-text resume (TXT or MD)")
):
    """
    Parse an uploaded plain-text resume.

    **Supported formats:**
    - TXT (.txt)
    - Markdown (.md)

    PDF and DOCX must be decoded to text before calling this endpoint.
    """
    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")
    if len(raw) > settings.MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"File exceeds the {settings.MAX_UPLOAD_BYTES // (1024 * 1024)}MB upload limit."
        )

    filename = (file.filename or "").lower()
    content_type = (file.content_type or "").lower()

    if content_type in BINARY_DOCUMENT_TYPES or filename.endswith((".pdf", ".docx")):
        raise HTTPException(
            status_code=415,
            detail="PDF/DOCX must be converted to plain text before parsing."
        )

    if content_type.startswith("text/") or filename.endswith(tuple(settings.SUPPORTED_TEXT_EXTENSIONS)):
        text = raw.decode("utf-8", errors="replace")
        logger.info(f"Parsing upload '{file.filename}' ({len(raw)} bytes)")
        return _run_parser(text)

    raise HTTPException(status_code=415, detail=f"Unsupported content type: {file.content_type}")


@router.post(
    "/parse/text",
    response_model=ParsedResume,
    summary="Parse Resume Text",
    description="Structure resume text sent as JSON.",
)
def parse_text(payload: ParseTextRequest):
    return _run_parser(payload.text)
