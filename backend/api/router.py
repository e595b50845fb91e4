import json
import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_ats_matcher
from config import settings
from models.requests import QuickMatchRequest
from models.responses import ATSMatchResponse, HealthResponse
from models.schemas.job_role import JobRole
from services import job_roles, pdf_parser
from services.ats_matcher import ATSMatcher

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


async def _read_resume_text(resume_file: UploadFile | None) -> str:
    """Validate the uploaded resume and return its text, or raise a 400."""
    if resume_file is None:
        raise HTTPException(status_code=400, detail="Resume file is required. Please upload a PDF.")

    if not resume_file.filename or not resume_file.filename.lower().endswith(".pdf"):
        raise HTTPException(status_code=400, detail="Only PDF files are accepted")

    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    if not pdf_parser.looks_like_pdf(content):
        logger.warning("Rejected upload %r: not a PDF", resume_file.filename)
        raise HTTPException(status_code=400, detail="Only PDF files are accepted")

    try:
        resume_text = pdf_parser.extract_text(content)
    except Exception as e:
        logger.warning("PDF parsing failed for %r: %s", resume_file.filename, e)
        raise HTTPException(
            status_code=400,
            detail="Could not parse PDF file. Use a valid PDF with extractable text.",
        )

    if not resume_text.strip():
        raise HTTPException(status_code=400, detail="No text could be extracted from PDF")

    return resume_text


def _validate_job_description(job_description: str) -> str:
    job_description = job_description.strip()
    if not job_description:
        raise HTTPException(status_code=400, detail="Job description is required and cannot be empty.")
    if len(job_description) > settings.max_job_description_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_job_description_chars} chars)",
        )
    return job_description


def _parse_required_skills(raw: str) -> list[str]:
    """Accept a JSON array of strings or a comma-separated list."""
    raw = raw.strip()
    if raw.startswith("["):
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError:
            raise HTTPException(status_code=400, detail="required_skills must be a valid array.")
        if not isinstance(parsed, list):
            raise HTTPException(status_code=400, detail="required_skills must be a valid array.")
        return [s for s in parsed if isinstance(s, str) and s.strip()]
    return [s.strip() for s in raw.split(",") if s.strip()]


@router.get("/health", response_model=HealthResponse)
async def health(matcher: ATSMatcher = Depends(get_ats_matcher)):
    return HealthResponse(status="ok", taxonomy_size=len(matcher.taxonomy))


@router.get("/api/job-roles", response_model=list[JobRole])
async def list_job_roles():
    return list(job_roles.JOB_ROLES)


@router.get("/api/job-roles/{role_id}", response_model=JobRole)
async def get_job_role(role_id: str):
    role = job_roles.get_job_role(role_id)
    if role is None:
        raise HTTPException(status_code=404, detail=f"Unknown job role: {role_id}")
    return role


@router.post("/api/ats-match", response_model=ATSMatchResponse)
@limiter.limit(settings.rate_limit)
async def ats_match(
    request: Request,
    resume_file: UploadFile | None = File(None),
    job_description: str = Form(""),
    matcher: ATSMatcher = Depends(get_ats_matcher),
):
    job_description = _validate_job_description(job_description)
    resume_text = await _read_resume_text(resume_file)
    result = matcher.match_job_description(job_description, resume_text)
    return ATSMatchResponse.from_result(result)


@router.post("/api/ats-match/quick", response_model=ATSMatchResponse)
@limiter.limit(settings.rate_limit)
async def ats_match_quick(
    request: Request,
    body: QuickMatchRequest,
    matcher: ATSMatcher = Depends(get_ats_matcher),
):
    job_description = _validate_job_description(body.job_description)
    result = matcher.match_job_description(job_description, body.resume_text)
    return ATSMatchResponse.from_result(result)


@router.post("/api/ats-match-skills", response_model=ATSMatchResponse)
@limiter.limit(settings.rate_limit)
async def ats_match_skills(
    request: Request,
    resume_file: UploadFile | None = File(None),
    required_skills: str = Form(""),
    role_id: str = Form(""),
    matcher: ATSMatcher = Depends(get_ats_matcher),
):
    role_id = role_id.strip()
    if role_id:
        role = job_roles.get_job_role(role_id)
        if role is None:
            raise HTTPException(status_code=404, detail=f"Unknown job role: {role_id}")
        skills = list(role.required_skills)
    else:
        skills = _parse_required_skills(required_skills)

    if not skills:
        raise HTTPException(
            status_code=400,
            detail="required_skills array is required and cannot be empty.",
        )

    resume_text = await _read_resume_text(resume_file)
    result = matcher.match_required_skills(skills, resume_text)
    return ATSMatchResponse.from_result(result, role_id=role_id or None)
