"""HTTP surface of the placement feedback summarizer.

Importing this module has no network side-effects: the MongoDB client is only
created when the first request needs the report service. The runtime
bootstrap lives in ``summarizer.main``.
"""
import logging
import os
from datetime import datetime as _dt
from datetime import timezone as _tz
from functools import lru_cache
from typing import Any, Optional

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from summarizer.exceptions import InvalidCompanyNameError, ReportGenerationError
from summarizer.service import ReportService
from summarizer.store import FeedbackRepository, get_feedback_collection

# Load environment variables from .env file
load_dotenv()

# Set up logging
logging_level = os.environ.get("SUMMARIZER_LOG_LEVEL", "INFO")
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging_level
)
logger = logging.getLogger(__name__)

SERVICE_NAME = "KEC Placement Feedback Summarizer"
SERVICE_VERSION = "1.0.0"

app = FastAPI(
    title=SERVICE_NAME,
    description="Backend service for generating formal placement drive feedback summary reports",
    version=SERVICE_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class GenerateReportRequest(BaseModel):
    company_name: Optional[Any] = Field(default=None, alias="companyName")
    format: str = "json"
    use_ai: bool = Field(default=True, alias="useAI")

    model_config = ConfigDict(populate_by_name=True)


@lru_cache()
def get_report_service() -> ReportService:
    return ReportService(FeedbackRepository(get_feedback_collection()))


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


# ------------------------------------------------------------------
# Middleware and error handlers
# ------------------------------------------------------------------


@app.middleware("http")
async def log_request(request: Request, call_next):
    logger.info("%s %s", request.method, request.url.path)
    return await call_next(request)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return _error(404, "Endpoint not found")
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.debug("Rejected request body on %s: %s", request.url.path, exc.errors())
    return _error(400, "Invalid request body")


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return _error(500, "An internal error occurred")


# ------------------------------------------------------------------
# Routes
# ------------------------------------------------------------------


@app.post("/api/reports/generate")
async def generate_report(
    body: GenerateReportRequest,
    service: ReportService = Depends(get_report_service),
):
    """Generate the summary report for ``companyName`` as JSON or plain text."""
    try:
        result = await service.generate(body.company_name, use_ai=body.use_ai)
    except InvalidCompanyNameError as exc:
        return _error(400, str(exc))
    except ReportGenerationError as exc:
        return _error(500, str(exc))

    if body.format == "text":
        return PlainTextResponse(service.render_text(result))
    return result.to_dict()


@app.get("/api/reports/companies")
async def list_companies(service: ReportService = Depends(get_report_service)):
    try:
        companies = await service.list_companies()
    except Exception:
        logger.exception("Error fetching companies")
        return _error(500, "An error occurred while fetching the company list.")
    return {"success": True, "data": companies, "count": len(companies)}


@app.get("/api/reports/companies/{company_name}/count")
async def get_feedback_count(
    company_name: str, service: ReportService = Depends(get_report_service)
):
    try:
        count = await service.get_feedback_count(company_name)
    except InvalidCompanyNameError:
        return _error(400, "Company name is required")
    except Exception:
        logger.exception("Error fetching feedback count for %s", company_name)
        return _error(500, "An error occurred while fetching the feedback count.")
    return {"success": True, "data": {"company": company_name, "feedbackCount": count}}


@app.get("/health")
async def health_check():
    return {
        "status": "operational",
        "service": SERVICE_NAME,
        "timestamp": _dt.now(tz=_tz.utc).isoformat(),
    }


@app.get("/")
async def root():
    return {
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "description": "Backend service for generating formal placement drive feedback summary reports",
        "endpoints": {
            "health": "GET /health",
            "generateReport": "POST /api/reports/generate",
            "listCompanies": "GET /api/reports/companies",
            "feedbackCount": "GET /api/reports/companies/:companyName/count",
        },
    }
