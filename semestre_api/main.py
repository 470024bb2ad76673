"""
FastAPI backend for the Semestre Filtro grading core.

This service provides:
- Single answer comparison
- Exam grading with score, percentage and history entry
- Report rows for exported exams
- Structured logging and consistent error responses
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware

from semestre.report import ExamReport

from .core import (
    settings,
    setup_logging,
    get_logger,
    register_error_handlers,
)
from .models import (
    CompareRequest,
    CompareResponse,
    GradeRequest,
    GradeResponse,
)
from .services import GradingService, get_grading_service

# Setup logging
setup_logging()
logger = get_logger(__name__)


# Lifecycle management
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    logger.info(
        "Starting grading API",
        extra_data={
            "environment": settings.ENVIRONMENT,
            "debug": settings.DEBUG
        }
    )
    yield
    logger.info("Shutting down grading API")


app = FastAPI(
    title=settings.APP_NAME,
    description="Answer comparison and exam grading for generated physics exams",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

register_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)


# API Routes

@app.get("/")
async def read_root():
    """API root endpoint"""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "endpoints": {
            "compare": f"{settings.API_PREFIX}/answers/compare",
            "grade": f"{settings.API_PREFIX}/exams/grade",
            "report": f"{settings.API_PREFIX}/exams/report",
            "health": "/health"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT
    }


@app.post(f"{settings.API_PREFIX}/answers/compare", response_model=CompareResponse)
async def compare_answer(
    request: CompareRequest,
    service: GradingService = Depends(get_grading_service)
):
    """Compare one submitted answer with the canonical answer."""
    comparison = service.compare_answer(
        request.user_answer,
        request.correct_answer,
        request.question_type
    )
    return CompareResponse(correct=comparison.matched, strategy=comparison.strategy.value)


@app.post(f"{settings.API_PREFIX}/exams/grade", response_model=GradeResponse)
async def grade_exam(
    request: GradeRequest,
    service: GradingService = Depends(get_grading_service)
):
    """
    Grade a finished exam.

    Returns:
        Score, percentage, per-question feedback and the history entry
    """
    report, history_entry = await service.grade_exam(request.exam, request.answers)
    return GradeResponse.from_domain(report, history_entry)


@app.post(f"{settings.API_PREFIX}/exams/report", response_model=ExamReport)
async def exam_report(
    request: GradeRequest,
    service: GradingService = Depends(get_grading_service)
):
    """Build report rows for exporting a finished exam."""
    logger.info(
        "Building exam report",
        extra_data={"exam_id": request.exam.id}
    )
    return await service.build_report(request.exam, request.answers)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "semestre_api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
