import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from pethealth.core.config import settings
from pethealth.core.error_handler import request_validation_handler
from pethealth.core.logging_config import configure_logging
from pethealth.domains.pets.router.pets_router import router as pets_router
from pethealth.domains.weights.router.weight_router import router as weight_router
from pethealth.domains.events.router.event_router import router as event_router
from pethealth.domains.care.router.vaccination_router import router as vaccination_router
from pethealth.domains.care.router.medication_router import router as medication_router
from pethealth.domains.reminders.router.reminder_router import router as reminder_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version="1.0.0",
        description="반려동물 건강 기록 (몸무게, 병원/접종/투약 이벤트, 리마인더) API",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        openapi_tags=[
            {"name": "Pets", "description": "반려동물 등록/조회/수정/삭제 API"},
            {"name": "Weights", "description": "몸무게 기록 API"},
            {"name": "Events", "description": "병원/접종/투약/예약 이벤트 API"},
            {"name": "Vaccinations", "description": "접종 기록 API"},
            {"name": "Medications", "description": "투약 기록 API"},
            {"name": "Reminders", "description": "리마인더 및 대시보드 API"},
        ]
    )

    # 검증 실패 → 400 (필드별 오류 목록)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
    )

    # 🟢 라우터 등록
    app.include_router(pets_router, prefix=settings.API_PREFIX)
    app.include_router(weight_router, prefix=settings.API_PREFIX)
    app.include_router(event_router, prefix=settings.API_PREFIX)
    app.include_router(vaccination_router, prefix=settings.API_PREFIX)
    app.include_router(medication_router, prefix=settings.API_PREFIX)
    app.include_router(reminder_router, prefix=settings.API_PREFIX)

    @app.get("/health", tags=["Health"])
    def health():
        return {"status": "ok", "env": settings.ENV}

    logger.info("%s started (env=%s, prefix=%s)", settings.APP_NAME, settings.ENV, settings.API_PREFIX)
    return app


app = create_app()

# 🟢 로컬 실행용 entry point
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "pethealth.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
