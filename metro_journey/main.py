"""FastAPI 메인 애플리케이션"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from metro_journey import __version__
from metro_journey.config import settings
from metro_journey.logging_config import setup_logger
from metro_journey.routers import journey_router
from metro_journey.services.journey import (
    check_journey_service,
    initialize_journey_service,
    journey_service,
)

logger = setup_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 시작/종료 시 실행"""
    logger.info(f"[Metro Journey API] 환경: {settings.ENVIRONMENT}")
    initialize_journey_service()
    yield
    logger.info("[Metro Journey API] 종료")


app = FastAPI(
    title="Metro Journey API",
    description="지하철 경로 탐색 / 최근접 역 / 예상 소요시간 API",
    version=__version__,
    lifespan=lifespan
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
app.include_router(journey_router, tags=["journey"])


@app.get("/health")
async def health_check():
    """헬스체크 엔드포인트"""
    return {
        "status": "healthy",
        "version": __version__,
        "environment": settings.ENVIRONMENT,
        "services": {
            "network": "available" if check_journey_service() else "unavailable"
        },
        "stats": journey_service.get_stats(),
    }


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "service": "Metro Journey API",
        "version": __version__,
        "docs": "/docs"
    }
