"""환경 설정 모듈"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


# 패키지 내장 샘플 노선 데이터
DEFAULT_NETWORK_DATA_FILE = str(Path(__file__).parent / "data" / "network.json")


class Settings(BaseSettings):
    # App
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR
    LOG_FILE: Optional[str] = None  # 파일 로깅 경로 (None이면 콘솔만)

    # 노선/역 데이터 (stations + lines JSON)
    NETWORK_DATA_FILE: str = DEFAULT_NETWORK_DATA_FILE

    # CORS
    ALLOWED_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    # 소요시간 추정 상수
    AVERAGE_SPEED_KMH: float = 45.0
    DWELL_SECONDS_PER_STOP: int = 20
    INTERCHANGE_PENALTY_SECONDS: int = 120
    LINE_CHANGE_PENALTY_SECONDS: int = 600

    @property
    def allowed_origins_list(self) -> list[str]:
        """CORS 허용 오리진 리스트"""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()


@dataclass(frozen=True)
class DurationConfig:
    """소요시간 추정 상수

    Attributes:
        average_speed_kmh: 평균 운행 속도 (km/h)
        dwell_seconds_per_stop: 정차역당 정차 시간 (초)
        interchange_penalty_seconds: 환승 통로 도보 시간 (초, 1회당)
        line_change_penalty_seconds: 노선 변경 대기 시간 (초, 1회당)
    """
    average_speed_kmh: float = 45.0
    dwell_seconds_per_stop: int = 20
    interchange_penalty_seconds: int = 120
    line_change_penalty_seconds: int = 600

    @classmethod
    def from_settings(cls, source: Optional[Settings] = None) -> "DurationConfig":
        """Settings 값으로 DurationConfig 생성"""
        source = source or settings
        return cls(
            average_speed_kmh=source.AVERAGE_SPEED_KMH,
            dwell_seconds_per_stop=source.DWELL_SECONDS_PER_STOP,
            interchange_penalty_seconds=source.INTERCHANGE_PENALTY_SECONDS,
            line_change_penalty_seconds=source.LINE_CHANGE_PENALTY_SECONDS,
        )

    @property
    def meters_per_second(self) -> float:
        return self.average_speed_kmh * 1000 / 3600
