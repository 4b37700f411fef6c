"""좌표 거리 계산 유틸리티"""

import math
from collections.abc import Mapping
from typing import Any, Optional, Tuple


EARTH_RADIUS_M = 6371000  # 지구 반경 (미터)

# 좌표를 감싸는 중첩 필드 (브라우저 GeolocationPosition.coords, Station.coordinates)
_NESTED_KEYS = ("coords", "coordinates")
_KEY_PAIRS = (("latitude", "longitude"), ("lat", "lng"))


def haversine_distance(
    lat1: float,
    lng1: float,
    lat2: float,
    lng2: float
) -> float:
    """
    두 좌표 간 거리 계산 (미터)

    Haversine 공식 사용
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lng2 - lng1)

    a = (math.sin(delta_phi / 2) ** 2 +
         math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def coerce_position(position: Any) -> Optional[Tuple[float, float]]:
    """
    다양한 형태의 위치 입력을 (lat, lng) 튜플로 변환

    지원 형식:
        - (lat, lng) 튜플/리스트
        - {"latitude", "longitude"} 또는 {"lat", "lng"} dict
        - 같은 이름의 속성을 가진 객체 (Coordinates 등)
        - coords/coordinates 아래에 좌표를 둔 객체 (GeolocationPosition, Station)

    Returns:
        (lat, lng) 또는 None (숫자가 아니거나 범위를 벗어난 경우)
    """
    if position is None or isinstance(position, (str, bytes)):
        return None

    if isinstance(position, (tuple, list)):
        if len(position) < 2:
            return None
        return _validate(position[0], position[1])

    for nested in _NESTED_KEYS:
        inner = _lookup(position, nested)
        if inner is not None:
            return coerce_position(inner)

    for lat_key, lng_key in _KEY_PAIRS:
        lat = _lookup(position, lat_key)
        lng = _lookup(position, lng_key)
        if lat is not None and lng is not None:
            return _validate(lat, lng)

    return None


def distance_to(position: Tuple[float, float], lat: float, lng: float) -> float:
    """(lat, lng) 튜플과 좌표 간 거리 (미터)"""
    return haversine_distance(position[0], position[1], lat, lng)


def _lookup(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def _validate(lat: Any, lng: Any) -> Optional[Tuple[float, float]]:
    try:
        lat_f = float(lat)
        lng_f = float(lng)
    except (TypeError, ValueError):
        return None

    if not (math.isfinite(lat_f) and math.isfinite(lng_f)):
        return None
    if not (-90 <= lat_f <= 90 and -180 <= lng_f <= 180):
        return None

    return lat_f, lng_f
