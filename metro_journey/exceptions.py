"""커스텀 예외 모듈

경로 탐색/최근접 역/소요시간 계산은 예외 대신 None을 반환합니다.
예외는 노선 데이터 로드처럼 외부 입력을 다루는 경계에서만 사용합니다.
"""


class MetroJourneyError(Exception):
    """패키지 기본 예외"""
    pass


class NetworkDataError(MetroJourneyError):
    """노선 데이터 파일 누락/형식 오류 예외"""
    pass


class ServiceUnavailableError(MetroJourneyError):
    """노선 데이터가 로드되지 않은 상태에서 서비스 호출"""
    pass
