"""지하철 여정 계획 엔진"""

__version__ = "1.0.0"
