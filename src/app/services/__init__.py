"""
Application Services.

역할:
- analysis: 업로드 → 분석 → 결과 화면 상태 머신
"""

from .analysis import AnalysisController

__all__ = [
    "AnalysisController",
]
