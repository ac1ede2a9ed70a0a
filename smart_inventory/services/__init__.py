from .decision_engine import DecisionEngine
from .reporting_service import ReportingService

__all__ = [
    'DecisionEngine',
    'ReportingService'
]
