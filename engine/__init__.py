from .trend_state import TrendState, TrendStateMachine

__all__ = ["TrendState", "TrendStateMachine"]
