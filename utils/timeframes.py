# utils/timeframes.py
from providers.models import CandlePeriod


def period_start(ts_ms: int, period: CandlePeriod) -> int:
    """
    Начало свечи, в которую попадает ts_ms.
    Всё, что раньше этой отметки, — уже закрытые свечи.
    """
    return ts_ms - ts_ms % period.millis
