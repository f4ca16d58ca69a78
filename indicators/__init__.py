#__init__.py
from .ema import EmaFilter, to_decimal
from .oscillator import OscillatorBuilder, OscillatorSample, round4

__all__ = [
    "EmaFilter",
    "OscillatorBuilder",
    "OscillatorSample",
    "round4",
    "to_decimal",
]
