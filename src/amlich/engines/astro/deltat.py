"""
amlich.engines.astro.deltat
---------------------------
ΔT (TT - UT) corrections applied to the new-moon series.

Unlike a seconds-per-decimal-year model, the lunation series works in
Julian centuries T counted from the 1900 epoch lunation (T = k / 1236.85),
and ΔT is subtracted directly from a Julian Ephemeris Day. The models here
therefore take T and return days.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Protocol, Tuple


class DeltaTModel(Protocol):
    """ΔT = TT - UT, in days, as a function of T (centuries since 1900)."""
    def delta_t_days(self, T: float) -> float: ...
    def info(self) -> Dict[str, object]: ...


@dataclass(frozen=True)
class ConstantDeltaT(DeltaTModel):
    """Fixed ΔT in days. Pass via `CalendarParams.tweak(delta_t=...)`; `ConstantDeltaT(0.0)` disables the correction."""
    value: float

    def delta_t_days(self, T: float) -> float:
        return float(self.value)

    def info(self) -> Dict[str, object]:
        return {"type": "constant", "value": self.value}


@dataclass(frozen=True)
class PolyDeltaT(DeltaTModel):
    """ΔT(T) = Σ_{k=0}^{n} c[k] * T^k."""
    coeff: Tuple[float, ...]   # c0, c1, ..., cn

    def delta_t_days(self, T: float) -> float:
        # Horner
        acc = 0.0
        for c in reversed(self.coeff):
            acc = acc * T + c
        return acc

    def info(self) -> Dict[str, object]:
        return {"type": "poly", "coeff": self.coeff}


@dataclass(frozen=True)
class PiecewisePolyDeltaT(DeltaTModel):
    """
    segments: (T_min, PolyDeltaT), sorted by T_min.
    The last segment whose T_min <= T is used; T below the first bound uses the first.
    """
    segments: Tuple[Tuple[float, PolyDeltaT], ...]

    def delta_t_days(self, T: float) -> float:
        model = self.segments[0][1]
        for t0, m in self.segments:
            if T >= t0:
                model = m
        return model.delta_t_days(T)

    def info(self) -> Dict[str, object]:
        return {"type": "piecewise_poly", "segments": [(t0, m.info()) for t0, m in self.segments]}


# Two-branch polynomial from "Astronomical Formulae for Calculators":
# one fit before about 800 AD (T < -11), one for later epochs.
MEEUS_AFC_DELTA_T = PiecewisePolyDeltaT(
    segments=(
        (float("-inf"), PolyDeltaT((0.001, 0.000839, 0.0002261, -0.00000845, -0.000000081))),
        (-11.0, PolyDeltaT((-0.000278, 0.000265, 0.000262))),
    )
)
