"""
Cubic-Bezier easing curves, matching CSS `cubic-bezier(x1, y1, x2, y2)`.
"""

NEWTON_ITERATIONS = 8
NEWTON_MIN_SLOPE = 0.001
BISECTION_PRECISION = 1e-7
BISECTION_MAX_ITERATIONS = 20


def _a(a1: float, a2: float) -> float:
    return 1.0 - 3.0 * a2 + 3.0 * a1


def _b(a1: float, a2: float) -> float:
    return 3.0 * a2 - 6.0 * a1


def _c(a1: float) -> float:
    return 3.0 * a1


def _bezier(t: float, a1: float, a2: float) -> float:
    return ((_a(a1, a2) * t + _b(a1, a2)) * t + _c(a1)) * t


def _slope(t: float, a1: float, a2: float) -> float:
    return 3.0 * _a(a1, a2) * t * t + 2.0 * _b(a1, a2) * t + _c(a1)


class CubicBezier:
    """
    Easing function through (0, 0), (x1, y1), (x2, y2), (1, 1).

    Calling the curve with a progress fraction in [0, 1] returns the eased
    fraction.
    """

    def __init__(self, x1: float, y1: float, x2: float, y2: float) -> None:
        if not (0 <= x1 <= 1 and 0 <= x2 <= 1):
            raise ValueError("cubic-bezier x values must be in [0, 1]")
        self.x1, self.y1, self.x2, self.y2 = x1, y1, x2, y2

    def __repr__(self) -> str:
        return f"CubicBezier({self.x1}, {self.y1}, {self.x2}, {self.y2})"

    @property
    def is_linear(self) -> bool:
        return self.x1 == self.y1 and self.x2 == self.y2

    def __call__(self, x: float) -> float:
        if self.is_linear:
            return x
        if x <= 0:
            return 0.0
        if x >= 1:
            return 1.0
        return _bezier(self._t_for_x(x), self.y1, self.y2)

    def _t_for_x(self, x: float) -> float:
        t = x
        for _ in range(NEWTON_ITERATIONS):
            slope = _slope(t, self.x1, self.x2)
            if abs(slope) < NEWTON_MIN_SLOPE:
                break
            current = _bezier(t, self.x1, self.x2) - x
            if abs(current) < BISECTION_PRECISION:
                return t
            t -= current / slope
        if 0.0 <= t <= 1.0 and abs(_bezier(t, self.x1, self.x2) - x) < BISECTION_PRECISION:
            return t

        # Newton did not converge (flat slope); bisect.
        low, high = 0.0, 1.0
        t = x
        for _ in range(BISECTION_MAX_ITERATIONS * 2):
            current = _bezier(t, self.x1, self.x2) - x
            if abs(current) < BISECTION_PRECISION:
                break
            if current > 0:
                high = t
            else:
                low = t
            t = (low + high) / 2.0
        return t
