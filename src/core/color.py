# core/color.py

class Color:
    """
    An RGB color with float channels, nominally in [0, 1].

    Colors are tints: they scale radiance channel by channel and are never
    gamma encoded here.
    """
    __slots__ = ("r", "g", "b")

    def __init__(self, r: float, g: float, b: float):
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)

    @classmethod
    def uniform(cls, a: float) -> "Color":
        return cls(a, a, a)

    @classmethod
    def red(cls) -> "Color":
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def green(cls) -> "Color":
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def blue(cls) -> "Color":
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def white(cls) -> "Color":
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def black(cls) -> "Color":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def yellow(cls) -> "Color":
        return cls(1.0, 1.0, 0.0)

    @classmethod
    def magenta(cls) -> "Color":
        return cls(1.0, 0.0, 1.0)

    @classmethod
    def cyan(cls) -> "Color":
        return cls(0.0, 1.0, 1.0)

    def __add__(self, other: "Color") -> "Color":
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: "Color") -> "Color":
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __neg__(self) -> "Color":
        return Color(-self.r, -self.g, -self.b)

    def __mul__(self, t: float) -> "Color":
        return Color(self.r * t, self.g * t, self.b * t)

    def __rmul__(self, t: float) -> "Color":
        return self.__mul__(t)

    def __truediv__(self, t: float) -> "Color":
        return Color(self.r / t, self.g / t, self.b / t)

    def is_black(self) -> bool:
        return self.r == 0 and self.g == 0 and self.b == 0

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"
