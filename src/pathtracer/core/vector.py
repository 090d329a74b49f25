# core/vector.py
import math

EPSILON = 1e-12


class Vector3:
    """
    A simple 3D vector class supporting arithmetic, dot and cross products,
    and normalization. Colors use the same type with x, y, z read as
    red, green, blue.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    __hash__ = None

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector3":
        """
        Returns the unit vector pointing along self, or the zero vector when
        self is too short to have a direction.
        """
        l = self.length()
        if l < EPSILON:
            return Vector3(0, 0, 0)
        return self / l

    def sqrt(self) -> "Vector3":
        return Vector3(math.sqrt(self.x), math.sqrt(self.y), math.sqrt(self.z))

    def is_close(self, other: "Vector3", tol: float = 1e-9) -> bool:
        return (math.isclose(self.x, other.x, rel_tol=tol, abs_tol=tol) and
                math.isclose(self.y, other.y, rel_tol=tol, abs_tol=tol) and
                math.isclose(self.z, other.z, rel_tol=tol, abs_tol=tol))

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


def black() -> Vector3:
    return Vector3(0.0, 0.0, 0.0)


def white() -> Vector3:
    return Vector3(1.0, 1.0, 1.0)
