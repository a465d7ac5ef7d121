__all__ = ["Vector2"]


class Vector2:
    def __init__(self, x: float = 0, y: float = 0) -> None:
        self.x = x
        self.y = y

    def __repr__(self) -> str:
        return f"Vector2({self.x}, {self.y})"

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0, 0)

    @classmethod
    def one(cls) -> "Vector2":
        return cls(1, 1)

    @classmethod
    def unit_x(cls) -> "Vector2":
        return cls(1, 0)

    @classmethod
    def unit_y(cls) -> "Vector2":
        return cls(0, 1)

    def set(self, x: float, y: float) -> "Vector2":
        self.x = x
        self.y = y
        return self

    def clone(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def equals(self, v: "Vector2") -> bool:
        return v.x == self.x and v.y == self.y

    def __eq__(self, other: "Vector2") -> bool:
        return isinstance(other, Vector2) and self.equals(other)

    def from_array(self, array: list, offset: int = 0) -> "Vector2":
        self.x = array[offset]
        self.y = array[offset + 1]
        return self

    def to_array(self, array: list = None, offset: int = 0) -> list:
        if array is None:
            array = []

        padding = offset + 2 - len(array)
        if padding > 0:
            array.extend((None for _ in range(padding)))

        array[offset] = self.x
        array[offset + 1] = self.y
        return array
