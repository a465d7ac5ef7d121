__all__ = ["Vector3"]


class Vector3:
    """A 3-component vector.

    Used for homogeneous 2D coordinates, where ``z`` is the "w" component:
    1 for points and 0 for free vectors. Components can be read by name
    or by index.
    """

    def __init__(self, x: float = 0, y: float = 0, z: float = 0) -> None:
        self.x = x
        self.y = y
        self.z = z

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0, 0, 0)

    @classmethod
    def one(cls) -> "Vector3":
        return cls(1, 1, 1)

    @classmethod
    def unit_x(cls) -> "Vector3":
        return cls(1, 0, 0)

    @classmethod
    def unit_y(cls) -> "Vector3":
        return cls(0, 1, 0)

    @classmethod
    def unit_z(cls) -> "Vector3":
        return cls(0, 0, 1)

    def set(self, x: float, y: float, z: float) -> "Vector3":
        self.x = x
        self.y = y
        self.z = z
        return self

    def clone(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: int) -> float:
        if index == 0 or index == -3:
            return self.x
        elif index == 1 or index == -2:
            return self.y
        elif index == 2 or index == -1:
            return self.z
        raise IndexError(f"Vector3 index out of range: {index}")

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def equals(self, v: "Vector3") -> bool:
        return v.x == self.x and v.y == self.y and v.z == self.z

    def __eq__(self, other: "Vector3") -> bool:
        return isinstance(other, Vector3) and self.equals(other)

    def from_array(self, array: list, offset: int = 0) -> "Vector3":
        self.x = array[offset]
        self.y = array[offset + 1]
        self.z = array[offset + 2]
        return self

    def to_array(self, array: list = None, offset: int = 0) -> list:
        if array is None:
            array = []

        padding = offset + 3 - len(array)
        if padding > 0:
            array.extend((None for _ in range(padding)))

        array[offset] = self.x
        array[offset + 1] = self.y
        array[offset + 2] = self.z
        return array
