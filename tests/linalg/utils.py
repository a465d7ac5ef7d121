from pymat3.linalg import Matrix3, Vector3


def matrix_equals(a: Matrix3, b: Matrix3, tolerance: float = 0.0001):
    return all(
        abs(x - y) < tolerance
        for row_a, row_b in zip(a.values, b.values)
        for x, y in zip(row_a, row_b)
    )


def vector_equals(a: Vector3, b: Vector3, tolerance: float = 0.0001):
    return all(abs(x - y) < tolerance for x, y in zip(a, b))
