"""2-D affine transforms mapping plot coordinates to device coordinates.

The matrix convention matches the usual graphics one::

    x' = a * x + c * y + tx
    y' = b * x + d * y + ty
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .utils.geometry import Point2D, Rect, Size2D, Vector2D


@dataclass(frozen=True)
class AffineTransform:
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls()

    def concatenated(self, other: "AffineTransform") -> "AffineTransform":
        """Return ``self`` followed by ``other``."""
        return AffineTransform(
            a=self.a * other.a + self.b * other.c,
            b=self.a * other.b + self.b * other.d,
            c=self.c * other.a + self.d * other.c,
            d=self.c * other.b + self.d * other.d,
            tx=self.tx * other.a + self.ty * other.c + other.tx,
            ty=self.tx * other.b + self.ty * other.d + other.ty,
        )

    def scaled_by(self, sx: float, sy: float) -> "AffineTransform":
        """Prepend a scale, so it acts on input coordinates before ``self``."""
        return AffineTransform(a=sx, d=sy).concatenated(self)

    def translated_by(self, tx: float, ty: float) -> "AffineTransform":
        """Prepend a translation expressed in the input space of ``self``."""
        return AffineTransform(tx=tx, ty=ty).concatenated(self)

    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    def inverted(self) -> "AffineTransform":
        """Closed-form inverse; raises ``ValueError`` for a singular matrix."""
        det = self.determinant()
        if det == 0.0:
            raise ValueError("affine transform is not invertible")
        a = self.d / det
        b = -self.b / det
        c = -self.c / det
        d = self.a / det
        return AffineTransform(
            a=a,
            b=b,
            c=c,
            d=d,
            tx=-(self.tx * a + self.ty * c),
            ty=-(self.tx * b + self.ty * d),
        )

    def apply_to_point(self, p: Point2D) -> Point2D:
        return Point2D(
            self.a * p.x + self.c * p.y + self.tx,
            self.b * p.x + self.d * p.y + self.ty,
        )

    def apply_to_vector(self, v: Vector2D) -> Vector2D:
        """Map a displacement; translation does not apply."""
        return Vector2D(self.a * v.dx + self.c * v.dy, self.b * v.dx + self.d * v.dy)

    def apply_to_array(self, points: np.ndarray) -> np.ndarray:
        """Map an ``(N, 2)`` array of points, returning a new float64 array."""
        pts = np.asarray(points, dtype=np.float64)
        if pts.size == 0:
            return np.empty((0, 2), dtype=np.float64)
        if pts.ndim != 2 or pts.shape[1] != 2:
            raise ValueError("Expected an (N, 2) array of points.")
        matrix = np.array([[self.a, self.b], [self.c, self.d]], dtype=np.float64)
        return pts @ matrix + np.array([self.tx, self.ty], dtype=np.float64)


def plot_transform(window: Rect, viewport: Size2D) -> AffineTransform:
    """Build the transform that maps ``window`` onto a viewport of ``viewport`` pixels.

    Device Y grows downward while plot Y grows upward, so the Y scale is
    negative and the top edge of the window (``min_y + height``) lands on
    device row zero.
    """
    x_scale = viewport.width / window.width
    y_scale = -viewport.height / window.height
    return (
        AffineTransform.identity()
        .scaled_by(x_scale, y_scale)
        .translated_by(-window.min_x, -(window.height + window.min_y))
    )


__all__ = ["AffineTransform", "plot_transform"]
