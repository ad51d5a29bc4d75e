import numpy as np
from utils import vec, dot

# Below this squared direction length a ray is treated as degenerate
DEGENERATE_EPS = 1e-12


class Hit:
    def __init__(self, t, sphere=None):
        """Create a Hit with the given data.

        Parameters:
          t : float -- the t value of the intersection along the ray
          sphere : Sphere -- the sphere that was hit (None for no hit)
        """
        self.t = t
        self.sphere = sphere

# Value to represent absence of an intersection
no_hit = Hit(np.inf)


class Sphere:

    def __init__(self, center, radius, color, shininess=None):
        """Create a sphere with the given center and radius.

        Parameters:
          center : (3,) -- a 3D point specifying the sphere's center
          radius : int -- a positive integer specifying the sphere's radius
          color : (3,) uint8 -- the base color of the surface
          shininess : int or None -- specular exponent; None means the
            surface has no specular highlight
        """
        self.center = vec(center)
        self.radius = radius
        self.color = np.array(color, dtype=np.uint8)
        self.shininess = shininess

    def intersect(self, origin, direction):
        """Return both t values where the ray meets this sphere."""
        return intersect_ray_sphere(origin, direction, self)


def intersect_ray_sphere(origin, direction, sphere):
    """Solve for the parametric distances where a ray meets a sphere.

    Parameters:
      origin : (3,) -- the start point of the ray
      direction : (3,) -- the direction of the ray (not necessarily normalized)
      sphere : Sphere -- the sphere to intersect with
    Return:
      (t1, t2) -- the roots for +sqrt and -sqrt of the discriminant, in that
      order and not sorted. Both are np.inf when the ray misses, or when the
      direction has zero length.
    """
    r = sphere.radius
    co = origin - sphere.center

    a = dot(direction, direction)
    if a < DEGENERATE_EPS:
        return np.inf, np.inf
    b = 2.0 * dot(co, direction)
    c = dot(co, co) - float(r * r)

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0:
        return np.inf, np.inf

    disc_sqrt = np.sqrt(discriminant)
    t1 = (-b + disc_sqrt) / (2.0 * a)
    t2 = (-b - disc_sqrt) / (2.0 * a)
    return t1, t2
