import enum
from functools import partial
from multiprocessing import Pool

import numpy as np

import config
from geometry import no_hit, Hit
from utils import vec, dot, normalize, color, scale_color

"""
Core implementation of the ray tracer.  This module contains the lights and the
Scene that hold what is drawn, the projection from canvas pixels to rays, the
closest-hit search and the lighting model used to shade it, and the main entry
point `render_image`.

In the documentation we use the convention that just writing a tuple means that
the expected type is a NumPy array of that shape.  Scene data is not validated;
a bad radius or a NaN position just produces a wrong picture.
"""


class LightKind(enum.Enum):
    AMBIENT = "ambient"
    POINT = "point"
    DIRECTIONAL = "directional"


class Light:

    def __init__(self, kind, intensity, vector=None):
        """Create a light of the given kind.

        Parameters:
          kind : LightKind -- what sort of light this is
          intensity : float -- non-negative intensity of the light
          vector : (3,) -- the position of a POINT light, or the direction
            light travels towards for a DIRECTIONAL light; unused for AMBIENT
        """
        self.kind = kind
        self.intensity = intensity
        self.vector = None if vector is None else vec(vector)

    @classmethod
    def ambient(cls, intensity):
        return cls(LightKind.AMBIENT, intensity)

    @classmethod
    def point(cls, position, intensity):
        return cls(LightKind.POINT, intensity, position)

    @classmethod
    def directional(cls, direction, intensity):
        return cls(LightKind.DIRECTIONAL, intensity, direction)

    def __repr__(self):
        return f"Light({self.kind.name}, {self.intensity}, {self.vector})"


class Scene:

    def __init__(self, objects, lights):
        """Create a scene containing the given spheres and lights.

        Both sequences are copied into tuples; their order is the iteration
        order used while rendering.
        """
        self.objects = tuple(objects)
        self.lights = tuple(lights)


class Viewport:

    def __init__(self, width=config.VIEWPORT_WIDTH, height=config.VIEWPORT_HEIGHT,
                 distance=config.VIEWPORT_DISTANCE):
        """Create a viewport: a width x height plane at `distance` from the camera."""
        self.width = width
        self.height = height
        self.distance = distance


def viewport_direction(x, y, canvas_width, canvas_height, viewport):
    return vec([
        x * viewport.width / canvas_width,
        y * viewport.height / canvas_height,
        viewport.distance,
    ])

def canvas_to_viewport(x, y, canvas, viewport):
    """Compute the (unnormalized) direction of the ray through centered pixel (x, y)."""
    return viewport_direction(x, y, canvas.width, canvas.height, viewport)


def closest_intersection(scene, origin, direction, t_min, t_max):
    """Find the nearest sphere hit with t_min < t < t_max.

    Ties keep the sphere that comes first in the scene.
    """
    closest = no_hit
    for sphere in scene.objects:
        for t in sphere.intersect(origin, direction):
            if t_min < t < t_max and t < closest.t:
                closest = Hit(t, sphere)
    return closest


def trace_ray(scene, origin, direction, t_min, t_max, background=config.BACKGROUND_COLOR):
    """Compute the color seen along a ray.

    Parameters:
      scene : Scene -- the spheres and lights
      origin : (3,) -- the start point of the ray
      direction : (3,) -- the direction of the ray
      t_min, t_max : float -- the open range of valid t values
      background : (3,) -- the color returned when nothing is hit
    Return:
      (3,) uint8 -- the color of the closest hit
    """
    hit = closest_intersection(scene, origin, direction, t_min, t_max)
    if hit.sphere is None:
        return color(*background)

    sphere = hit.sphere
    point = origin + hit.t * direction
    normal = normalize(point - sphere.center)
    illumination = compute_lighting(scene, point, normal, -direction, sphere.shininess)
    return scale_color(sphere.color, illumination)


def compute_lighting(scene, point, normal, view, shininess):
    """Sum the ambient, diffuse and specular light reaching a surface point.

    Parameters:
      scene : Scene -- supplies the lights
      point : (3,) -- the surface point
      normal : (3,) -- the outward unit normal at the point
      view : (3,) -- vector from the point towards the eye (any length)
      shininess : int or None -- specular exponent, None for matte surfaces
    Return:
      float -- the illumination factor; not capped at 1.

    Nothing is tested for occlusion: every light reaches every point.
    """
    illumination = 0.0

    for light in scene.lights:
        if light.kind is LightKind.AMBIENT:
            illumination += light.intensity
            continue

        if light.kind is LightKind.POINT:
            point_to_light = normalize(light.vector - point)
        elif light.kind is LightKind.DIRECTIONAL:
            point_to_light = normalize(light.vector)
        else:
            raise ValueError("invalid light kind {}".format(light.kind))

        # diffuse
        n_dot_l = dot(normal, point_to_light)
        illumination += light.intensity * max(0.0, n_dot_l)

        # specular
        if shininess is not None:
            reflection = 2.0 * n_dot_l * normal - point_to_light
            r_dot_v = dot(reflection, normalize(view))
            illumination += light.intensity * max(0.0, r_dot_v) ** shininess

    return illumination


def render_row(y, scene, xs, canvas_size, viewport, background, t_min, t_max):
    """Trace every pixel of the row at centered height y.

    Returns an array of shape (len(xs), 3) ordered by increasing x.
    """
    origin = vec(config.CAMERA_ORIGIN)
    row = np.zeros((len(xs), 3), dtype=np.uint8)
    for i, x in enumerate(xs):
        direction = viewport_direction(x, y, canvas_size[0], canvas_size[1], viewport)
        row[i] = trace_ray(scene, origin, direction, t_min, t_max, background)
    return row


def render_image(canvas, scene, viewport=None, background=config.BACKGROUND_COLOR,
                 t_min=config.T_MIN, t_max=config.T_MAX, workers=config.WORKERS, verbose=False):
    """
    render a ray traced image into the canvas, in place.

    With workers > 1 the rows are split across a process pool; each worker
    only traces, and this process writes the returned rows, so no pixel is
    written twice.
    """
    if viewport is None:
        viewport = Viewport()

    xs = canvas.x_range
    ys = canvas.y_range
    ny = len(ys)

    if workers <= 1:
        origin = vec(config.CAMERA_ORIGIN)
        for i, y in enumerate(ys):
            if verbose:
                print(f"rendering row {i+1}/{ny}...")
            for x in xs:
                direction = canvas_to_viewport(x, y, canvas, viewport)
                canvas.put_pixel(x, y, trace_ray(scene, origin, direction, t_min, t_max, background))
        return canvas

    trace = partial(
        render_row,
        scene=scene,
        xs=xs,
        canvas_size=(canvas.width, canvas.height),
        viewport=viewport,
        background=background,
        t_min=t_min,
        t_max=t_max,
    )
    with Pool(workers) as pool:
        for i, (y, row) in enumerate(zip(ys, pool.imap(trace, ys))):
            if verbose:
                print(f"rendering row {i+1}/{ny}...")
            canvas.put_row(y, row)
    return canvas
