import unittest
import numpy as np
from ray import *
from geometry import Sphere, intersect_ray_sphere
from canvas import Canvas
from utils import normalize, vec, color, scale_color


def gray_sphere_scene(lights, col=(200, 100, 50), shininess=None):
    # one sphere straight ahead of the camera, front surface at t = 4
    return Scene([Sphere(vec([0, 0, 5]), 1, color(*col), shininess)], lights)


class TestSphereIntersect(unittest.TestCase):

    def test_unitsphere_hits(self):
        unit_sphere = Sphere(vec([0, 0, 0]), 1, color(0, 0, 0))
        # dead center hit
        t1, t2 = intersect_ray_sphere(vec([2.0, 0.0, 0.0]), vec([-1.0, 0.0, 0.0]), unit_sphere)
        self.assertAlmostEqual(t1, 3.0)
        self.assertAlmostEqual(t2, 1.0)
        # dead center with non-unit direction
        t1, t2 = intersect_ray_sphere(vec([3.0, 0.0, 0.0]), vec([-2.0, 0.0, 0.0]), unit_sphere)
        self.assertAlmostEqual(t1, 2.0)
        self.assertAlmostEqual(t2, 1.0)
        # off center hit
        t1, t2 = intersect_ray_sphere(vec([1.0, 0.5, 0.0]), vec([-1.0, 0.0, 0.0]), unit_sphere)
        self.assertAlmostEqual(t2, 1 - np.sin(np.pi/3))
        self.assertAlmostEqual(t1, 1 + np.sin(np.pi/3))

    def test_roots_order(self):
        sphere = Sphere(vec([0, 0, 5]), 1, color(0, 0, 0))
        t1, t2 = intersect_ray_sphere(vec([0, 0, 0]), vec([0, 0, 1]), sphere)
        self.assertAlmostEqual(t1, 6.0)
        self.assertAlmostEqual(t2, 4.0)
        for direction in ([0.1, 0, 1], [0, -0.15, 1], [0.05, 0.05, 2]):
            t1, t2 = intersect_ray_sphere(vec([0, 0, 0]), vec(direction), sphere)
            self.assertLess(t1, np.inf)
            self.assertGreaterEqual(t1, t2)

    def test_origin_inside(self):
        sphere = Sphere(vec([0, 0, 0]), 2, color(0, 0, 0))
        t1, t2 = intersect_ray_sphere(vec([0, 0, 0]), vec([0, 1, 0]), sphere)
        self.assertAlmostEqual(t1, 2.0)
        self.assertAlmostEqual(t2, -2.0)

    def test_unitsphere_misses(self):
        unit_sphere = Sphere(vec([0, 0, 0]), 1, color(0, 0, 0))
        # on axis miss
        self.assertEqual(
            intersect_ray_sphere(vec([2.0, 3.0, 0.0]), vec([-1.0, 0.0, 0.0]), unit_sphere),
            (np.inf, np.inf))

    def test_degenerate_direction(self):
        unit_sphere = Sphere(vec([0, 0, 3]), 1, color(0, 0, 0))
        self.assertEqual(
            intersect_ray_sphere(vec([0.0, 0.0, 0.0]), vec([0.0, 0.0, 0.0]), unit_sphere),
            (np.inf, np.inf))

    def test_method_matches_function(self):
        sphere = Sphere(vec([-1, -5, -7]), 3, color(0, 0, 0))
        origin, direction = vec([5.0, -5.0, -7.0]), vec([-3.0, 0.0, 0.0])
        self.assertEqual(sphere.intersect(origin, direction),
                         intersect_ray_sphere(origin, direction, sphere))
        self.assertAlmostEqual(sphere.intersect(origin, direction)[1], 1.0)


class TestProjection(unittest.TestCase):

    def test_default_viewport(self):
        canvas = Canvas(100, 100)
        vp = Viewport()
        np.testing.assert_almost_equal(canvas_to_viewport(0, 0, canvas, vp), vec([0, 0, 1]))
        np.testing.assert_almost_equal(canvas_to_viewport(25, 10, canvas, vp), vec([0.25, 0.1, 1]))
        np.testing.assert_almost_equal(canvas_to_viewport(-50, -50, canvas, vp), vec([-0.5, -0.5, 1]))

    def test_scaled_viewport(self):
        canvas = Canvas(200, 100)
        vp = Viewport(width=2, height=1, distance=3.0)
        np.testing.assert_almost_equal(canvas_to_viewport(50, -20, canvas, vp), vec([0.5, -0.2, 3]))


class TestLighting(unittest.TestCase):

    p = vec([0, 0, 0])
    n = vec([0, 1, 0])

    def lighting(self, lights, view=vec([1, 1, 0]), shininess=None):
        return compute_lighting(Scene([], lights), self.p, self.n, view, shininess)

    def test_ambient(self):
        self.assertAlmostEqual(self.lighting([Light.ambient(0.3)]), 0.3)
        self.assertAlmostEqual(self.lighting([Light.ambient(0.3)], shininess=50), 0.3)
        self.assertAlmostEqual(self.lighting([]), 0.0)

    def test_diffuse(self):
        # light directly overhead
        self.assertAlmostEqual(self.lighting([Light.point(vec([0, 5, 0]), 0.6)]), 0.6)
        # light at 60 degrees
        light_pos = self.p + 3 * normalize(vec([0, 1, np.sqrt(3)]))
        self.assertAlmostEqual(self.lighting([Light.point(light_pos, 0.6)]), 0.3)
        # light below the surface
        self.assertAlmostEqual(self.lighting([Light.point(vec([0, -5, 0]), 0.6)]), 0.0)

    def test_directional(self):
        # the direction is normalized before use
        self.assertAlmostEqual(self.lighting([Light.directional(vec([0, 10, 0]), 0.5)]), 0.5)
        self.assertAlmostEqual(self.lighting([Light.directional(vec([0, 1, 1]), 1.0)]), 1 / np.sqrt(2))

    def test_specular(self):
        # mirror direction points straight at the eye
        self.assertAlmostEqual(
            self.lighting([Light.point(vec([0, 5, 0]), 0.6)], view=vec([0, 3, 0]), shininess=10), 1.2)
        # 45 degree light, eye straight up: cos = 1/sqrt(2), squared
        self.assertAlmostEqual(
            self.lighting([Light.directional(vec([0, 1, 1]), 1.0)], view=vec([0, 3, 0]), shininess=2),
            1 / np.sqrt(2) + 0.5)
        # reflection points away from the eye: diffuse only
        self.assertAlmostEqual(
            self.lighting([Light.point(vec([0, 5, 0]), 0.6)], view=vec([0, -1, 0]), shininess=10), 0.6)

    def test_sum_over_lights(self):
        lights = [Light.ambient(0.2), Light.point(vec([2, 1, 0]), 0.6), Light.directional(vec([1, 4, 4]), 0.2)]
        forward = self.lighting(lights, shininess=500)
        backward = self.lighting(lights[::-1], shininess=500)
        self.assertAlmostEqual(forward, backward)
        self.assertGreater(forward, 0.2)

    def test_invalid_kind(self):
        with self.assertRaises(ValueError):
            self.lighting([Light("spot", 1.0, vec([0, 1, 0]))])


class TestColor(unittest.TestCase):

    def test_scale(self):
        np.testing.assert_array_equal(scale_color(color(200, 0, 0), 2.0), color(255, 0, 0))
        np.testing.assert_array_equal(scale_color(color(10, 10, 10), 0.0), color(0, 0, 0))
        np.testing.assert_array_equal(scale_color(color(100, 51, 3), 0.5), color(50, 25, 1))
        self.assertEqual(scale_color(color(1, 2, 3), 1.0).dtype, np.uint8)


class TestTraceRay(unittest.TestCase):

    origin = vec([0, 0, 0])

    def test_miss_returns_background(self):
        scene = gray_sphere_scene([Light.ambient(1.0)])
        np.testing.assert_array_equal(
            trace_ray(scene, self.origin, vec([0, 1, 0]), 1.0, np.inf), color(255, 255, 255))
        np.testing.assert_array_equal(
            trace_ray(scene, self.origin, vec([0, 1, 0]), 1.0, np.inf, background=(10, 20, 30)),
            color(10, 20, 30))
        np.testing.assert_array_equal(
            trace_ray(Scene([], []), self.origin, vec([0, 0, 1]), 1.0, np.inf), color(255, 255, 255))

    def test_center_hit(self):
        scene = gray_sphere_scene([Light.ambient(1.0)])
        hit = closest_intersection(scene, self.origin, vec([0, 0, 1]), 1.0, np.inf)
        self.assertAlmostEqual(hit.t, 4.0)
        np.testing.assert_array_equal(
            trace_ray(scene, self.origin, vec([0, 0, 1]), 1.0, np.inf), color(200, 100, 50))

    def test_ambient_scaling(self):
        scene = gray_sphere_scene([Light.ambient(0.5)])
        np.testing.assert_array_equal(
            trace_ray(scene, self.origin, vec([0, 0, 1]), 1.0, np.inf), color(100, 50, 25))
        scene = gray_sphere_scene([Light.ambient(2.0)], col=(200, 0, 0))
        np.testing.assert_array_equal(
            trace_ray(scene, self.origin, vec([0, 0, 1]), 1.0, np.inf), color(255, 0, 0))

    def test_point_light_at_camera(self):
        # the normal at the hit faces the light head on
        scene = gray_sphere_scene([Light.point(vec([0, 0, 0]), 0.5)])
        np.testing.assert_array_equal(
            trace_ray(scene, self.origin, vec([0, 0, 1]), 1.0, np.inf), color(100, 50, 25))

    def test_t_range(self):
        scene = gray_sphere_scene([Light.ambient(1.0)])
        np.testing.assert_array_equal(
            trace_ray(scene, self.origin, vec([0, 0, 1]), 1.0, 3.0), color(255, 255, 255))
        # the near side is excluded, so the far side at t = 6 is seen
        hit = closest_intersection(scene, self.origin, vec([0, 0, 1]), 5.0, np.inf)
        self.assertAlmostEqual(hit.t, 6.0)

    def test_nearest_wins(self):
        near = Sphere(vec([0, 0, 5]), 1, color(255, 0, 0))
        far = Sphere(vec([0, 0, 10]), 1, color(0, 0, 255))
        lights = [Light.ambient(1.0)]
        for objects in ([near, far], [far, near]):
            np.testing.assert_array_equal(
                trace_ray(Scene(objects, lights), self.origin, vec([0, 0, 1]), 1.0, np.inf),
                color(255, 0, 0))

    def test_tie_keeps_first(self):
        first = Sphere(vec([0, 0, 5]), 1, color(255, 0, 0))
        second = Sphere(vec([0, 0, 5]), 1, color(0, 255, 0))
        scene = Scene([first, second], [Light.ambient(1.0)])
        hit = closest_intersection(scene, self.origin, vec([0, 0, 1]), 1.0, np.inf)
        self.assertIs(hit.sphere, first)

    def test_degenerate_ray(self):
        scene = gray_sphere_scene([Light.ambient(1.0)])
        np.testing.assert_array_equal(
            trace_ray(scene, self.origin, vec([0, 0, 0]), 1.0, np.inf), color(255, 255, 255))


class TestRenderImage(unittest.TestCase):

    def test_ambient_only_image(self):
        canvas = Canvas(16, 16)
        render_image(canvas, gray_sphere_scene([Light.ambient(0.5)]))
        shaded = color(100, 50, 25)
        white = color(255, 255, 255)
        np.testing.assert_array_equal(canvas.get_pixel(0, 0), shaded)
        np.testing.assert_array_equal(canvas.get_pixel(-8, -8), white)
        np.testing.assert_array_equal(canvas.get_pixel(7, 7), white)
        flat = canvas.pixels.reshape(-1, 3)
        is_shaded = np.all(flat == shaded, axis=1)
        is_white = np.all(flat == white, axis=1)
        self.assertTrue(np.all(is_shaded | is_white))
        self.assertTrue(np.any(is_shaded))

    def test_object_order_does_not_matter(self):
        near = Sphere(vec([0, 0, 5]), 1, color(255, 0, 0), shininess=50)
        far = Sphere(vec([0.5, 0, 8]), 2, color(0, 0, 255), shininess=10)
        lights = [Light.ambient(0.2), Light.point(vec([2, 1, 0]), 0.6)]
        a = render_image(Canvas(12, 12), Scene([near, far], lights))
        b = render_image(Canvas(12, 12), Scene([far, near], lights))
        np.testing.assert_array_equal(a.pixels, b.pixels)

    def test_parallel_matches_sequential(self):
        scene = Scene([
            Sphere(vec([0, -1, 3]), 1, color(255, 0, 0), shininess=500),
            Sphere(vec([2, 0, 4]), 1, color(0, 0, 255)),
        ], [Light.ambient(0.2), Light.directional(vec([1, 4, 4]), 0.2)])
        sequential = render_image(Canvas(10, 8), scene)
        parallel = render_image(Canvas(10, 8), scene, workers=2)
        np.testing.assert_array_equal(sequential.pixels, parallel.pixels)


if __name__ == '__main__':
    unittest.main()
