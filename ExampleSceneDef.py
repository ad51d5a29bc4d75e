import config
from canvas import Canvas
from geometry import Sphere
from ray import Scene, Light, Viewport, render_image
from utils import color

class ExampleSceneDef(object):
    def __init__(self, scene, viewport=None, background=None):
        self.scene = scene
        self.viewport = viewport if viewport is not None else Viewport()
        self.background = background if background is not None else config.BACKGROUND_COLOR

    def render(self, output_path=None, output_shape=None, workers=1, verbose=False):
        if(output_shape is None):
            output_shape=[128,128]
        canvas = Canvas(output_shape[1], output_shape[0])
        render_image(canvas, self.scene, viewport=self.viewport, background=self.background,
                     workers=workers, verbose=verbose)
        if(output_path is not None):
            canvas.writeToFile(output_path)
        return canvas


def DefaultExample():
    # three small spheres resting on a huge yellow one that acts as the floor
    scene = Scene([
        Sphere([0, -1, 3], 1, color(255, 0, 0), shininess=500),
        Sphere([2, 0, 4], 1, color(0, 0, 255), shininess=500),
        Sphere([-2, 0, 4], 1, color(0, 255, 0), shininess=10),
        Sphere([0, -5001, 0], 5000, color(255, 255, 0), shininess=1000),
    ], [
        Light.ambient(0.2),
        Light.point([2, 1, 0], 0.6),
        Light.directional([1, 4, 4], 0.2),
    ])
    return ExampleSceneDef(scene=scene)


def ThreeSpheresExample():
    scene = Scene([
        Sphere([-2, 0, 5], 1, color(200, 160, 80), shininess=90),
        Sphere([2, 0, 5], 1, color(60, 60, 200)),
        Sphere([0, 0, 7], 2, color(120, 120, 120), shininess=20),
    ], [
        Light.ambient(0.1),
        Light.point([12, 10, -5], 0.7),
        Light.directional([-1, 1, -1], 0.2),
    ])
    return ExampleSceneDef(scene=scene)


def AmbientOnlyExample(sphere_radius=1):
    gray = color(128, 128, 128)

    # One sphere straight ahead, lit only by ambient light
    scene = Scene([
        Sphere([0, 0, 5], sphere_radius, gray),
    ], [
        Light.ambient(0.5),
    ])
    return ExampleSceneDef(scene=scene)


EXAMPLES = {
    'default': DefaultExample,
    'three_spheres': ThreeSpheresExample,
    'ambient': AmbientOnlyExample,
}
