import os

import numpy as np
from PIL import Image as PIM


class Canvas(object):
    """Canvas

    A width x height grid of RGB pixels addressed in centered coordinates:
    (0, 0) is the middle of the image, x grows to the right and y grows up.
    Valid coordinates are x in [-width/2, width/2) and y in [-height/2, height/2).
    """

    def __init__(self, width, height, pixels=None):
        if width <= 0 or height <= 0:
            raise ValueError("canvas size must be positive, got {}x{}".format(width, height))
        if pixels is None:
            pixels = np.zeros((height, width, 3), dtype=np.uint8)
        assert pixels.shape == (height, width, 3), "pixel buffer has shape {}".format(pixels.shape)
        self._width = width
        self._height = height
        self.pixels = pixels

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def x_range(self):
        return range(-(self.width // 2), self.width - self.width // 2)

    @property
    def y_range(self):
        # odd heights put the extra row below the center
        return range(-(self.height - self.height // 2), self.height // 2)

    def to_buffer_coords(self, x, y):
        """Translate a centered coordinate to (column, row) in the pixel buffer."""
        bx = self.width // 2 + x
        by = self.height // 2 - (y + 1)
        if not (0 <= bx < self.width and 0 <= by < self.height):
            raise IndexError("pixel ({}, {}) is outside a {}x{} canvas".format(x, y, self.width, self.height))
        return bx, by

    def put_pixel(self, x, y, color):
        """Update the pixel at centered position (x, y)."""
        bx, by = self.to_buffer_coords(x, y)
        self.pixels[by, bx] = color

    def get_pixel(self, x, y):
        bx, by = self.to_buffer_coords(x, y)
        return self.pixels[by, bx]

    def put_row(self, y, row):
        """Write a full row of colors, ordered by increasing x, at centered height y."""
        _, by = self.to_buffer_coords(self.x_range[0], y)
        self.pixels[by, :] = row

    def clear(self):
        self.pixels[:] = 0

    def PIL(self):
        return PIM.fromarray(np.uint8(self.pixels), mode='RGB')

    def writeToFile(self, output_path, **kwargs):
        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self.PIL().save(output_path, **kwargs)

    def show(self, title=None):
        import matplotlib.pyplot as plt

        plt.figure(num=title)
        plt.imshow(self.pixels)
        plt.axis('off')
        if title:
            plt.title(title)
        plt.show()
