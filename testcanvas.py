import os
import tempfile
import unittest

import numpy as np
from click.testing import CliRunner
from PIL import Image as PIM

from canvas import Canvas
from cli import main, parse_color
from ExampleSceneDef import EXAMPLES, DefaultExample
from utils import color, parse_triple


class TestCanvas(unittest.TestCase):

    def test_center_mapping(self):
        canvas = Canvas(1024, 768)
        self.assertEqual(canvas.to_buffer_coords(0, 0), (512, 383))
        self.assertEqual(canvas.to_buffer_coords(-512, -384), (0, 767))
        self.assertEqual(canvas.to_buffer_coords(511, 383), (1023, 0))

    def test_put_pixel(self):
        canvas = Canvas(4, 4)
        canvas.put_pixel(0, 0, color(1, 2, 3))
        np.testing.assert_array_equal(canvas.pixels[1, 2], color(1, 2, 3))
        np.testing.assert_array_equal(canvas.get_pixel(0, 0), color(1, 2, 3))
        canvas.put_pixel(-2, -2, color(9, 9, 9))
        np.testing.assert_array_equal(canvas.pixels[3, 0], color(9, 9, 9))
        self.assertEqual(int(canvas.pixels.sum()), 6 + 27)

    def test_out_of_range(self):
        canvas = Canvas(4, 4)
        for x, y in ((2, 0), (-3, 0), (0, 2), (0, -3)):
            with self.assertRaises(IndexError):
                canvas.put_pixel(x, y, color(0, 0, 0))

    def test_ranges_cover_buffer(self):
        for w, h in ((4, 4), (5, 3), (1, 1)):
            canvas = Canvas(w, h)
            for y in canvas.y_range:
                for x in canvas.x_range:
                    canvas.put_pixel(x, y, color(255, 255, 255))
            self.assertTrue(np.all(canvas.pixels == 255))

    def test_bad_size(self):
        with self.assertRaises(ValueError):
            Canvas(0, 10)

    def test_write_to_file(self):
        canvas = Canvas(6, 4)
        canvas.put_pixel(0, 0, color(10, 200, 30))
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'nested', 'out.png')
            canvas.writeToFile(path)
            with PIM.open(path) as im:
                self.assertEqual(im.size, (6, 4))
                np.testing.assert_array_equal(np.array(im.convert('RGB')), canvas.pixels)


class TestExamples(unittest.TestCase):

    def test_examples_render(self):
        for name, factory in EXAMPLES.items():
            canvas = factory().render(output_shape=[8, 8])
            self.assertEqual(canvas.pixels.shape, (8, 8, 3), name)
            self.assertTrue(np.any(canvas.pixels != 255), name)

    def test_background(self):
        example = DefaultExample()
        example.background = (0, 0, 0)
        canvas = example.render(output_shape=[8, 8])
        # the top corner looks at the sky
        np.testing.assert_array_equal(canvas.get_pixel(-4, 3), color(0, 0, 0))


class TestCli(unittest.TestCase):

    def test_parse_triple(self):
        self.assertEqual(parse_triple("1, 2,3", convert=int), (1, 2, 3))
        with self.assertRaises(ValueError):
            parse_triple("1,2")
        self.assertEqual(parse_color(None, None, "0,128,255"), (0, 128, 255))

    def test_render_command(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(main, ['--scene', 'ambient', '--size', '8', '--output-path', 'out/a.png',
                                          '--background', '0,0,0'])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertIn("Saved: out/a.png", result.output)
            with PIM.open('out/a.png') as im:
                self.assertEqual(im.size, (8, 8))
                self.assertEqual(im.getpixel((0, 0)), (0, 0, 0))

    def test_bad_background(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(main, ['--size', '4', '--background', '1,2'])
            self.assertEqual(result.exit_code, 2)
            result = runner.invoke(main, ['--size', '4', '--background', '1,2,300'])
            self.assertEqual(result.exit_code, 2)
            self.assertFalse(os.path.exists('output.png'))

    def test_unwritable_output(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            with open('blocker', 'w') as f:
                f.write('not a directory')
            result = runner.invoke(main, ['--scene', 'ambient', '--size', '4', '--output-path', 'blocker/out.png'])
            self.assertNotEqual(result.exit_code, 0)
            self.assertIsInstance(result.exception, OSError)


if __name__ == '__main__':
    unittest.main()
