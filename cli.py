import click

import config
from ExampleSceneDef import EXAMPLES
from utils import parse_triple


def render(example, output_path=config.OUTPUT_PATH, width=config.CANVAS_WIDTH, height=config.CANVAS_HEIGHT,
           background=None, workers=config.WORKERS, show=False, verbose=False):
    """Render an ExampleSceneDef and save it to output_path.

    Errors while writing the image are not caught.
    """
    if background is not None:
        example.background = background
    canvas = example.render(output_shape=[height, width], workers=workers, verbose=verbose)
    canvas.writeToFile(output_path)
    print(f"Saved: {output_path}")
    if show:
        canvas.show(title=output_path)
    return canvas


def parse_color(ctx, param, value):
    if value is None:
        return None
    try:
        rgb = parse_triple(value, convert=int)
    except ValueError as e:
        raise click.BadParameter(str(e))
    if not all(0 <= c <= 255 for c in rgb):
        raise click.BadParameter("color channels must be in [0, 255], got {}".format(value))
    return rgb


@click.command()
@click.option("--scene", type=click.Choice(sorted(EXAMPLES)), default="default", show_default=True)
@click.option("--size", type=click.INT, default=config.CANVAS_WIDTH, show_default=True)
@click.option("--width", type=click.INT, default=None, help="overrides --size")
@click.option("--height", type=click.INT, default=None, help="overrides --size")
@click.option("--output-path", type=click.Path(dir_okay=False), default=config.OUTPUT_PATH, show_default=True)
@click.option("--background", type=click.STRING, callback=parse_color, default=None, help="R,G,B")
@click.option("--workers", type=click.IntRange(min=1), default=config.WORKERS, show_default=True)
@click.option("--show/--no-show", default=False)
@click.option("--verbose/--quiet", default=False)
def main(scene, size, width, height, output_path, background, workers, show, verbose):
    width = size if width is None else width
    height = size if height is None else height
    if width <= 0 or height <= 0:
        raise click.BadParameter("canvas size must be positive, got {}x{}".format(width, height))

    render(EXAMPLES[scene](), output_path=output_path, width=width, height=height,
           background=background, workers=workers, show=show, verbose=verbose)


if __name__ == "__main__":
    main()
