from ExampleSceneDef import DefaultExample
from cli import render


# red, blue and green spheres on a yellow floor, 1024x1024 into output.png
render(DefaultExample())
