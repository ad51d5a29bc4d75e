from ExampleSceneDef import AmbientOnlyExample
from cli import render


# One sphere at z=5 under ambient light only: a flat gray disc on white
render(AmbientOnlyExample(sphere_radius=1), output_path="ambient.png", width=256, height=256)
