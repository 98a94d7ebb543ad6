"""Cartesian Plane Plotter

Plot points and vectors on a 2D Cartesian plane with grid and axes.

- main: desktop window (CartesianPlaneWindow)
- headless: command-line PNG renderer
"""
