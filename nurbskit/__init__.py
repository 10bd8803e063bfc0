"""Evaluation of Bezier, B-spline and NURBS curves and surfaces, and curve unclamping."""

__version__ = "0.1.0"
__all__ = ["basis", "bezier", "curve", "knots", "rational", "surface", "surface_derivs"]