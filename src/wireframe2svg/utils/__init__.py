"""Utility helpers for wireframe2svg."""
