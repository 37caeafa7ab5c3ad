"""Plotting and legend helpers."""
