"""Reusable NiceGUI widgets for the inspector."""
