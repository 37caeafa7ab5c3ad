"""NiceGUI front-end for the inspector."""
