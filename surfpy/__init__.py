"""Top-level package for SurfPY."""

__author__ = """Michael Watson"""
__email__ = 'mike.watson@sheffield.ac.uk'
__version__ = '0.1.0'

dtype = 'float64'
WARN_ON_DEGENERATE = False


class WarnOnDegenerate:
    """Emit a DegenerateSurfaceWarning from every factory given degenerate parameters inside this block"""
    def __init__(self):
        self.warn = WARN_ON_DEGENERATE

    def __enter__(self):
        global WARN_ON_DEGENERATE
        WARN_ON_DEGENERATE = True

    def __exit__(self, err_type, value, traceback):
        global WARN_ON_DEGENERATE
        WARN_ON_DEGENERATE = self.warn
