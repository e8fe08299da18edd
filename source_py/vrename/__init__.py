"""
vrename - batch rename files with your preferred text editor.

The file names are written to a temporary file, one per line, which the
user edits; each file is then renamed to the name on its line.
"""

__version__ = "1.0.0"
__author__ = "vrename Team"
