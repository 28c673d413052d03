"""
This package contains the conversion pipeline for convert-footage.

The pipeline routes the target to the right service: a folder is scanned for
video files which are then converted one by one, a single file goes straight to
the converter.
"""
