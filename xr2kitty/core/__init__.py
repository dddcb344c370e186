"""xr2kitty.core — Foundation layer.

Contains the colour decoder, slot mapping, X resources extractor, error types
and the registry document renderer.
This module has NO dependencies on xr2kitty.preview or xr2kitty.__main__.
Only stdlib is allowed here.
"""
