"""swatchkit.core — Foundation layer.

Colour codec, WCAG luminance maths, grid pixel sampling and k-means palette
quantization, plus the shared types, configuration and report formatting.
This module has NO dependencies on swatchkit.commands or swatchkit.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
