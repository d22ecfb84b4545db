"""termpal.core: Foundation layer.

Colour maths, the extraction pipeline stages, the WCAG contrast engine,
the image collaborator, theme-tree flattening and report formatting.
This module has NO dependencies on termpal.commands or termpal.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
