"""colourset.core — Foundation layer.

Contains the colour table, the clash rules, the generators, colour
conversion, template filling, configuration and the report builder.
This module has NO dependencies on colourset.renderers or colourset.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
