"""mandprint.core — Foundation layer.

Contains the reference palette, distance and nearest-colour search, sort
views and lattice enumeration, classifiers, type definitions, settings and
the report builder. This module has NO dependencies on mandprint.commands or
mandprint.registry. Only stdlib, numpy, and PIL are allowed here.
"""
