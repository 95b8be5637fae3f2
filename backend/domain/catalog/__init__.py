"""
Catalog Domain - Parts and the read port used by the assembly engine.

Parts are tagged with a product type (bicycle, ski, ...) and fill one
category slot (frameType, wheels, rimColor, ...) with a value.
"""
