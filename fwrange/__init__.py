"""
An interval abstract domain over fixed-width two's-complement integers,
together with its transfer functions, to be used by value-range analyses.
"""
