"""
FontScheme: resolves semantic font descriptors to Qt fonts, honouring the
platform's dynamic-type size and bold-text accessibility settings.
"""

__version__ = "1.0.0"
