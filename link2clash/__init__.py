"""
link2clash
==========
Terminal client that sends proxy links to a conversion engine and assembles
a ready-to-paste Clash configuration from the results.
"""

__version__ = "0.1.0"
