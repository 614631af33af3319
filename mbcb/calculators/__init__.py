"""
Barrier system assembly.

Pure Python math. Combines per-part weights from weights.py into a
laid set of rails, posts, spacers and fasteners, and reports the set
weight and the weight per running metre.
"""
