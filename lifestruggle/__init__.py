"""Life Struggle: a two-player Game of Life on an infinite strip of tiles.

Player A's tile repeats forever to the left of x=0 and player B's mirrored
tile repeats forever to the right. The contested zone between them is
simulated explicitly; everything else is an implicit periodic background.
"""

__version__ = "0.1.0"
