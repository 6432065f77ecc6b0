"""Small N-body simulations: a kinetic gas in a box and a gravitating solar system."""

__version__ = "1.0.0"