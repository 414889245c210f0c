"""Terminal Snake: a fixed-rate game loop over a character-grid arena."""
import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
