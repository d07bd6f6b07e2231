"""
Logging module for the project
"""

import logging

# Change logging level to DEBUG to trace round resets
logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger("classic_pong")
