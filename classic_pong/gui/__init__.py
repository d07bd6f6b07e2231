"""
PyGame host for the Pong game
"""
