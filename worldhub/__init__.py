"""
World Hub core - drawer navigation state machine and session analytics
for the sleep, meditation and exercise domains.
"""

__version__ = "0.1.0"
