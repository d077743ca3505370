"""SkyRide: a turn-based booking assistant.

Collects a traveller's name, age and flight date through a guided
question/answer dialog, alongside a small command vocabulary and an
informational intent report.
"""

__version__ = "0.1.0"
