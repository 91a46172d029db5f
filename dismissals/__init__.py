"""
Cricket Dismissal Analyzer

Records where and how batters were dismissed on a field diagram and
derives aggregate statistics (averages, strike rates, dismissal breakdown)
from the recorded events.
"""

__version__ = "0.1.0"
