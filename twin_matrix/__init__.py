"""
Twin Matrix Scoring Core

Classifies scored dimensions into categories, derives display parameters
for each score and reconstructs the smoothing computation behind it.
"""

__version__ = "1.0.0"
