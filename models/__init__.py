"""
Data Models

Defines the core data structures:
- Point, Geometry
- Center
- Line
"""

from .point import Point, Geometry
from .center import Center
from .line import Line

__all__ = ["Point", "Geometry", "Center", "Line"]
