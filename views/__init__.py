"""
Views layer - UI presentation components.
"""

from views.home_view import HomeView
from views.explore_view import ExploreView
from views.kitchen_view import KitchenView
from views.analyzer_view import AnalyzerView
from views.lab_view import ImageLabView

__all__ = ["HomeView", "ExploreView", "KitchenView", "AnalyzerView", "ImageLabView"]
