"""
Controllers layer - orchestration and session state management.
"""

from controllers.explore_controller import ExploreController
from controllers.analyzer_controller import AnalyzerController
from controllers.lab_controller import ImageLabController
from controllers.kitchen_controller import KitchenController

__all__ = ["ExploreController", "AnalyzerController", "ImageLabController", "KitchenController"]
