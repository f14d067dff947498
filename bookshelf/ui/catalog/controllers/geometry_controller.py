"""
GeometryController - Estimates how many results make a pinned header useful.

Models the card grid at the current viewport size and requires more than
one screen of cards before sticky behaviour may engage.
"""
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from bookshelf.core.config import Breakpoint, LayoutSettings


@dataclass(frozen=True, slots=True)
class ViewportGeometry:
    """Viewport size in pixels."""

    width: int
    height: int


@dataclass(frozen=True, slots=True)
class GeometryEstimate:
    """Every intermediate value of a min-results calculation."""

    card_height: int
    cards_per_row: int
    available_height: int
    rows_that_fit: int
    min_results: int


class ViewportGeometryEstimator:
    """
    Computes the minimum filtered-result count required before the
    header may become sticky.

    Example:
        estimator = ViewportGeometryEstimator()
        estimator.min_results(ViewportGeometry(1300, 900))  # 12
    """

    def __init__(self, settings: Optional[LayoutSettings] = None):
        self._settings = settings or LayoutSettings()
        self._breakpoints = sorted(
            self._settings.breakpoints, key=lambda bp: bp.min_width, reverse=True
        )

    @property
    def settings(self) -> LayoutSettings:
        return self._settings

    def _breakpoint_for(self, width: int) -> Optional[Breakpoint]:
        for breakpoint in self._breakpoints:
            if width >= breakpoint.min_width:
                return breakpoint
        return None

    def card_height(self, width: int) -> int:
        """Rendered card height at the given viewport width."""
        breakpoint = self._breakpoint_for(width)
        if breakpoint is None:
            return self._settings.compact_card_height
        return breakpoint.card_height

    def cards_per_row(self, width: int) -> int:
        """Number of grid columns at the given viewport width."""
        breakpoint = self._breakpoint_for(width)
        if breakpoint is None:
            return 1
        return max(0, (width - breakpoint.gutter) // self._settings.column_width)

    def estimate(self, geometry: ViewportGeometry) -> GeometryEstimate:
        settings = self._settings
        card_height = self.card_height(geometry.width)
        cards_per_row = self.cards_per_row(geometry.width)
        available_height = geometry.height - settings.chrome_height
        rows_that_fit = max(0, available_height // card_height) if card_height > 0 else 0

        min_results = max(
            cards_per_row * (rows_that_fit + settings.extra_rows),
            settings.min_results_floor,
        )
        return GeometryEstimate(
            card_height=card_height,
            cards_per_row=cards_per_row,
            available_height=available_height,
            rows_that_fit=rows_that_fit,
            min_results=min_results,
        )

    def min_results(self, geometry: ViewportGeometry) -> int:
        estimate = self.estimate(geometry)
        logger.debug(
            f"Sticky threshold for {geometry.width}x{geometry.height}: "
            f"{estimate.cards_per_row} per row x ({estimate.rows_that_fit} + "
            f"{self._settings.extra_rows}) rows -> {estimate.min_results}"
        )
        return estimate.min_results
