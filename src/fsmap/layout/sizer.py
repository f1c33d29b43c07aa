"""Node width calculation from measured label text."""

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from fsmap.errors import MeasurementError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FontSpec:
    """Font used to measure node labels.

    Attributes:
        family: Font family name
        pixel_size: Font size in canvas pixels
    """

    family: str = "sans-serif"
    pixel_size: int = 240


class TextMeasurer(ABC):
    """Contract for measuring the rendered width of a label."""

    @abstractmethod
    def width(self, label: str, font: FontSpec) -> float:
        """Return the advance width of label in canvas pixels.

        Raises:
            MeasurementError: If the backend cannot measure the label
        """
        pass


class EstimatedTextMeasurer(TextMeasurer):
    """Approximates text width from the character count.

    Used when no font backend is available (headless runs and tests).
    """

    def __init__(self, char_width_ratio: float = 0.6) -> None:
        self.char_width_ratio = char_width_ratio

    def width(self, label: str, font: FontSpec) -> float:
        return len(label) * font.pixel_size * self.char_width_ratio


class NodeSizer:
    """Computes node widths: measured label plus padding, never below a floor."""

    def __init__(
        self,
        measurer: TextMeasurer,
        font: FontSpec | None = None,
        padding: float = 400.0,
        min_width: float = 2500.0,
    ) -> None:
        """Initialize the sizer.

        Args:
            measurer: Text measurement backend
            font: Font the labels are measured in
            padding: Space added on both sides of the label
            min_width: Smallest width a node may have
        """
        self._measurer = measurer
        self.font = font or FontSpec()
        self.padding = padding
        self.min_width = min_width
        self._cache: dict[str, float] = {}

    def width(self, label: str) -> float:
        """Get the node width for a label.

        Measurement failures are absorbed and yield ``min_width``.
        """
        cached = self._cache.get(label)
        if cached is not None:
            return cached

        measured = self._measure(label)
        if measured is None:
            return self.min_width

        result = max(self.min_width, measured + 2 * self.padding)
        self._cache[label] = result
        return result

    def _measure(self, label: str) -> float | None:
        try:
            measured = float(self._measurer.width(label, self.font))
        except MeasurementError as e:
            logger.debug(f"Falling back to minimum width: {e}")
            return None
        except Exception as e:
            logger.debug(f"Text measurement backend failed for {label!r}: {e}")
            return None

        if not math.isfinite(measured) or measured < 0:
            logger.debug(f"Discarding invalid measurement {measured!r} for {label!r}")
            return None
        return measured

    def clear_cache(self) -> None:
        """Forget memoised widths (after a font backend change)."""
        self._cache.clear()
