"""Label measurement through Qt font metrics."""

import threading

from PyQt6.QtGui import QFont, QFontMetricsF, QGuiApplication

from fsmap.errors import MeasurementError
from fsmap.layout.sizer import FontSpec, TextMeasurer


class QtTextMeasurer(TextMeasurer):
    """Measures labels with QFontMetricsF.

    Requires a QGuiApplication. QFont and QFontMetricsF are reentrant but
    not thread-safe, so each layout thread builds its own metrics cache.
    """

    def __init__(self) -> None:
        self._local = threading.local()

    def _cache(self) -> dict[FontSpec, QFontMetricsF]:
        cache = getattr(self._local, "metrics", None)
        if cache is None:
            cache = {}
            self._local.metrics = cache
        return cache

    def width(self, label: str, font: FontSpec) -> float:
        if QGuiApplication.instance() is None:
            raise MeasurementError(label, "no QGuiApplication instance")

        cache = self._cache()
        metrics = cache.get(font)
        if metrics is None:
            qfont = QFont(font.family)
            qfont.setPixelSize(font.pixel_size)
            if font.family == "sans-serif":
                qfont.setStyleHint(QFont.StyleHint.SansSerif)
            metrics = QFontMetricsF(qfont)
            cache[font] = metrics
        return metrics.horizontalAdvance(label)
