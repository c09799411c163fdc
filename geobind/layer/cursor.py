"""
Feature cursor - one-pass iteration over layer features.

Usage:
    cursor = layer.features()
    while cursor.has_next():
        feature = cursor.next()

    layer.features().for_each(print)
"""

from typing import Any, Callable, Iterable, List

from geobind.feature import Feature


class FeatureCursor:
    """
    Iterator over features with look-ahead.

    Once exhausted, has_next() returns False and next() raises
    StopIteration.
    """

    def __init__(self, features: Iterable[Feature]):
        self._iterator = iter(features)
        self._buffer: List[Feature] = []
        self._closed = False

    def has_next(self) -> bool:
        if self._buffer:
            return True
        if self._closed:
            return False
        try:
            self._buffer.append(next(self._iterator))
        except StopIteration:
            self.close()
            return False
        return True

    def next(self) -> Feature:
        if not self.has_next():
            raise StopIteration("No more features")
        return self._buffer.pop()

    __next__ = next

    def __iter__(self) -> "FeatureCursor":
        return self

    def for_each(self, callback: Callable[[Feature], Any]) -> None:
        """Call callback once for each remaining feature."""
        for feature in self:
            callback(feature)

    def read(self, count: int) -> List[Feature]:
        """Read up to count features."""
        features = []
        while len(features) < count and self.has_next():
            features.append(self.next())
        return features

    def close(self) -> None:
        self._closed = True
        self._buffer.clear()
        close = getattr(self._iterator, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "FeatureCursor":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
