"""Point record model.

A mutable point with integer coordinates and a display label that always
mirrors the most recent coordinates.
"""

import logging
from dataclasses import dataclass, field

from experiment_demo.core.exceptions import LabelOverflowError, PointNotInitializedError

logger = logging.getLogger(__name__)

# Maximum label length in characters (a 20-byte buffer less its terminator)
LABEL_CAPACITY = 19


@dataclass
class PointRecord:
    """A point with x/y coordinates and a ``Point(x,y)`` label.

    A fresh record has no label until ``update`` is called; reading the
    label before that raises ``PointNotInitializedError``.
    """

    x: int = 0
    y: int = 0
    capacity: int = LABEL_CAPACITY
    _label: str | None = field(default=None, init=False, repr=False)

    @property
    def label(self) -> str:
        """The label for the current coordinates."""
        if self._label is None:
            raise PointNotInitializedError()
        return self._label

    @property
    def is_initialized(self) -> bool:
        """Check if the record has been updated at least once."""
        return self._label is not None

    def update(self, new_x: int, new_y: int) -> None:
        """Move the point and regenerate its label.

        The record is left untouched if the new label does not fit.

        Raises:
            LabelOverflowError: If ``Point(new_x,new_y)`` exceeds the capacity
        """
        label = f"Point({new_x},{new_y})"
        if len(label) > self.capacity:
            raise LabelOverflowError(label, self.capacity)

        self.x = new_x
        self.y = new_y
        self._label = label
        logger.debug(f"Updated point to {label}")
