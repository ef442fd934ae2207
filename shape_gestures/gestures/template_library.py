"""
Built-in reference shapes.

Each template is a representative polyline in screen coordinates (y grows
downward) that is normalized and resampled exactly like an input stroke.
Labels repeat where one shape can be drawn in more than one order.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from .exceptions import DegenerateInput, InvalidTemplateDefinition
from .normalizer import PathNormalizer
from .prepared_gesture import PreparedGesture
from .resampler import PathResampler

logger = logging.getLogger(__name__)

TemplateDefinition = Tuple[str, Sequence[Tuple[float, float]]]

TEMPLATE_DEFINITIONS: Tuple[TemplateDefinition, ...] = (
    # Single swipes and swipes with a turn
    ("down",           ((0, 0), (0, 100))),
    ("down-left",      ((0, 0), (0, 100), (-100, 100))),
    ("down-right",     ((0, 0), (0, 100), (100, 100))),
    ("down-up",        ((0, 0), (0, 100), (0, 0))),

    ("left",           ((0, 0), (-100, 0))),
    ("left-down",      ((0, 0), (-100, 0), (-100, 100))),
    ("left-right",     ((0, 0), (-100, 0), (0, 0))),
    ("left-up",        ((0, 0), (-100, 0), (-100, -100))),

    ("right",          ((0, 0), (100, 0))),
    ("right-down",     ((0, 0), (100, 0), (100, 100))),
    ("right-left",     ((0, 0), (100, 0), (0, 0))),
    ("right-up",       ((0, 0), (100, 0), (100, -100))),

    ("up",             ((0, 0), (0, -100))),
    ("up-down",        ((0, 0), (0, -100), (0, 0))),
    ("up-left",        ((0, 0), (0, -100), (-100, -100))),
    ("up-right",       ((0, 0), (0, -100), (100, -100))),

    # Diagonals
    ("diag-downleft",  ((0, 0), (-100, 100))),
    ("diag-downright", ((0, 0), (100, 100))),
    ("diag-upleft",    ((0, 0), (-100, -100))),
    ("diag-upright",   ((0, 0), (100, -100))),

    # Both windings of a rectangle
    ("rectangle",      ((0, 0), (100, 0), (100, 100), (0, 100))),
    ("rectangle",      ((0, 0), (0, 100), (100, 100), (100, 0))),

    ("arrow-up",       ((0, 100), (50, 0), (100, 100))),
    ("arrow-down",     ((0, 0), (50, 100), (100, 0))),
    ("arrow-left",     ((100, 0), (0, 50), (100, 100))),
    ("arrow-right",    ((0, 0), (100, 50), (0, 100))),

    ("tri-up",         ((0, 100), (50, 0), (100, 100), (0, 100))),
    ("tri-down",       ((0, 0), (50, 100), (100, 0), (0, 0))),
    ("tri-left",       ((100, 0), (0, 50), (100, 100), (100, 0))),
    ("tri-right",      ((0, 0), (100, 50), (0, 100), (0, 0))),

    # Letters
    ("n",              ((0, 100), (0, 0), (100, 100), (100, 0))),
    ("t",              ((0, 0), (100, 0), (50, 0), (50, 100))),
    ("x",              ((0, 0), (100, 100), (100, 0), (0, 100))),
    ("z",              ((0, 0), (100, 0), (0, 100), (100, 100))),
)


@dataclass(frozen=True)
class Template:
    """A named reference gesture."""
    name: str
    gesture: PreparedGesture


class TemplateLibrary:
    """Immutable, ordered collection of prepared templates."""

    def __init__(self, templates: Sequence[Template]):
        self._templates: Tuple[Template, ...] = tuple(templates)

    @classmethod
    def from_definitions(
        cls,
        definitions: Sequence[TemplateDefinition] = TEMPLATE_DEFINITIONS,
        normalizer: Optional[PathNormalizer] = None,
        resampler: Optional[PathResampler] = None,
    ) -> 'TemplateLibrary':
        """
        Prepare every definition in order.

        Raises:
            InvalidTemplateDefinition: If any definition has fewer than 2
                distinct control points. No entry is ever skipped.
        """
        normalizer = normalizer or PathNormalizer()
        resampler = resampler or PathResampler()

        templates = []
        for name, control_points in definitions:
            try:
                normalized = normalizer.normalize(control_points)
            except DegenerateInput as e:
                raise InvalidTemplateDefinition(name, str(e)) from e
            templates.append(Template(name, resampler.resample(normalized)))

        logger.info(f"Built template library with {len(templates)} templates")
        return cls(templates)

    @property
    def templates(self) -> Tuple[Template, ...]:
        return self._templates

    def labels(self) -> List[str]:
        """Distinct labels in first-seen order."""
        seen = []
        for template in self._templates:
            if template.name not in seen:
                seen.append(template.name)
        return seen

    def __iter__(self) -> Iterator[Template]:
        return iter(self._templates)

    def __len__(self):
        return len(self._templates)

    def __getitem__(self, index: int) -> Template:
        return self._templates[index]


_library: Optional[TemplateLibrary] = None
_library_lock = threading.Lock()


def get_template_library() -> TemplateLibrary:
    """
    Return the shared built-in library, building it on first use.

    Concurrent first callers block on the lock and all receive the same
    instance; once built, the library is returned without locking.
    """
    global _library
    library = _library
    if library is not None:
        return library

    with _library_lock:
        if _library is None:
            _library = TemplateLibrary.from_definitions(TEMPLATE_DEFINITIONS)
        return _library
