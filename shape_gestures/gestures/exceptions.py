"""
Errors raised while preparing strokes and building the template library.
"""


class DegenerateInput(ValueError):
    """A stroke with fewer than 2 distinct points or no spatial extent.

    This is an expected outcome (a tap without a drag, for instance) and is
    turned into "no gesture" by the classifier.
    """


class InvalidTemplateDefinition(ValueError):
    """A built-in template that cannot be prepared. Fatal at build time."""

    def __init__(self, name: str, reason: str):
        super().__init__(f"Invalid template definition '{name}': {reason}")
        self.name = name
        self.reason = reason
