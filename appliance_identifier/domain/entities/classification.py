"""Domain Entities - raw classifier output."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClassificationResult:
    """A single prediction as reported by the classifier.

    ``label`` is the classifier's raw identifier and may carry a
    namespace prefix, e.g. ``"n07697537 washing_machine"``.
    """

    label: str
    confidence: float
