"""
Label style presets for the calculator rows.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from core.model import Classification


@dataclass(frozen=True)
class LabelStyle:
    color: str
    bold: bool

    def stylesheet(self) -> str:
        weight = "bold" if self.bold else "normal"
        return f"color: {self.color}; font-weight: {weight};"


CLASSIFICATION_STYLES: Dict[Classification, LabelStyle] = {
    Classification.REQUIRED: LabelStyle(color="#FF0000", bold=True),
    Classification.USED: LabelStyle(color="#006400", bold=True),
    Classification.RESULT: LabelStyle(color="#0000FF", bold=True),
    Classification.NEUTRAL: LabelStyle(color="#000000", bold=False),
}
