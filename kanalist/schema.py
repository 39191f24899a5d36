from pydantic import BaseModel, ConfigDict
from typing import Tuple

class ProcessedText(BaseModel):
    original: str
    hiragana: str
    katakana: str
    romaji: str
    segments: Tuple[str, ...]  # in original left-to-right order
    reading_guide: str  # "{original} ({romaji})"
    model_config = ConfigDict(frozen=True, extra="forbid")
