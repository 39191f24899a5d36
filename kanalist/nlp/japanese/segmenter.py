"""Japanese text segmentation on whitespace and punctuation."""

import re
from typing import List

from kanalist.nlp.base import BaseSegmenter, require_text

# ASCII space, ideographic space and 。、！？
SEGMENT_DELIMITERS = (" ", "　", "。", "、", "！", "？")


class JapaneseTextSegmenter(BaseSegmenter):
    """Naive delimiter splitter.

    Runs of text without a delimiter are kept whole; no attempt is made to
    find word boundaries inside them.
    """

    def __init__(self):
        self._delimiters = re.compile("[" + "".join(SEGMENT_DELIMITERS) + "]")

    def segment_text(self, text: str) -> List[str]:
        require_text(text)
        return [segment for segment in self._delimiters.split(text) if segment]


_segmenter = JapaneseTextSegmenter()


def segment_text(text: str) -> List[str]:
    return _segmenter.segment_text(text)
