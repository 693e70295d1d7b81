"""
Parse a CocoaPods acknowledgements plist into Acknow records.

The "PreferenceSpecifiers" sequence holds the header entry first, the footer
entry last, and one entry per acknowledged library in between. Every
operation here is total: shape mismatches degrade to absent or empty values.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .loader import load_root_document, load_root_document_from_path
from .models import Acknow, HeaderFooter
from .normalize import filter_out_premature_line_breaks
from .rules import (
    DEFAULT_FOOTER_TEXT,
    DEFAULT_HEADER_TEXT,
    FOOTER_TEXT_KEY,
    LICENSE_KEY,
    PREFERENCE_SPECIFIERS_KEY,
    TITLE_KEY,
)
from .values import PlistValue

logger = logging.getLogger(__name__)


class AcknowPodParser:
    DEFAULT_HEADER_TEXT = DEFAULT_HEADER_TEXT
    DEFAULT_FOOTER_TEXT = DEFAULT_FOOTER_TEXT

    def __init__(self, root: Mapping[str, Any], exclude_by_equality: bool = False) -> None:
        """
        `exclude_by_equality` switches the header/footer exclusion from position
        (first and last entry) to structural equality: any entry equal to the
        first or the last one is dropped, wherever it sits.
        """
        if isinstance(root, Mapping) and not isinstance(root, dict):
            root = dict(root)
        self.root = PlistValue.wrap(root)
        self.exclude_by_equality = exclude_by_equality

    @classmethod
    def from_bytes(cls, raw: bytes, **kwargs: Any) -> "AcknowPodParser":
        return cls(load_root_document(raw), **kwargs)

    @classmethod
    def from_path(cls, path: Union[str, Path], **kwargs: Any) -> "AcknowPodParser":
        return cls(load_root_document_from_path(path), **kwargs)

    def _specifiers(self) -> Optional[List[PlistValue]]:
        return self.root.get(PREFERENCE_SPECIFIERS_KEY).sequence()

    def parse_header_and_footer(self) -> HeaderFooter:
        specifiers = self._specifiers()
        if not specifiers:
            return HeaderFooter()

        # a single entry is both header and footer
        first, last = specifiers[0], specifiers[-1]
        return HeaderFooter(
            header=first.get(FOOTER_TEXT_KEY).string(),
            footer=last.get(FOOTER_TEXT_KEY).string(),
        )

    def _interior(self, specifiers: List[PlistValue]) -> List[PlistValue]:
        if not self.exclude_by_equality:
            return specifiers[1:-1]
        if not specifiers:
            return []
        first, last = specifiers[0], specifiers[-1]
        return [s for s in specifiers if s != first and s != last]

    def parse_acknowledgements(self) -> List[Acknow]:
        specifiers = self._specifiers()
        if specifiers is None:
            return []

        acknowledgements = [self._to_acknow(entry) for entry in self._interior(specifiers)]
        logger.debug(
            "Parsed %d acknowledgements from %d preference specifiers",
            len(acknowledgements),
            len(specifiers),
        )
        return acknowledgements

    def parse(self) -> Tuple[HeaderFooter, List[Acknow]]:
        return self.parse_header_and_footer(), self.parse_acknowledgements()

    @staticmethod
    def _to_acknow(entry: PlistValue) -> Acknow:
        title = entry.get(TITLE_KEY).string()
        text = entry.get(FOOTER_TEXT_KEY).string()
        if title is None or text is None:
            # keep the slot so positions line up with the source entries
            logger.warning("Acknowledgement entry without Title/FooterText, using empty record")
            return Acknow(title="", text="", license=None)

        return Acknow(
            title=title,
            text=filter_out_premature_line_breaks(text),
            license=entry.get(LICENSE_KEY).string(),
        )


def parse_acknowledgements(root: Dict[str, Any], exclude_by_equality: bool = False) -> List[Acknow]:
    return AcknowPodParser(root, exclude_by_equality=exclude_by_equality).parse_acknowledgements()


def parse_header_and_footer(root: Dict[str, Any]) -> HeaderFooter:
    return AcknowPodParser(root).parse_header_and_footer()
