from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .rules import DEFAULT_FOOTER_TEXT, DEFAULT_HEADER_TEXT


class Acknow(BaseModel):
    """One acknowledged library: its title, license text, and license name."""

    model_config = ConfigDict(frozen=True)

    title: str
    text: str
    license: Optional[str] = Field(default=None, examples=["MIT"])


class HeaderFooter(BaseModel):
    model_config = ConfigDict(frozen=True)

    header: Optional[str] = None
    footer: Optional[str] = None

    def without_defaults(self) -> "HeaderFooter":
        """Drop the header/footer when it is the stock CocoaPods text."""
        return HeaderFooter(
            header=None if self.header == DEFAULT_HEADER_TEXT else self.header,
            footer=None if self.footer == DEFAULT_FOOTER_TEXT else self.footer,
        )


class AcknowledgementsResponse(BaseModel):
    header: Optional[str] = Field(default=None, examples=[DEFAULT_HEADER_TEXT])
    footer: Optional[str] = Field(default=None, examples=[DEFAULT_FOOTER_TEXT])
    acknowledgements: List[Acknow] = Field(default_factory=list)
    count: int = 0

class HealthResponse(BaseModel):
    ok: bool = True
