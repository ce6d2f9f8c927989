"""Value objects for rendered documents."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PdfOptions:
    """Fixed-size page capture settings."""

    format: str = "A4"
    print_background: bool = True
    margin: str = "10px"

    def margins(self) -> dict[str, str]:
        return {side: self.margin for side in ("top", "right", "bottom", "left")}


@dataclass(frozen=True)
class RenderedDocument:
    """A captured document and the file name suggested for it."""

    content: bytes
    suggested_name: str

    @property
    def filename(self) -> str:
        return f"{self.suggested_name}.pdf"
