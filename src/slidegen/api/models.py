"""Data models for carousel projects, slides and rendered images."""

from dataclasses import dataclass, field


@dataclass
class Slide:
    """Represents a single carousel slide."""

    id: str
    slide_number: int
    content: str
    title: str | None = None
    hashtags: list[str] = field(default_factory=list)

    @property
    def char_count(self) -> int:
        return len(self.content)


@dataclass
class CarouselProject:
    """Represents a carousel project with its slides."""

    id: str
    title: str
    template_type: str | None = None  # e.g. "NEWS", "STORY", "PRODUCT"
    description: str | None = None
    slides: list[Slide] = field(default_factory=list)

    def sorted_slides(self) -> list[Slide]:
        """
        Get slides ordered by slide number.

        Returns:
            New list sorted by slide_number.
        """
        return sorted(self.slides, key=lambda s: s.slide_number)


@dataclass
class SlideImage:
    """A slide rendered to an image."""

    slide_id: str
    slide_number: int
    content: str
    image: bytes  # Encoded image data
    file_name: str
    svg: str = ""  # Same slide as SVG markup


@dataclass
class SlideValidation:
    """Result of checking a slide before rendering."""

    issues: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.issues
