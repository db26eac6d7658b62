"""Render configuration for the SVG wireframe renderer."""

from __future__ import annotations

from pydantic import BaseModel, Field


class FontSpec(BaseModel):
    """Size, weight and line height for one text style."""

    size: int
    weight: str = "normal"
    line_height: int


class Fonts(BaseModel):
    h1: FontSpec = FontSpec(size=32, weight="bold", line_height=40)
    h2: FontSpec = FontSpec(size=24, weight="bold", line_height=32)
    h3: FontSpec = FontSpec(size=20, weight="bold", line_height=28)
    h4: FontSpec = FontSpec(size=18, weight="bold", line_height=24)
    h5: FontSpec = FontSpec(size=16, weight="bold", line_height=22)
    h6: FontSpec = FontSpec(size=14, weight="bold", line_height=20)
    body: FontSpec = FontSpec(size=14, weight="normal", line_height=22)
    label: FontSpec = FontSpec(size=12, weight="normal", line_height=18)

    def for_heading(self, level: int) -> FontSpec:
        """Return the heading font for ``level``, falling back to body text."""
        return getattr(self, f"h{level}", self.body) if 1 <= level <= 6 else self.body


class Palette(BaseModel):
    """Greyscale wireframe colours."""

    background: str = "#FFFFFF"
    border: str = "#CCCCCC"
    text: str = "#333333"
    text_light: str = "#666666"
    link: str = "#0066CC"
    button_bg: str = "#F5F5F5"
    button_border: str = "#999999"
    image_placeholder: str = "#E8E8E8"
    landmark_bg: str = "#FAFAFA"


class Spacing(BaseModel):
    section: int = 40
    element: int = 16
    small: int = 8


class ButtonStyle(BaseModel):
    height: int = 40
    border_radius: int = 4
    padding_x: int = 24
    min_width: int = 120
    char_width: int = 8


class InputStyle(BaseModel):
    height: int = 40
    border_radius: int = 4


class ImageStyle(BaseModel):
    min_height: int = 120
    default_width: float = Field(default=0.8, gt=0, le=1)


class RenderConfig(BaseModel):
    """Layout constants for a 12-column, 960 unit wide canvas."""

    page_width: int = 960
    column_width: int = 80
    gutter: int = 20
    padding: int = 40
    font_family: str = "Arial, sans-serif"
    fonts: Fonts = Field(default_factory=Fonts)
    colors: Palette = Field(default_factory=Palette)
    spacing: Spacing = Field(default_factory=Spacing)
    button: ButtonStyle = Field(default_factory=ButtonStyle)
    input: InputStyle = Field(default_factory=InputStyle)
    image: ImageStyle = Field(default_factory=ImageStyle)

    @property
    def content_width(self) -> int:
        """Canvas width minus the padding on both sides."""
        return self.page_width - self.padding * 2
