"""Element tree models produced by the wireframe parser."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class HeadingElement(BaseModel):
    """A ``#`` to ``######`` heading."""

    type: Literal["heading"] = "heading"
    level: int = Field(..., ge=1, le=6)
    text: str


class ButtonElement(BaseModel):
    """A ``[[Action]]`` button."""

    type: Literal["button"] = "button"
    text: str


class ImageElement(BaseModel):
    """An ``<Description>`` image placeholder."""

    type: Literal["image"] = "image"
    description: str


class InputElement(BaseModel):
    """A ``Label: [____]`` form field."""

    type: Literal["input"] = "input"
    label: str


class LinkElement(BaseModel):
    """A ``[Text]`` or ``[Text](url)`` link. ``url`` is empty when undefined."""

    type: Literal["link"] = "link"
    text: str
    url: str = ""


class TextElement(BaseModel):
    """Any line the grammar does not otherwise recognise."""

    type: Literal["text"] = "text"
    content: str


class ListItemElement(BaseModel):
    """A ``* `` or ``- `` bullet."""

    type: Literal["list-item"] = "list-item"
    content: str


class DividerElement(BaseModel):
    """A ``---`` or ``***`` horizontal rule."""

    type: Literal["divider"] = "divider"


class SkipLinkElement(BaseModel):
    """A "skip to main content" link, kept verbatim."""

    type: Literal["skip-link"] = "skip-link"
    text: str


LeafElement = Annotated[
    Union[
        HeadingElement,
        ButtonElement,
        ImageElement,
        InputElement,
        LinkElement,
        TextElement,
        ListItemElement,
        DividerElement,
        SkipLinkElement,
    ],
    Field(discriminator="type"),
]


class LandmarkElement(BaseModel):
    """A named region opened by ``|| Name``.

    Landmarks only hold leaf elements: a new ``||`` line closes the open
    landmark instead of nesting inside it.
    """

    type: Literal["landmark"] = "landmark"
    name: str
    children: list[LeafElement] = Field(default_factory=list)


Element = Annotated[
    Union[
        HeadingElement,
        ButtonElement,
        ImageElement,
        InputElement,
        LinkElement,
        TextElement,
        ListItemElement,
        DividerElement,
        SkipLinkElement,
        LandmarkElement,
    ],
    Field(discriminator="type"),
]


class ParsedWireframe(BaseModel):
    """Metadata and top-level element sequence of one wireframe document."""

    metadata: dict[str, str] = Field(default_factory=dict)
    elements: list[Element] = Field(default_factory=list)
