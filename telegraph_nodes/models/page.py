"""Telegraph page data models."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..content_converter.errors import NodeFormatError
from .content_node import ContentNode


def _require(data: Dict[str, Any], key: str, owner: str) -> Any:
    if key not in data:
        raise NodeFormatError(f"missing required field '{key}'", path=owner)
    return data[key]


@dataclass
class Page:
    """Telegraph page as returned by createPage/getPage/editPage.

    The content field is only present when the page was requested with
    return_content=true; it has the same node shape the converter produces.

    Attributes:
        path: Path to the page (e.g. "Sample-Page-12-15")
        url: Full URL of the page
        title: Page title
        description: Page description
        views: Number of page views
        author_name: Name of the author displayed below the title
        author_url: Profile link opened when the author name is clicked
        image_url: Image URL used for the page preview
        content: Page content as content nodes (None unless requested)
        can_edit: True if the current account can edit the page
    """
    path: str
    url: str
    title: str
    description: str
    views: int
    author_name: Optional[str] = None
    author_url: Optional[str] = None
    image_url: Optional[str] = None
    content: Optional[List[ContentNode]] = None
    can_edit: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Page":
        """Build a Page from the API's decoded page object.

        Args:
            data: Decoded JSON object for one page

        Returns:
            Page with content decoded into content nodes

        Raises:
            NodeFormatError: If a required field is missing or content is
                not a valid node array
        """
        if not isinstance(data, dict):
            raise NodeFormatError(
                f"expected an object, got {type(data).__name__}", path="page"
            )

        # Deferred: the serializer imports this package
        from ..content_converter.serializer import nodes_from_value

        content = data.get("content")
        return cls(
            path=_require(data, "path", "page"),
            url=_require(data, "url", "page"),
            title=_require(data, "title", "page"),
            description=_require(data, "description", "page"),
            views=_require(data, "views", "page"),
            author_name=data.get("author_name"),
            author_url=data.get("author_url"),
            image_url=data.get("image_url"),
            content=nodes_from_value(content) if content is not None else None,
            can_edit=data.get("can_edit"),
        )


@dataclass
class PageList:
    """List of pages belonging to an account, most recent first.

    Attributes:
        total_count: Total number of pages belonging to the account
        pages: Requested pages
    """
    total_count: int
    pages: List[Page] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PageList":
        """Build a PageList from the API's decoded page list object."""
        if not isinstance(data, dict):
            raise NodeFormatError(
                f"expected an object, got {type(data).__name__}", path="page_list"
            )
        return cls(
            total_count=_require(data, "total_count", "page_list"),
            pages=[Page.from_dict(page) for page in data.get("pages", [])],
        )


@dataclass
class PageViews:
    """Number of views for a page (getViews).

    Attributes:
        views: Number of page views for the requested period
    """
    views: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PageViews":
        if not isinstance(data, dict):
            raise NodeFormatError(
                f"expected an object, got {type(data).__name__}", path="page_views"
            )
        return cls(views=_require(data, "views", "page_views"))


@dataclass
class UploadResult:
    """One uploaded file, as listed in the upload endpoint's response.

    Attributes:
        src: Path of the file on telegra.ph (e.g. "/file/6a5b15e7eb4d7329ca7af.jpg"),
            usable as an img/video src attribute in page content
    """
    src: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UploadResult":
        if not isinstance(data, dict):
            raise NodeFormatError(
                f"expected an object, got {type(data).__name__}", path="upload"
            )
        return cls(src=_require(data, "src", "upload"))
