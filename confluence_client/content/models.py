"""
Data model for Confluence spaces and pages.

Read-side classes are built from API responses with ``from_dict``. A missing
required key raises ``KeyError`` and a wrongly shaped value raises
``TypeError`` or ``ValueError``; the session turns those into ``DecodeError``.

Write-side classes (``PostPage`` and friends) serialize with ``to_dict`` into
the JSON body sent on create and update requests.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _expect_dict(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"Expected an object for {what}, got {type(data).__name__}")
    return data


def _expect_list(data: Any, what: str) -> List[Any]:
    if not isinstance(data, list):
        raise TypeError(f"Expected an array for {what}, got {type(data).__name__}")
    return data


def _expect_str(data: Any, what: str) -> str:
    if not isinstance(data, str):
        raise TypeError(f"Expected a string for {what}, got {type(data).__name__}")
    return data


def _optional_str(data: Any, what: str) -> Optional[str]:
    if data is None:
        return None
    return _expect_str(data, what)


@dataclass(frozen=True)
class Links:
    """
    The ``_links`` bundle attached to records and collections.

    Attributes:
        self_link: Canonical API URL of the resource (``self``).
        next: Relative link to the next page of a collection, if any.
        prev: Relative link to the previous page of a collection, if any.
        base: Base URL of the Confluence instance.
        webui: Relative URL of the resource in the web UI.
    """

    self_link: str
    next: Optional[str] = None
    prev: Optional[str] = None
    base: Optional[str] = None
    webui: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Links":
        data = _expect_dict(data, "_links")
        return cls(
            self_link=_expect_str(data["self"], "_links.self"),
            next=_optional_str(data.get("next"), "_links.next"),
            prev=_optional_str(data.get("prev"), "_links.prev"),
            base=_optional_str(data.get("base"), "_links.base"),
            webui=_optional_str(data.get("webui"), "_links.webui"),
        )


@dataclass(frozen=True)
class SpaceExpandable:
    """Expandability descriptor of a space (``_expandable``)."""

    homepage: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SpaceExpandable":
        data = _expect_dict(data, "space._expandable")
        return cls(homepage=_optional_str(data.get("homepage"), "space._expandable.homepage"))


@dataclass(frozen=True)
class Space:
    """
    A Confluence space.

    Attributes:
        id: Numeric space identifier.
        key: Short space key (e.g. ``"DOC"``).
        name: Human readable space name.
        expandable: The ``_expandable`` descriptor, or None when the server
            omits it.
    """

    id: int
    key: str
    name: str
    expandable: Optional[SpaceExpandable] = None

    @property
    def homepage_link(self) -> Optional[str]:
        """Relative API link of the space homepage, if resolvable."""
        if self.expandable is None:
            return None
        return self.expandable.homepage

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Space":
        data = _expect_dict(data, "space")
        expandable = data.get("_expandable")
        return cls(
            id=int(data["id"]),
            key=_expect_str(data["key"], "space.key"),
            name=_expect_str(data["name"], "space.name"),
            expandable=SpaceExpandable.from_dict(expandable) if expandable is not None else None,
        )


@dataclass(frozen=True)
class BodyView:
    """Rendered (``view``) representation of a page body."""

    value: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BodyView":
        data = _expect_dict(data, "body.view")
        return cls(value=_expect_str(data["value"], "body.view.value"))


@dataclass(frozen=True)
class Body:
    """Page body as returned on read; only the rendered view is expanded."""

    view: Optional[BodyView] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Body":
        data = _expect_dict(data, "body")
        view = data.get("view")
        return cls(view=BodyView.from_dict(view) if view is not None else None)


@dataclass(frozen=True)
class Version:
    """Version information of a page."""

    number: int
    when: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Version":
        data = _expect_dict(data, "version")
        return cls(
            number=int(data["number"]),
            when=data.get("when"),
            message=data.get("message") or None,
        )


@dataclass(frozen=True)
class PaginatedResponse:
    """
    One page of a paginated collection.

    Attributes:
        size: Number of results in this page.
        limit: Maximum number of results the server returns per page.
        start: Offset of the first result in the whole collection.
        links: Links bundle; ``links.next`` is None on the last page.
        results: The records of this page, in server order.
    """

    size: int
    limit: int
    start: int
    links: Links
    results: List["Page"] = field(default_factory=list)

    @property
    def next_link(self) -> Optional[str]:
        return self.links.next

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PaginatedResponse":
        data = _expect_dict(data, "page collection")
        return cls(
            size=int(data["size"]),
            limit=int(data["limit"]),
            start=int(data["start"]),
            links=Links.from_dict(data["_links"]),
            results=[Page.from_dict(item) for item in _expect_list(data["results"], "results")],
        )


@dataclass(frozen=True)
class PageChildren:
    """The ``children`` expansion of a page (child pages only)."""

    page: PaginatedResponse
    links: Links

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PageChildren":
        data = _expect_dict(data, "children")
        return cls(
            page=PaginatedResponse.from_dict(data["page"]),
            links=Links.from_dict(data["_links"]),
        )


@dataclass(frozen=True)
class Page:
    """
    A Confluence page as returned by the content API.

    Instances are produced by decoding a single response and are not
    modified afterwards.

    Attributes:
        id: Page identifier (a numeric string).
        title: Page title.
        status: Content status, e.g. ``"current"``.
        links: Links bundle of the page.
        space: The containing space, when expanded.
        body: The rendered body, when expanded.
        children: First page of child pages, when expanded.
        version: Current version, when expanded.
    """

    id: str
    title: str
    status: str
    links: Links
    space: Optional[Space] = None
    body: Optional[Body] = None
    children: Optional[PageChildren] = None
    version: Optional[Version] = None

    @property
    def body_html(self) -> Optional[str]:
        """Rendered HTML of the page, if the body was expanded."""
        if self.body is None or self.body.view is None:
            return None
        return self.body.view.value

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Page":
        data = _expect_dict(data, "page")
        space = data.get("space")
        body = data.get("body")
        children = data.get("children")
        version = data.get("version")
        return cls(
            id=_expect_str(data["id"], "page.id"),
            title=_expect_str(data["title"], "page.title"),
            status=_expect_str(data["status"], "page.status"),
            links=Links.from_dict(data["_links"]),
            space=Space.from_dict(space) if space is not None else None,
            body=Body.from_dict(body) if body is not None else None,
            children=PageChildren.from_dict(children) if children is not None else None,
            version=Version.from_dict(version) if version is not None else None,
        )


@dataclass(frozen=True)
class SpacesResult:
    """The ``{"results": [...]}`` envelope of the space listing."""

    results: List[Space]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SpacesResult":
        data = _expect_dict(data, "space listing")
        return cls(results=[Space.from_dict(item) for item in _expect_list(data["results"], "results")])


@dataclass(frozen=True)
class SpaceContentResult:
    """The ``{"page": {...}}`` envelope of the space content listing."""

    page: PaginatedResponse

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SpaceContentResult":
        data = _expect_dict(data, "space content")
        return cls(page=PaginatedResponse.from_dict(data["page"]))


# Write side


@dataclass(frozen=True)
class PostAncestor:
    id: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id}


@dataclass(frozen=True)
class PostSpace:
    key: str

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key}


@dataclass(frozen=True)
class PostStorage:
    value: str
    representation: str = "storage"

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "representation": self.representation}


@dataclass(frozen=True)
class PostBody:
    """Page body in storage format, as sent on create and update."""

    storage: PostStorage

    @classmethod
    def from_value(cls, value: str) -> "PostBody":
        return cls(storage=PostStorage(value=value))

    def to_dict(self) -> Dict[str, Any]:
        return {"storage": self.storage.to_dict()}


@dataclass(frozen=True)
class PostVersion:
    number: int

    def to_dict(self) -> Dict[str, Any]:
        return {"number": self.number}


@dataclass(frozen=True)
class PostPage:
    """
    JSON body for creating or updating a page.

    Use ``PostPage.new_page`` for creation and ``PostPage.update_page`` for
    updates; both produce the same shape, differing in which optional
    fields are populated. Absent optional fields serialize as ``null``.

    Examples:
        >>> PostPage.new_page("Title", ancestor=7, space_key="DOC").to_dict()["ancestors"]
        [{'id': '7'}]
        >>> PostPage.update_page(10, "T", "S", "B", new_version=4).to_dict()["version"]
        {'number': 4}
    """

    title: str
    space: PostSpace
    type: str = "page"
    id: Optional[str] = None
    ancestors: Optional[List[PostAncestor]] = None
    body: Optional[PostBody] = None
    version: Optional[PostVersion] = None

    @classmethod
    def new_page(
        cls,
        title: str,
        ancestor: Optional[int] = None,
        space_key: str = "",
        body: Optional[str] = None,
    ) -> "PostPage":
        """
        Build the body of a create request.

        Args:
            title: Title of the new page.
            ancestor: Optional parent page id; sent as a one-element list.
            space_key: Key of the space to create the page in.
            body: Optional page content in storage format.
        """
        return cls(
            title=title,
            space=PostSpace(key=space_key),
            ancestors=[PostAncestor(id=str(ancestor))] if ancestor is not None else None,
            body=PostBody.from_value(body) if body is not None else None,
        )

    @classmethod
    def update_page(
        cls,
        page_id: int,
        title: str,
        space_key: str,
        body: Optional[str] = None,
        new_version: int = 1,
    ) -> "PostPage":
        """
        Build the body of an update request.

        Args:
            page_id: Id of the page being updated.
            title: New title of the page.
            space_key: Key of the space the page lives in.
            body: Optional new content in storage format.
            new_version: Version number the update creates.
        """
        return cls(
            id=str(page_id),
            title=title,
            space=PostSpace(key=space_key),
            body=PostBody.from_value(body) if body is not None else None,
            version=PostVersion(number=new_version),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "title": self.title,
            "ancestors": [a.to_dict() for a in self.ancestors] if self.ancestors is not None else None,
            "space": self.space.to_dict(),
            "body": self.body.to_dict() if self.body is not None else None,
            "version": self.version.to_dict() if self.version is not None else None,
        }
