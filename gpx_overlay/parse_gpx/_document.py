"""Typed, read-only document model over an lxml GPX tree.

``GpxDocument`` and ``GpxNode`` are the only classes that touch lxml
elements directly.  Everything downstream asks for nodes by local tag
name and reads attributes/text through this interface, so GPX 1.0,
GPX 1.1 and namespace-less documents are handled identically.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from gpx_overlay.core.constants import GPX_NAMESPACES, TAG_GPX
from gpx_overlay.core.exceptions import GpxParseError

if TYPE_CHECKING:
    from lxml.etree import _Element

logger = logging.getLogger("gpx_overlay.parse_gpx")


class GpxNode:
    """A single element of a GPX document (``wpt``, ``trk``, ``trkpt`` ...)."""

    __slots__ = ("_element",)

    def __init__(self, element: _Element) -> None:
        self._element = element

    def __repr__(self) -> str:
        return f"GpxNode(<{self.tag}>)"

    @property
    def tag(self) -> str:
        """Local tag name with any namespace stripped."""
        return _local_name(self._element.tag)

    def attr(self, name: str) -> str | None:
        """Return the attribute value, or ``None`` when absent."""
        return self._element.get(name)

    def attributes(self) -> list[tuple[str, str]]:
        """Return ``(name, value)`` pairs in document order."""
        return [(_local_name(key), value) for key, value in self._element.attrib.items()]

    def children(self) -> list[GpxNode]:
        """Return direct child elements in document order (comments skipped)."""
        return [GpxNode(child) for child in self._element if isinstance(child.tag, str)]

    def find_by_tag(self, name: str) -> list[GpxNode]:
        """Return all descendants with local tag ``name``, in document order."""
        return [
            GpxNode(el) for el in self._element.iter(f"{{*}}{name}") if el is not self._element
        ]

    def own_text(self) -> str:
        """Return the element's direct text nodes joined, skipping child elements.

        ``<desc>a<!--x-->b</desc>`` gives ``"ab"`` and
        ``<desc><b>x</b>tail</desc>`` gives ``"tail"``.
        """
        parts = [self._element.text or ""]
        parts.extend(child.tail or "" for child in self._element)
        return "".join(parts)

    def text_content(self) -> str:
        """Return all descendant text concatenated in document order."""
        return "".join(self._element.itertext())


class GpxDocument:
    """Read-only view over a parsed GPX tree."""

    __slots__ = ("_root", "source_name")

    def __init__(self, root: _Element, *, source_name: str = "") -> None:
        self._root = root
        self.source_name = source_name

    def __repr__(self) -> str:
        return f"GpxDocument(source_name={self.source_name!r})"

    @property
    def root(self) -> GpxNode:
        return GpxNode(self._root)

    def find_by_tag(self, name: str) -> list[GpxNode]:
        """Return every element with local tag ``name`` anywhere in the document."""
        return [GpxNode(el) for el in self._root.iter(f"{{*}}{name}")]


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def load_document(source: bytes | str | Path, *, source_name: str = "") -> GpxDocument:
    """Parse GPX content into a ``GpxDocument``.

    Args:
        source: Raw XML bytes, XML text, or a filesystem path
            (``str`` or ``pathlib.Path``).  A ``str`` is treated as XML
            text when it starts with ``<``, otherwise as a path.
        source_name: Name used in log lines (defaults to the file name
            for path input).

    Raises:
        GpxParseError: If the input cannot be read, is empty, is not
            well-formed XML, or its root element is not ``<gpx>``.
    """
    from lxml import etree  # type: ignore[attr-defined]

    content, encoding = _read_source(source)
    if not source_name and not isinstance(source, bytes):
        if isinstance(source, Path) or not source.lstrip().startswith("<"):
            source_name = Path(source).name

    if not content.strip():
        msg = "GPX document is empty"
        raise GpxParseError(msg)

    parser = etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        huge_tree=False,
        encoding=encoding,
    )
    try:
        root: _Element = etree.fromstring(content, parser=parser)
    except etree.XMLSyntaxError as exc:
        msg = f"Not valid XML: {exc}"
        raise GpxParseError(msg) from exc

    if _local_name(root.tag) != TAG_GPX:
        msg = f"Not a GPX document: root element is <{root.tag}>"
        raise GpxParseError(msg)

    namespace = etree.QName(root).namespace
    if namespace and namespace not in GPX_NAMESPACES:
        logger.warning(
            "Unrecognised GPX namespace, parsing anyway | source=%s | namespace=%s",
            source_name,
            namespace,
        )

    logger.debug(
        "Loaded GPX document | source=%s | version=%s | bytes=%d",
        source_name,
        root.get("version", ""),
        len(content),
    )
    return GpxDocument(root, source_name=source_name)


def _read_source(source: bytes | str | Path) -> tuple[bytes, str | None]:
    """Return ``(content, encoding)``.

    ``encoding`` is set only for ``str`` input, which is re-encoded as
    UTF-8 and must override any ``<?xml encoding=...?>`` declaration.
    """
    if isinstance(source, bytes):
        return source.lstrip(), None
    if isinstance(source, str) and source.lstrip().startswith("<"):
        return source.lstrip().encode("utf-8"), "utf-8"
    try:
        return Path(source).read_bytes(), None
    except OSError as exc:
        msg = f"Cannot read GPX file: {exc}"
        raise GpxParseError(msg) from exc


def _local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from an element or attribute name."""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag
