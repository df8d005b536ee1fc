"""
markup - build a tree of markup elements and render it as html or xml

    root = makeroot("div").setAttribute("class", ["a", "b"])
    root.img({"src": "x.png"})
    root.text("Hi")
    str(root)  # <div class="a b"><img src="x.png"/>Hi</div> (html)

Does not enforce correct html structure.
Appending a node copies it, so a node is never shared between two places
in a tree. Rendering always starts at the root of the tree.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union

from .config import MarkupConfig, getdefaults
from .escaping import escape

log = logging.getLogger(__name__)

Attributes = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def makedocument(
    title: Optional[str] = None, config: Optional[MarkupConfig] = None
) -> Markup:
    """
    makedocument - create a basic html document
    """
    document = Markup("", config=config)  # container to hold the document
    document.doctype()
    html = document.element("html")
    head = html.element("head")
    if title:
        head.element("title", title)
    html.element("body")
    return document


def makeroot(tagName: str = "", config: Optional[MarkupConfig] = None) -> Markup:
    """
    makeroot - create a root Markup. Usually an element but could be a
        fragment holding several top level nodes
    tagName: tag name for root element ("" for a fragment)
    config: configuration for this tree, None to follow the process wide
        defaults
    """
    return Markup(tagName, config=config)


def _stringify(value: Any) -> str:
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    return str(value)


class Markup:
    """
    A markup node. An element when it has a tag, otherwise a fragment
    (children only) or a text leaf (content).

    Unknown attribute names build child elements:
        node.span({"class": "x"}, "text") == node.element("span", {"class": "x"}, "text")
    Tags that collide with a method or attribute name (text, remove, id ...)
    must be added with element() or addElement().
    Every public name resolves, so a misspelt attribute (node.parnet) is a
    builder, hasattr() is always True, and dict(node) adds a <keys> child.

    Indexing works on attributes: node["k"], "k" in node, del node["k"].
    Iterating a node yields its children; use `child in node.children` to
    test membership of a child.
    """

    def __init__(
        self,
        tagName: str = "",
        attributes: Optional[Attributes] = None,
        content: Optional[str] = None,
        parent: Optional[Markup] = None,
        isvoid: Optional[bool] = None,
        config: Optional[MarkupConfig] = None,
    ):
        """
        tagName: type of this tag. If tagName is empty, opening/closing tags
            are not emitted
        attributes: a mapping or an iterable of (name, value) pairs
        content: text emitted by a tagless node (already escaped if needed)
        parent: parent node, this node is appended to its children
        isvoid: None to ask the configured void lookup. Void elements are
            rendered with a self closing tag and without their children
        config: configuration for the tree rooted here. Only used while
            this node is a root
        """
        self.tagName = tagName
        self.content = content
        self.parent: Optional[Markup] = None
        self.root: Markup = self
        self.config = config
        self.attributes: dict[str, Any] = {}
        self.children: List[Markup] = []

        if isvoid is None:
            lookup = parent.getconfig() if parent is not None else self.getconfig()
            isvoid = bool(tagName) and lookup.voidtag(tagName)
        self.isvoid = isvoid

        if attributes:
            self.setAttributes(attributes)
        if parent is not None:
            parent._attach(self)

    def __getattr__(self, name: str):
        if name.startswith("_"):
            raise AttributeError(name)

        def build(*content: Any) -> Markup:
            return self.element(name, *content)

        return build

    def __repr__(self) -> str:
        if self.tagName:
            return f"<Markup {self.tagName!r} children={len(self.children)}>"
        return f"<Markup fragment content={self.content!r} children={len(self.children)}>"

    def __iter__(self) -> Iterator[Markup]:
        return iter(self.children)

    def __call__(self) -> Optional[Markup]:
        """
        node() - return the parent, to continue a chain on the ancestor
        """
        return self.parent

    # configuration

    def getconfig(self, config: Optional[MarkupConfig] = None) -> MarkupConfig:
        """
        getconfig - return the configuration in effect for this node: the
            supplied config, else the root's config, else the process wide
            defaults
        """
        if config is not None:
            return config
        if self.root.config is not None:
            return self.root.config
        return getdefaults()

    # construction

    @classmethod
    def createElement(
        cls, tagName: str = "", *content: Any, config: Optional[MarkupConfig] = None
    ) -> Markup:
        """
        createElement - create a new root

        content: optional attribute mapping as first item, the rest is
            joined and added as text
        """
        root = cls(tagName, config=config)
        root._fill(content)
        return root

    def addElement(self, tag: Union[str, Markup] = "") -> Markup:
        """
        addElement - add a child to this node

        tag: tag name of a new child, or an existing Markup which is copied
            (with its children) and the copy added

        returns the child
        """
        if isinstance(tag, Markup):
            child = tag.cloneNode()
            self._attach(child)
            return child
        if isinstance(tag, str):
            return self.__class__(tag, parent=self)
        raise TypeError(f"Expected a tag name or Markup, not {type(tag).__name__}")

    appendChild = addElement

    def element(self, tagName: str, *content: Any) -> Markup:
        """
        element - add a child element with attributes and text

        content: if the first item is a mapping it is applied as attributes.
            Remaining items are converted to strings, joined and added as a
            text child

        returns the child
        """
        child = self.addElement(tagName)
        child._fill(content)
        return child

    def _fill(self, content: Tuple[Any, ...]) -> None:
        parts = list(content)
        if parts and isinstance(parts[0], Mapping):
            self.setAttributes(parts.pop(0))
        if parts:
            self.text("".join(_stringify(p) for p in parts))

    def _attach(self, child: Markup) -> None:
        if self.isvoid:
            log.debug("child of void element <%s> will not be rendered", self.tagName)
        self.children.append(child)
        child.parent = self
        child.config = None  # configuration belongs to the root
        child._setroot(self.root)

    def _setroot(self, root: Markup) -> None:
        self.root = root
        for c in self.children:
            c._setroot(root)

    def cloneNode(self) -> Markup:
        """
        cloneNode - return a detached deep copy of this node
        """
        clone = self.__class__(
            self.tagName, content=self.content, isvoid=self.isvoid, config=self.config
        )
        for name, value in self.attributes.items():
            clone.attributes[name] = list(value) if isinstance(value, (list, tuple)) else value
        for c in self.children:
            clone._attach(c.cloneNode())
        return clone

    def text(self, value: str) -> Markup:
        """
        text - create a text node and add it as a child of this element

        value: text, escaped now if escaping is enabled
        (A text node is simply a node with content but no tag or attributes)

        returns self
        """
        config = self.getconfig()
        if config.escape:
            value = escape(value, config.convention)
        self.__class__("", content=value, parent=self, isvoid=False)
        return self

    def doctype(self, text: str = "<!DOCTYPE html>") -> Markup:
        """
        doctype - add doctype (an unescaped text string)

        text: the full text of the doctype, defaults to the html5 doctype
        """
        self.__class__("", content=text, parent=self, isvoid=False)
        return self

    def comment(self, comment: str) -> Markup:
        """
        comment - add a comment as a child of this element

        comment - comment string (without delimiters). Not escaped
        """
        self.__class__("", content="<!-- " + comment + " -->", parent=self, isvoid=False)
        return self

    # attributes

    def setAttribute(self, name: str, value: Any) -> Markup:
        """
        setAttribute - set (create or overwrite) an attribute of this node
        name: name of attribute
        value: True/False, a string (or anything str() accepts), or a list
            of those (space separated on output). None removes the attribute

        returns self
        """
        if not isinstance(name, str) or not name:
            raise ValueError(f"Invalid attribute name: {name!r}")
        if value is None:
            self.attributes.pop(name, None)
        else:
            self.attributes[name] = value
        return self

    def setAttributes(self, attributes: Attributes) -> Markup:
        """
        setAttributes - set several attributes
        attributes: a mapping or an iterable of (name, value) pairs
        """
        items = attributes.items() if isinstance(attributes, Mapping) else attributes
        for name, value in items:
            self.setAttribute(name, value)
        return self

    def attr(self, attribute: Union[str, Attributes], value: Any = None) -> Markup:
        """
        attr - setAttributes for a mapping, setAttribute for a name
        """
        if isinstance(attribute, str):
            return self.setAttribute(attribute, value)
        return self.setAttributes(attribute)

    set = attr

    def getAttribute(self, name: str) -> Any:
        """
        getAttribute - return the value of an attribute if it exists
        """
        return self.attributes.get(name, None)

    def hasAttribute(self, name: str) -> bool:
        return name in self.attributes

    def removeAttribute(self, name: str) -> Markup:
        """
        removeAttribute - remove an attribute from this node if it exists
        """
        self.attributes.pop(name, None)
        return self

    def __getitem__(self, name: str) -> Any:
        return self.getAttribute(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.setAttribute(name, value)

    def __delitem__(self, name: str) -> None:
        self.removeAttribute(name)

    def __contains__(self, name: str) -> bool:
        # attribute names, not children
        return self.hasAttribute(name)

    @property
    def id(self) -> Optional[str]:
        """
        id - return the id of this element or None if no id
        """
        return self.getAttribute("id")

    @id.setter
    def id(self, id: Optional[str]) -> None:
        self.setAttribute("id", id)

    def _classes(self) -> List[str]:
        current = self.attributes.get("class")
        if current is None or isinstance(current, bool):
            return []
        if isinstance(current, (list, tuple)):
            return [_stringify(c) for c in current]
        return _stringify(current).split()

    def addClass(self, *names: str) -> Markup:
        """
        addClass - add class names not already present. The class attribute
            becomes a list
        """
        classes = self._classes()
        for name in names:
            if name not in classes:
                classes.append(name)
        return self.setAttribute("class", classes)

    def removeClass(self, *names: str) -> Markup:
        """
        removeClass - remove class names, and the class attribute once empty
        """
        classes = [c for c in self._classes() if c not in names]
        return self.setAttribute("class", classes or None)

    # navigation

    def _siblingindex(self) -> Optional[int]:
        if self.parent is None:
            return None
        for idx, c in enumerate(self.parent.children):
            if c is self:
                return idx
        return None

    def firstSibling(self) -> Optional[Markup]:
        """
        firstSibling - first child of the parent (may be self), None if no
            parent
        """
        if self.parent is None or not self.parent.children:
            return None
        return self.parent.children[0]

    def lastSibling(self) -> Optional[Markup]:
        """
        lastSibling - last child of the parent (may be self), None if no
            parent
        """
        if self.parent is None or not self.parent.children:
            return None
        return self.parent.children[-1]

    def previousSibling(self) -> Markup:
        """
        previousSibling - the node before this one in the parent, or self if
            this is the first node or there is no parent
        """
        idx = self._siblingindex()
        if not idx:
            return self
        return self.parent.children[idx - 1]

    def nextSibling(self) -> Optional[Markup]:
        """
        nextSibling - the node after this one in the parent, None if this is
            the last node or there is no parent
        """
        idx = self._siblingindex()
        if idx is None or idx + 1 >= len(self.parent.children):
            return None
        return self.parent.children[idx + 1]

    def removeChild(self, child: Markup) -> Markup:
        """
        removeChild - remove the supplied child from this node's children
        child: node to remove, must be a child of this node or ValueError
            will be raised

        returns child, now a detached root
        """
        idx = child._siblingindex() if child.parent is self else None
        if idx is None:
            raise ValueError("child does not exist in this parent Markup")
        self._detach(idx)
        return child

    def _detach(self, idx: int) -> None:
        child = self.children.pop(idx)
        child.parent = None
        child._setroot(child)

    def remove(self) -> Optional[Markup]:
        """
        remove - remove this node (and its children) from its parent

        returns the parent, or None if there is no parent or this node is
            not one of its children
        """
        parent = self.parent
        if parent is None:
            return None
        idx = self._siblingindex()
        if idx is None:
            log.debug("%r not found in the children of its parent", self)
            return None
        parent._detach(idx)
        return parent

    # search

    def getElementsByTagName(self, tagName: str) -> List[Markup]:
        """
        getElementsByTagName - return a list of elements from this (sub)tree
            with the supplied tagName. Exhaustive search, depth first
        """
        result: List[Markup] = []

        if self.tagName == tagName:
            result.append(self)

        for c in self.children:
            result.extend(c.getElementsByTagName(tagName))

        return result

    def getElementByTagName(self, tagName: str) -> Optional[Markup]:
        """
        getElementByTagName - return the first element from this (sub)tree
            with the supplied tagName, depth first
        """
        if self.tagName == tagName:
            return self

        for c in self.children:
            e = c.getElementByTagName(tagName)
            if e is not None:
                return e

        return None

    # rendering

    def _attributestring(self, config: MarkupConfig) -> str:
        xml = config.convention.isxml
        dest: List[str] = []
        for name, value in self.attributes.items():
            if value is None or (value is False and not xml):
                continue
            dest.append(" " + name)
            if value is True:
                if not xml:
                    continue  # bare boolean attribute
                value = name
            values = value if isinstance(value, (list, tuple)) else [value]
            encoded = []
            for v in values:
                s = _stringify(v)
                encoded.append(escape(s, config.convention) if config.escape else s)
            dest.append('="' + " ".join(encoded) + '"')
        return "".join(dest)

    def renderlist(self, config: Optional[MarkupConfig] = None) -> List[str]:
        """
        renderlist - render this node and recursively, all child nodes

        config: overrides the tree's configuration

        returns a list of strings that can be joined to create the rendered
        markup (or can be appended to parent's list)
        """
        config = self.getconfig(config)
        dest: List[str] = []
        if self.tagName:
            dest.append("<" + self.tagName)
            dest.append(self._attributestring(config))

            if self.isvoid:
                dest.append("/>")
                return dest

            dest.append(">")
        elif self.content:
            dest.append(self.content)

        for c in self.children:
            dest.extend(c.renderlist(config))

        if self.tagName:
            dest.append(f"</{self.tagName}>")

        return dest

    def render(self, config: Optional[MarkupConfig] = None) -> str:
        """
        render - render the whole tree this node belongs to
        """
        return "".join(self.root.renderlist(config))

    def __str__(self) -> str:
        return self.render()

    @property
    def outerHTML(self) -> str:
        """
        outerHTML - this node and its children as markup
        """
        return "".join(self.renderlist())

    @property
    def innerHTML(self) -> str:
        """
        innerHTML - the children of this node as markup
        """
        config = self.getconfig()
        ret: List[str] = []
        for c in self.children:
            ret.extend(c.renderlist(config))
        return "".join(ret)


class ElementFactory:
    """
    Create roots by tag name:
        elements.div({"class": "box"}, "text") == Markup.createElement("div", {"class": "box"}, "text")
    """

    def __init__(self, config: Optional[MarkupConfig] = None):
        self.config = config

    def __getattr__(self, name: str):
        if name.startswith("_"):
            raise AttributeError(name)

        def build(*content: Any) -> Markup:
            return Markup.createElement(name, *content, config=self.config)

        return build


elements = ElementFactory()
