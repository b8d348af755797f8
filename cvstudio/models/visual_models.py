"""Visual tree produced by the preview renderer."""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple
from pydantic import BaseModel, Field, field_validator


class VisualNode(BaseModel):
    """A node of the rendered CV document.

    ``kind`` names the visual element (document, column, section, text,
    image, ...), ``role`` identifies what the node shows (``skills``,
    ``fullName``, ...) and ``style`` carries CSS declarations as a
    read-only mapping.
    """

    kind: str
    role: Optional[str] = None
    text: Optional[str] = None
    src: Optional[str] = None
    style: Mapping[str, str] = Field(default_factory=lambda: MappingProxyType({}))
    children: Tuple["VisualNode", ...] = ()

    class Config:
        frozen = True

    @field_validator("style")
    @classmethod
    def freeze_style(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    def find(self, role: str) -> Optional["VisualNode"]:
        """Return the first node (depth-first) with the given role."""
        if self.role == role:
            return self
        for child in self.children:
            found = child.find(role)
            if found is not None:
                return found
        return None

    def iter_nodes(self):
        """Yield this node and all of its descendants depth-first."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def texts(self) -> Tuple[str, ...]:
        """All text carried by this subtree in document order."""
        return tuple(node.text for node in self.iter_nodes() if node.text is not None)


VisualNode.model_rebuild()
