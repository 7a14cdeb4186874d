"""Tags: the desktops that workspaces display."""

from __future__ import annotations

import logging
from dataclasses import dataclass

log = logging.getLogger(__name__)

HIGHEST_TAG_ID = 2**64 - 1
"""Id of the first hidden tag; later hidden tags count down from here."""


@dataclass
class Tag:
    """A desktop shown on at most one workspace at a time.

    Tags are identified by ``id``; ``label`` is for display only.
    Hidden tags are internal and never shown on a workspace.
    """

    id: int = 0
    label: str = ""
    hidden: bool = False


class Tags:
    """All known tags: normal ones numbered from 1, hidden ones from the top down.

    Normal tags are kept in id order without gaps, so the largest normal id
    equals the number of normal tags. Hidden tags (such as the scratchpad
    tag) take ids from ``HIGHEST_TAG_ID`` downwards and have unique labels.
    """

    def __init__(self) -> None:
        self._normal: list[Tag] = []
        self._hidden: list[Tag] = []

    def __repr__(self) -> str:
        return f"Tags(normal={self._normal!r}, hidden={self._hidden!r})"

    def add_new(self, label: str) -> int:
        """Append a normal tag with ``label`` and return its id."""
        tag = Tag(id=len(self._normal) + 1, label=label)
        self._normal.append(tag)
        return tag.id

    def add_new_unlabeled(self) -> int:
        """Append a normal tag labelled with its own id and return the id."""
        return self.add_new(str(len(self._normal) + 1))

    def add_new_hidden(self, label: str) -> int | None:
        """Append a hidden tag and return its id.

        Returns None, creating nothing, if a hidden tag with this label exists.
        """
        if self.get_hidden_by_label(label) is not None:
            log.error(
                "Tried creating a hidden tag with label %s, "
                "but a hidden tag with the same label already exists",
                label,
            )
            return None
        tag = Tag(id=HIGHEST_TAG_ID - len(self._hidden), label=label, hidden=True)
        self._hidden.append(tag)
        return tag.id

    def normal(self) -> list[Tag]:
        """The normal tags, in id order."""
        return list(self._normal)

    def all(self) -> list[Tag]:
        """All tags; the hidden ones come last."""
        return [*self._normal, *self._hidden]

    def get(self, tag_id: int) -> Tag | None:
        """The normal or hidden tag with ``tag_id``, or None."""
        if 1 <= tag_id <= len(self._normal):
            return self._normal[tag_id - 1]
        return next((tag for tag in self._hidden if tag.id == tag_id), None)

    def get_hidden_by_label(self, label: str) -> Tag | None:
        """The hidden tag labelled ``label``, or None."""
        return next((tag for tag in self._hidden if tag.label == label), None)

    def len_normal(self) -> int:
        """Number of normal tags."""
        return len(self._normal)