"""Label uniquifier issuing in-page anchor identifiers.

Labels are normalized with Python-Markdown's table-of-contents ``slugify`` so
that anchors produced here agree with the ids Markdown assigns to rendered
headings. Repeated identifiers receive ``-1``, ``-2``, ... suffixes.

Example
-------
>>> from docroute.router.slugger import Slugger
>>> slugger = Slugger()
>>> slugger.slug("Example"), slugger.slug("Example")
('example', 'example-1')
"""

from __future__ import annotations

import typing as typ

from markdown.extensions.toc import slugify

from docroute._constants import FALLBACK_ANCHOR

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class Slugger:
    """Turn labels into identifiers unique within this instance."""

    def __init__(self, reserved: cabc.Iterable[str] = ()) -> None:
        self._seen: dict[str, int] = {}
        for identifier in reserved:
            self.slug(identifier)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and identifier.casefold() in self._seen

    def slug(self, label: str) -> str:
        """Return a fresh identifier for ``label`` and remember it.

        Identifiers are tracked case-folded, so ``"straße"`` and ``"strasse"``
        count as the same anchor.
        """
        base = self.serialize(label)
        key = base.casefold()
        candidate = base
        count = self._seen.get(key, 0)
        if key in self._seen:
            while candidate.casefold() in self._seen:
                count += 1
                candidate = f"{base}-{count}"
        self._seen[key] = count
        self._seen[candidate.casefold()] = 0
        return candidate

    @staticmethod
    def serialize(label: str) -> str:
        """Normalize ``label`` without registering it."""
        return slugify(label, "-", unicode=True) or FALLBACK_ANCHOR


__all__ = ["Slugger"]
