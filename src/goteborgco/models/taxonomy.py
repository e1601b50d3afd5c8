"""Taxonomies and their terms, flat or arranged as a parent/child tree."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from pydantic import Field

from goteborgco.models.base import Entity

logger = logging.getLogger(__name__)


class Taxonomy(Entity):
    """A taxonomy type (e.g. categories, areas) and the content types using it."""

    name: str
    description: str | None = None
    value: str
    types: tuple[str, ...] = ()

    def get_types(self) -> list[str]:
        return list(self.types)

    def is_available_for(self, type: str) -> bool:
        return type in self.types


class TaxonomyTerm(Entity):
    """A term within a taxonomy.

    ``children`` is only populated for terms produced by a hierarchical
    listing; each child is a separate copy owned by its parent.
    """

    id: int
    name: str = ""
    count: int = 0
    description: str | None = None
    parent: int | None = None
    children: tuple[TaxonomyTerm, ...] = Field(default_factory=tuple)

    def has_parent(self) -> bool:
        return self.parent is not None

    def get_parent_id(self) -> int | None:
        return self.parent

    def has_children(self) -> bool:
        return len(self.children) > 0

    def get_children(self) -> list[TaxonomyTerm]:
        return list(self.children)

    def get_child_count(self) -> int:
        return len(self.children)

    def get_all_descendants(self) -> list[TaxonomyTerm]:
        """Return children, grandchildren and so on, depth first."""
        descendants: list[TaxonomyTerm] = []
        stack = list(self.children)
        while stack:
            current = stack.pop()
            descendants.append(current)
            stack.extend(current.children)
        return descendants


class TaxonomyTree:
    """Parent/child index over a flat list of terms.

    Terms are stored once, keyed by id, with child and root id lists kept
    alongside. A term whose declared parent is not part of the input is
    promoted to a root and reported by :meth:`orphans`. When the same id
    appears more than once, the last record wins but keeps the position of
    the first.
    """

    def __init__(self, terms: Iterable[TaxonomyTerm]) -> None:
        self._terms: dict[int, TaxonomyTerm] = {}
        for term in terms:
            self._terms[term.id] = term

        self._children: dict[int, list[int]] = {term_id: [] for term_id in self._terms}
        self._roots: list[int] = []
        self._orphans: list[int] = []
        for term_id, term in self._terms.items():
            parent = term.parent
            if parent is not None and parent in self._terms:
                self._children[parent].append(term_id)
                continue
            self._roots.append(term_id)
            # WordPress reports top-level terms with parent 0.
            if parent not in (None, 0):
                self._orphans.append(term_id)

        if self._orphans:
            logger.warning("Promoted %d taxonomy terms with unknown parents to roots", len(self._orphans))

    def __len__(self) -> int:
        return len(self._terms)

    def __contains__(self, term_id: object) -> bool:
        return term_id in self._terms

    def __iter__(self) -> Iterator[TaxonomyTerm]:
        return iter(self._terms.values())

    def get(self, term_id: int) -> TaxonomyTerm | None:
        return self._terms.get(term_id)

    def root_ids(self) -> list[int]:
        return list(self._roots)

    def children_of(self, term_id: int) -> list[TaxonomyTerm]:
        return [self._terms[child_id] for child_id in self._children.get(term_id, [])]

    def parent_of(self, term_id: int) -> TaxonomyTerm | None:
        term = self._terms.get(term_id)
        if term is None or term.parent is None:
            return None
        return self._terms.get(term.parent)

    def orphans(self) -> list[TaxonomyTerm]:
        """Return terms whose declared parent is missing from the input."""
        return [self._terms[term_id] for term_id in self._orphans]

    def roots(self) -> list[TaxonomyTerm]:
        """Materialize root terms with children nested to any depth.

        Terms caught in a parent cycle are never reachable from a root and
        are left out.
        """
        return [self._materialize(term_id) for term_id in self._roots]

    def _materialize(self, term_id: int) -> TaxonomyTerm:
        children = tuple(self._materialize(child_id) for child_id in self._children[term_id])
        return self._terms[term_id].model_copy(update={"children": children})
