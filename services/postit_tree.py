"""
Postit Tree
===========

Structural edits of the postit forest: insert under a parent, update by id,
delete by id (the whole subtree goes with the node).

All searches are pre-order and keep sibling order; only the first match is
touched. Forests are never mutated: the path from the root to the match is
rebuilt and untouched subtrees are shared with the input.

Traversal keeps an explicit stack, so forest depth is not limited by the
interpreter recursion limit.

@author lycosa9527
@made_by MindSpring Team
"""

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Set, Tuple, Union

from models.postits import Coordinate, Postit, PostitPatch
from services.exceptions import DuplicatePostitIdError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Found:
    """The target node was found; forest is the rebuilt forest"""
    forest: List[Postit]
    node: Postit

    found = True


@dataclass(frozen=True)
class NotFound:
    """No node matched; forest is the input forest, unchanged"""
    forest: List[Postit]

    found = False


TreeResult = Union[Found, NotFound]


def _with_children(postit: Postit, children: List[Postit]) -> Postit:
    return postit.model_copy(update={"children": children})


def _find_path(forest: Sequence[Postit], postit_id: str) -> Optional[Tuple[int, ...]]:
    """Index path of the first pre-order match, or None."""
    stack = [((index,), postit) for index, postit in reversed(list(enumerate(forest)))]
    while stack:
        path, postit = stack.pop()
        if postit.id == postit_id:
            return path
        stack.extend(
            ((*path, index), child)
            for index, child in reversed(list(enumerate(postit.children)))
        )
    return None


def _rebuild(forest: Sequence[Postit], path: Tuple[int, ...], replacement: Optional[Postit]) -> List[Postit]:
    """
    Copy of forest with the node at path replaced (or removed when replacement
    is None). Ancestors along the path are rebuilt bottom-up; everything else
    is shared with the input.
    """
    ancestors = []
    siblings = forest
    for index in path[:-1]:
        ancestors.append(siblings[index])
        siblings = siblings[index].children

    updated = list(siblings)
    if replacement is None:
        del updated[path[-1]]
    else:
        updated[path[-1]] = replacement

    for depth in range(len(ancestors) - 1, -1, -1):
        parent_siblings = forest if depth == 0 else ancestors[depth - 1].children
        rebuilt = list(parent_siblings)
        rebuilt[path[depth]] = _with_children(ancestors[depth], updated)
        updated = rebuilt
    return updated


def _node_at(forest: Sequence[Postit], path: Tuple[int, ...]) -> Postit:
    siblings = forest
    for index in path[:-1]:
        siblings = siblings[index].children
    return siblings[path[-1]]


def insert_under_parent(forest: Sequence[Postit], parent_id: str, new_node: Postit) -> TreeResult:
    """
    Append new_node to the children of the postit with id parent_id.

    Returns:
        Found(forest, new_node), or NotFound if no postit has that id
    """
    path = _find_path(forest, parent_id)
    if path is None:
        return NotFound(list(forest))

    parent = _node_at(forest, path)
    return Found(_rebuild(forest, path, _with_children(parent, [*parent.children, new_node])), new_node)


def update_by_id(forest: Sequence[Postit], postit_id: str, patch: PostitPatch) -> TreeResult:
    """
    Replace content and tags of the postit with id postit_id.

    Id, dimension, section, coordinates and children are kept as they are.

    Returns:
        Found(forest, updated_node), or NotFound if no postit has that id
    """
    path = _find_path(forest, postit_id)
    if path is None:
        return NotFound(list(forest))

    updated_node = _node_at(forest, path).model_copy(update={
        "content": patch.content,
        "tags": list(patch.tags),
    })
    return Found(_rebuild(forest, path, updated_node), updated_node)


def delete_by_id(forest: Sequence[Postit], postit_id: str) -> TreeResult:
    """
    Remove the postit with id postit_id together with its whole subtree.

    Each sibling list is checked before descending into its members'
    children; children are never promoted into the removed node's place.

    Returns:
        Found(forest, removed_node), or NotFound if no postit has that id
    """
    stack: List[Tuple[Tuple[int, ...], Sequence[Postit]]] = [((), forest)]
    while stack:
        parent_path, siblings = stack.pop()
        for index, postit in enumerate(siblings):
            if postit.id == postit_id:
                return Found(_rebuild(forest, (*parent_path, index), None), postit)
        stack.extend(
            ((*parent_path, index), postit.children)
            for index, postit in reversed(list(enumerate(siblings)))
        )

    return NotFound(list(forest))


# ============================================================================
# TRAVERSAL HELPERS
# ============================================================================

def iter_postits(forest: Sequence[Postit]) -> Iterator[Postit]:
    """Yield every postit of the forest in pre-order."""
    stack = list(reversed(forest))
    while stack:
        postit = stack.pop()
        yield postit
        stack.extend(reversed(postit.children))


def find_by_id(forest: Sequence[Postit], postit_id: str) -> Optional[Postit]:
    """First postit (pre-order) with the given id, or None."""
    return next((postit for postit in iter_postits(forest) if postit.id == postit_id), None)


def collect_subtree_ids(postit: Postit) -> List[str]:
    """
    Ids removed when deleting this postit: itself plus every descendant.

    Example hierarchy:
    Postit A
    ├── Postit B
    │   ├── Postit D
    │   └── Postit E
    └── Postit C
        └── Postit F

    collect_subtree_ids(A) returns ["a", "b", "d", "e", "c", "f"]
    """
    return [node.id for node in iter_postits([postit])]


def count_postits(forest: Sequence[Postit]) -> int:
    return sum(1 for _ in iter_postits(forest))


def all_coordinates(forest: Sequence[Postit]) -> List[Coordinate]:
    """Coordinates of every placed postit in the forest, pre-order."""
    return [postit.coordinates for postit in iter_postits(forest) if postit.coordinates is not None]


def find_duplicate_ids(forest: Sequence[Postit]) -> Set[str]:
    counts = Counter(postit.id for postit in iter_postits(forest))
    return {postit_id for postit_id, count in counts.items() if count > 1}


def assert_unique_ids(forest: Sequence[Postit]) -> None:
    """
    Fail loudly when an id is reachable more than once.

    Raises:
        DuplicatePostitIdError: With the offending ids
    """
    duplicates = find_duplicate_ids(forest)
    if duplicates:
        logger.error(f"[PostitTree] Duplicate postit ids in forest: {sorted(duplicates)}")
        raise DuplicatePostitIdError(duplicates)
