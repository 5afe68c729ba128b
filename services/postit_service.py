"""
Postit Service
==============

Postit lifecycle over a mandala document value:
- Batch generation: drafts -> colored tags -> placed postits
- Create one postit (top level or under a parent)
- Update content/tags of one postit
- Delete one postit and its subtree

Nothing is persisted here: each operation returns a new MandalaDocument for
the caller to store.

@author lycosa9527
@made_by MindSpring Team
"""

import logging
import random
from typing import List, Optional, Sequence, Tuple

from config.settings import config
from models.common import Tag
from models.mandala import MandalaConfiguration, MandalaDocument
from models.postits import Postit, PostitDraft, PostitPatch, generate_postit_id
from services.exceptions import PostitNotFoundError
from services.placement_engine import BatchPlacement, PlacementEngine, placement_engine
from services.postit_tree import (
    all_coordinates,
    assert_unique_ids,
    collect_subtree_ids,
    delete_by_id,
    insert_under_parent,
    update_by_id,
)

logger = logging.getLogger(__name__)


def map_tags_with_colors(tag_names: Optional[Sequence[str]], project_tags: Sequence[Tag]) -> List[Tag]:
    """
    Resolve tag names against the project palette.

    Unknown names are dropped; order follows tag_names.
    """
    if not tag_names:
        return []

    palette = {}
    for tag in project_tags:
        palette.setdefault(tag.name, tag)
    return [palette[name] for name in tag_names if name in palette]


class PostitService:
    """
    Orchestrates placement and tree edits for single postits and batches.
    """

    def __init__(self, engine: Optional[PlacementEngine] = None):
        self.engine = engine or placement_engine

    def _check_forest(self, forest: Sequence[Postit]) -> None:
        if config.VALIDATE_UNIQUE_IDS:
            assert_unique_ids(forest)

    def generate_postits(
        self,
        configuration: MandalaConfiguration,
        drafts: Sequence[PostitDraft],
        project_tags: Sequence[Tag] = (),
        rng: Optional[random.Random] = None,
    ) -> BatchPlacement:
        """
        Turn generated drafts into placed postits.

        Each draft gets a fresh id and its tag names resolved to colored tags.

        Raises:
            NoValidPostitsError: If no draft has a configured label
        """
        postits = [
            Postit(
                id=generate_postit_id(),
                content=draft.content,
                dimension=draft.dimension,
                section=draft.section,
                tags=map_tags_with_colors(draft.tags, project_tags),
            )
            for draft in drafts
        ]
        logger.debug(f"[PostitService] Placing {len(postits)} generated postits")
        return self.engine.place_batch(
            postits,
            configuration.dimension_names,
            configuration.scales,
            rng=rng,
        )

    def create_postit(
        self,
        document: MandalaDocument,
        postit: Postit,
        parent_id: Optional[str] = None,
        rng: Optional[random.Random] = None,
    ) -> Tuple[MandalaDocument, Postit]:
        """
        Add one postit to the mandala.

        The postit receives a fresh id. Its coordinates are the explicit ones
        it carries, or are computed against every postit already placed.

        Args:
            document: Current mandala document
            postit: Postit to add (children are kept as given)
            parent_id: Parent postit id; None adds at top level

        Returns:
            (new_document, created_postit)

        Raises:
            PostitNotFoundError: If parent_id is not in the forest
        """
        configuration = document.configuration
        coordinates = self.engine.place_single(
            postit,
            configuration.dimension_names,
            configuration.scales,
            all_coordinates(document.postits),
            rng=rng,
        )
        created = postit.model_copy(update={"id": generate_postit_id(), "coordinates": coordinates})

        if parent_id is None:
            forest = [*document.postits, created]
        else:
            result = insert_under_parent(document.postits, parent_id, created)
            if not result.found:
                raise PostitNotFoundError(parent_id, f"Parent postit not found: {parent_id}")
            forest = result.forest

        self._check_forest(forest)
        logger.info(f"[PostitService] Created postit {created.id} (parent: {parent_id or '-'})")
        return document.model_copy(update={"postits": forest}), created

    def update_postit(
        self,
        document: MandalaDocument,
        postit_id: str,
        patch: PostitPatch,
    ) -> Tuple[MandalaDocument, Postit]:
        """
        Replace content and tags of one postit.

        Raises:
            PostitNotFoundError: If postit_id is not in the forest
        """
        result = update_by_id(document.postits, postit_id, patch)
        if not result.found:
            raise PostitNotFoundError(postit_id)

        self._check_forest(result.forest)
        logger.info(f"[PostitService] Updated postit {postit_id}")
        return document.model_copy(update={"postits": result.forest}), result.node

    def delete_postit(
        self,
        document: MandalaDocument,
        postit_id: str,
    ) -> Tuple[MandalaDocument, List[str]]:
        """
        Delete one postit and all of its descendants.

        Returns:
            (new_document, removed_ids) with removed ids in pre-order

        Raises:
            PostitNotFoundError: If postit_id is not in the forest
        """
        result = delete_by_id(document.postits, postit_id)
        if not result.found:
            raise PostitNotFoundError(postit_id)

        self._check_forest(result.forest)
        removed_ids = collect_subtree_ids(result.node)
        logger.info(f"[PostitService] Deleted postit {postit_id} ({len(removed_ids)} postits removed)")
        return document.model_copy(update={"postits": result.forest}), removed_ids


# Global postit service instance
postit_service = PostitService()
