"""Owner mapping transformation: who holds the rights to which posts."""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..config import OWNER_MAPPING_MAP
from ..config.settings import house_owner
from .base import BaseTransformer
from .utils import to_number

logger = logging.getLogger(__name__)


def _clean_key(value: Any) -> Optional[Any]:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


class OwnerMappingTransform(BaseTransformer):
    """Transform owner mapping rows into artist assignments."""

    def __init__(self, house: Optional[str] = None):
        self.house = house if house is not None else house_owner()

    @property
    def get_input_rename_map(self) -> Mapping[str, str]:
        return OWNER_MAPPING_MAP

    @property
    def metric_fields(self) -> List[str]:
        return ["royalty_rate"]

    def _apply_transform(self, row: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "artist_name": _clean_key(row.get("artist_name")),
            "royalty_rate": to_number(row.get("royalty_rate")) or 0.0,
            "asset_tag": _clean_key(row.get("asset_tag")),
            "post_id": _clean_key(row.get("post_id")),
        }

    def assignments(self, rows: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
        """Artist assignments, skipping blank artists and the house owner."""
        result = []
        skipped = 0
        for row in self.transform_all(rows):
            name = row["artist_name"]
            if not name or name == self.house:
                skipped += 1
                continue
            result.append(row)
        if skipped:
            logger.info(f"[owner-mapping] skipped {skipped} rows without an artist assignment")
        return result


def assign_artists(
    aggregated: Dict[Any, Dict[str, Any]],
    assignments: Iterable[Mapping[str, Any]],
) -> int:
    """Attach artist name and royalty rate to matching post aggregates.

    An assignment matches posts sharing its asset tag and the post with its
    post id. Later assignments win. Returns how many aggregates were updated.
    """
    by_tag: Dict[str, List[Dict[str, Any]]] = {}
    for aggregate in aggregated.values():
        tag = aggregate.get("asset_tag")
        if tag is not None:
            by_tag.setdefault(str(tag), []).append(aggregate)
    by_id = {str(post_id): aggregate for post_id, aggregate in aggregated.items()}

    touched = set()
    for assignment in assignments:
        targets = []
        if assignment.get("asset_tag") is not None:
            targets.extend(by_tag.get(str(assignment["asset_tag"]), []))
        if assignment.get("post_id") is not None:
            target = by_id.get(str(assignment["post_id"]))
            if target is not None:
                targets.append(target)
        for aggregate in targets:
            aggregate["artist_name"] = assignment["artist_name"]
            aggregate["royalty_rate"] = assignment["royalty_rate"]
            touched.add(id(aggregate))
    return len(touched)
