"""
Dataset registry: table-driven lookup from dataset id to descriptor.

Descriptors are built once from DEM_DATASETS and never mutated.
"""

import logging

from ..constants import DEFAULT_DATASET, DEM_DATASETS, ErrorMessages
from ..models.descriptors import DatasetDescriptor, VisualizationParams

logger = logging.getLogger(__name__)


def _build_descriptor(entry: dict) -> DatasetDescriptor:
    vis = entry["visualization"]
    return DatasetDescriptor(
        id=entry["id"],
        label=entry["label"],
        asset_id=entry["asset_id"],
        source_kind=entry["source_kind"],
        band=entry["band"],
        resolution_m=entry["resolution_m"],
        period=entry["period"],
        native_projection=entry["native_projection"],
        visualization=VisualizationParams(
            min=vis["min"], max=vis["max"], palette=tuple(vis["palette"])
        ),
    )


class DatasetRegistry:
    """Resolves dataset ids to descriptors.

    Unknown ids resolve to the default (SRTM90_V4) descriptor unless the
    registry is strict, in which case they raise ValueError.
    """

    def __init__(
        self,
        datasets: dict[str, dict] | None = None,
        default_id: str = DEFAULT_DATASET,
        strict: bool = False,
    ) -> None:
        table = DEM_DATASETS if datasets is None else datasets
        self._descriptors: dict[str, DatasetDescriptor] = {
            key: _build_descriptor(entry) for key, entry in table.items()
        }
        if default_id not in self._descriptors:
            raise ValueError(ErrorMessages.UNKNOWN_DATASET.format(default_id, self._known()))
        self.default_id = default_id
        self.strict = strict

    def _known(self) -> str:
        return ", ".join(self._descriptors)

    @property
    def ids(self) -> list[str]:
        return list(self._descriptors)

    @property
    def first_id(self) -> str:
        """Id selected at startup."""
        return next(iter(self._descriptors))

    def is_known(self, dataset_id: str) -> bool:
        return dataset_id in self._descriptors

    def resolve(self, dataset_id: str) -> DatasetDescriptor:
        """Return the descriptor for a dataset id."""
        descriptor = self._descriptors.get(dataset_id)
        if descriptor is not None:
            return descriptor
        if self.strict:
            raise ValueError(ErrorMessages.UNKNOWN_DATASET.format(dataset_id, self._known()))
        logger.warning(f"Unknown DEM dataset '{dataset_id}', using {self.default_id}")
        return self._descriptors[self.default_id]

    def options(self) -> list[tuple[str, str]]:
        """(label, id) pairs for the selection control, in table order."""
        return [(d.label, d.id) for d in self._descriptors.values()]

    def list_datasets(self) -> list[dict]:
        """List all datasets as summary dicts."""
        return [
            {
                "id": d.id,
                "label": d.label,
                "resolution_m": d.resolution_m,
                "source_kind": d.source_kind,
                "band": d.band,
            }
            for d in self._descriptors.values()
        ]

    def describe_dataset(self, dataset_id: str) -> dict:
        """Full metadata for a dataset. Unknown ids always raise."""
        if dataset_id not in self._descriptors:
            raise ValueError(ErrorMessages.UNKNOWN_DATASET.format(dataset_id, self._known()))
        return self._descriptors[dataset_id].model_dump()
