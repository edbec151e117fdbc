"""
Viewer configuration read from environment variables.

A .env file is loaded by the server entry point before this is consulted.
"""

import logging
import os
from dataclasses import dataclass

from .constants import (
    DEFAULT_DATASET,
    DEFAULT_ZOOM,
    TRUTHY_VALUES,
    EnvVar,
    ErrorMessages,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewerConfig:
    """Settings for Earth Engine access and the viewer defaults."""

    ee_project: str | None = None
    ee_service_account: str | None = None
    ee_key_file: str | None = None
    region_asset: str | None = None
    default_dataset: str = DEFAULT_DATASET
    strict_ids: bool = False
    zoom: int = DEFAULT_ZOOM

    @property
    def uses_service_account(self) -> bool:
        return bool(self.ee_service_account and self.ee_key_file)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "ViewerConfig":
        """Build a config from the process environment (or a given mapping)."""
        env = os.environ if environ is None else environ

        raw_zoom = env.get(EnvVar.ZOOM)
        zoom = DEFAULT_ZOOM
        if raw_zoom:
            try:
                zoom = int(raw_zoom)
            except ValueError:
                raise ValueError(ErrorMessages.INVALID_ZOOM.format(raw_zoom)) from None
            if not 0 <= zoom <= 24:
                raise ValueError(ErrorMessages.INVALID_ZOOM.format(raw_zoom))

        service_account = env.get(EnvVar.EE_SERVICE_ACCOUNT) or None
        key_file = env.get(EnvVar.EE_KEY_FILE) or None
        if bool(service_account) != bool(key_file):
            logger.warning(
                f"Service account auth needs both {EnvVar.EE_SERVICE_ACCOUNT} and "
                f"{EnvVar.EE_KEY_FILE}. Falling back to default credentials."
            )

        return cls(
            ee_project=env.get(EnvVar.EE_PROJECT) or None,
            ee_service_account=service_account,
            ee_key_file=key_file,
            region_asset=env.get(EnvVar.REGION_ASSET) or None,
            default_dataset=env.get(EnvVar.DEFAULT_DATASET) or DEFAULT_DATASET,
            strict_ids=env.get(EnvVar.STRICT_IDS, "").strip().lower() in TRUTHY_VALUES,
            zoom=zoom,
        )
