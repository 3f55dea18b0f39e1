"""Application settings, read from the environment once at startup."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import quote

PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/300x300/ff6b6b/ffffff?text={label}"


@dataclass(frozen=True)
class Settings:
    """Immutable application settings.

    Built by ``Settings.from_env()`` when the app starts and handed to the
    components that need it. Persistence settings are not here: protean reads
    them from ``domain.toml``.
    """

    s3_bucket: str | None = None
    s3_region: str | None = None
    port: int = 3000
    seed_catalogue: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            s3_bucket=env.get("S3_BUCKET") or None,
            s3_region=env.get("S3_REGION") or None,
            port=int(env.get("PORT", "3000")),
            seed_catalogue=env.get("SEED_CATALOGUE", "true").lower() not in ("0", "false", "no"),
        )

    @property
    def object_storage_enabled(self) -> bool:
        return bool(self.s3_bucket and self.s3_region)

    def image_url(self, image: str, label: str) -> str:
        """Public URL for a catalogue image, or a placeholder when no bucket is set."""
        if self.object_storage_enabled:
            return f"https://{self.s3_bucket}.s3.{self.s3_region}.amazonaws.com/{image}"
        return PLACEHOLDER_IMAGE_URL.format(label=quote(label))
