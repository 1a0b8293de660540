"""Caller options for an ArcGIS geocoder."""

from pydantic import BaseModel, ConfigDict, Field

from geocoder_arcgis.core.config import Settings


class GeocodeOptions(BaseModel):
    """Options controlling how candidates are requested and selected."""

    model_config = ConfigDict(frozen=True)

    use_secure_transport: bool = Field(
        default=True, description="Request over https instead of http"
    )
    score_threshold: float | None = Field(
        default=None,
        ge=0,
        le=100,
        allow_inf_nan=False,
        description="Minimum candidate score to keep, None disables filtering",
    )
    return_all_results: bool = Field(
        default=False,
        description="Merge every valid candidate into one MultiPoint",
    )

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeocodeOptions":
        """Build options from the environment-backed settings."""
        return cls(
            use_secure_transport=settings.ARCGIS_USE_HTTPS,
            score_threshold=settings.ARCGIS_SCORE_THRESHOLD,
            return_all_results=settings.ARCGIS_ALL_RESULTS,
        )
