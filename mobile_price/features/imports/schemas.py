from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field as PydField


# ---------- IN ----------

class RawPhoneIn(BaseModel):
    """Fiche brute d'une base de téléphones externe (clés camelCase acceptées)."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    manufacturer: str = PydField(..., min_length=1, examples=["Samsung"])
    model: str = PydField(..., min_length=1, examples=["Galaxy S24 Ultra"])
    chipset: Optional[str] = None
    android_version: Optional[str] = PydField(None, alias="androidVersion")
    battery: Optional[str] = None
    cpu: Optional[str] = None
    display_resolution: Optional[str] = PydField(None, alias="displayResolution")
    display_size: Optional[str] = PydField(None, alias="displaySize")
    display_type: Optional[str] = PydField(None, alias="displayType")
    gpu: Optional[str] = None
    internal: Optional[str] = PydField(None, examples=["256GB 12GB RAM, 512GB 12GB RAM"])
    main_camera_features: Optional[str] = PydField(None, alias="mainCameraFeatures")
    main_camera_specs: Optional[str] = PydField(None, alias="mainCameraSpecs")
    main_video_specs: Optional[str] = PydField(None, alias="mainVideoSpecs")
    selfie_camera_features: Optional[str] = PydField(None, alias="selfieCameraFeatures")
    selfie_camera_specs: Optional[str] = PydField(None, alias="selfieCameraSpecs")
    selfie_video_specs: Optional[str] = PydField(None, alias="selfieVideoSpecs")
    sensors: Optional[str] = None


class ImportIn(BaseModel):
    phones: List[RawPhoneIn] = PydField(..., min_length=1)


# ---------- OUT ----------

class ImportResultOut(BaseModel):
    brands_created: int
    mobiles_created: int
    mobiles_skipped: int
