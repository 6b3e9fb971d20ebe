"""Data models for image metadata returned by the metadata endpoints."""

from typing import Any, Dict, List

from pydantic import Field

from imagekit_metadata.models.base import ImageKitModel


class ImageExif(ImageKitModel):
    """IFD0 tags describing the image and the camera."""
    make: str = Field("", alias="Make")
    model: str = Field("", alias="Model")
    orientation: int = Field(0, alias="Orientation")
    x_resolution: int = Field(0, alias="XResolution")
    y_resolution: int = Field(0, alias="YResolution")
    resolution_unit: int = Field(0, alias="ResolutionUnit")
    software: str = Field("", alias="Software")
    modify_date: str = Field("", alias="ModifyDate")
    y_cb_cr_positioning: int = Field(0, alias="YCbCrPositioning")
    exif_offset: int = Field(0, alias="ExifOffset")
    gps_info: int = Field(0, alias="GPSInfo")


class ThumbnailExif(ImageKitModel):
    """IFD1 tags of the embedded thumbnail."""
    compression: int = Field(0, alias="Compression")
    x_resolution: int = Field(0, alias="XResolution")
    y_resolution: int = Field(0, alias="YResolution")
    resolution_unit: int = Field(0, alias="ResolutionUnit")
    thumbnail_offset: int = Field(0, alias="ThumbnailOffset")
    thumbnail_length: int = Field(0, alias="ThumbnailLength")


class Exif(ImageKitModel):
    """Exposure and capture settings."""
    exposure_time: float = Field(0.0, alias="ExposureTime")
    f_number: float = Field(0.0, alias="FNumber")
    exposure_program: int = Field(0, alias="ExposureProgram")
    iso: int = Field(0, alias="ISO")
    exif_version: str = Field("", alias="ExifVersion")
    date_time_original: str = Field("", alias="DateTimeOriginal")
    create_date: str = Field("", alias="CreateDate")
    shutter_speed_value: float = Field(0.0, alias="ShutterSpeedValue")
    aperture_value: float = Field(0.0, alias="ApertureValue")
    exposure_compensation: float = Field(0.0, alias="ExposureCompensation")
    metering_mode: int = Field(0, alias="MeteringMode")
    flash: int = Field(0, alias="Flash")
    focal_length: float = Field(0.0, alias="FocalLength")
    sub_sec_time: str = Field("", alias="SubSecTime")
    sub_sec_time_original: str = Field("", alias="SubSecTimeOriginal")
    sub_sec_time_digitized: str = Field("", alias="SubSecTimeDigitized")
    flashpix_version: str = Field("", alias="FlashpixVersion")
    color_space: int = Field(0, alias="ColorSpace")
    exif_image_width: int = Field(0, alias="ExifImageWidth")
    exif_image_height: int = Field(0, alias="ExifImageHeight")
    interop_offset: int = Field(0, alias="InteropOffset")
    focal_plane_x_resolution: float = Field(0.0, alias="FocalPlaneXResolution")
    focal_plane_y_resolution: float = Field(0.0, alias="FocalPlaneYResolution")
    focal_plane_resolution_unit: int = Field(0, alias="FocalPlaneResolutionUnit")
    custom_rendered: int = Field(0, alias="CustomRendered")
    exposure_mode: int = Field(0, alias="ExposureMode")
    white_balance: int = Field(0, alias="WhiteBalance")
    scene_capture_type: int = Field(0, alias="SceneCaptureType")


class Gps(ImageKitModel):
    """GPS tags."""
    gps_version_id: List[int] = Field(default_factory=list, alias="GPSVersionID")


class Interoperability(ImageKitModel):
    interop_index: str = Field("", alias="InteropIndex")
    interop_version: str = Field("", alias="InteropVersion")


class ExifTree(ImageKitModel):
    """EXIF data grouped the way the service reports it.

    Maker notes are vendor defined, so they are kept as a plain mapping.
    """
    image: ImageExif = Field(default_factory=ImageExif, alias="image")
    thumbnail: ThumbnailExif = Field(default_factory=ThumbnailExif, alias="thumbnail")
    exif: Exif = Field(default_factory=Exif, alias="exif")
    gps: Gps = Field(default_factory=Gps, alias="gps")
    interoperability: Interoperability = Field(default_factory=Interoperability, alias="interoperability")
    makernote: Dict[str, Any] = Field(default_factory=dict, alias="makernote")


class Metadata(ImageKitModel):
    """Technical metadata of an image."""
    height: int = Field(0, alias="height")
    width: int = Field(0, alias="width")
    size: int = Field(0, alias="size")
    format: str = Field("", alias="format")
    has_color_profile: bool = Field(False, alias="hasColorProfile")
    quality: int = Field(0, alias="quality")
    density: int = Field(0, alias="density")
    has_transparency: bool = Field(False, alias="hasTransparency")
    p_hash: str = Field("", alias="pHash")
    exif: ExifTree = Field(default_factory=ExifTree, alias="exif")
