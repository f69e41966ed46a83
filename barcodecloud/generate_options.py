"""Optional rendering settings shared by the barcode generation calls."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from barcodecloud.client import parameter_to_string

# Field name -> query parameter name, in the order the service documents them.
_QUERY_NAMES: dict[str, str] = {
    "two_d_display_text": "TwoDDisplayText",
    "text_location": "TextLocation",
    "text_alignment": "TextAlignment",
    "text_color": "TextColor",
    "no_wrap": "NoWrap",
    "resolution": "Resolution",
    "resolution_x": "ResolutionX",
    "resolution_y": "ResolutionY",
    "dimension_x": "DimensionX",
    "text_space": "TextSpace",
    "units": "Units",
    "size_mode": "SizeMode",
    "bar_height": "BarHeight",
    "image_height": "ImageHeight",
    "image_width": "ImageWidth",
    "rotation_angle": "RotationAngle",
    "back_color": "BackColor",
    "bar_color": "BarColor",
    "border_color": "BorderColor",
    "border_width": "BorderWidth",
    "border_dash_style": "BorderDashStyle",
    "border_visible": "BorderVisible",
    "enable_checksum": "EnableChecksum",
    "enable_escape": "EnableEscape",
    "filled_bars": "FilledBars",
    "always_show_checksum": "AlwaysShowChecksum",
    "wide_narrow_ratio": "WideNarrowRatio",
    "validate_text": "ValidateText",
    "supplement_data": "SupplementData",
    "supplement_space": "SupplementSpace",
    "bar_width_reduction": "BarWidthReduction",
    "use_anti_alias": "UseAntiAlias",
}


@dataclass
class GenerateOptions:
    """Appearance settings for a generated barcode; None leaves the server default."""

    two_d_display_text: Any = None
    text_location: Any = None
    text_alignment: Any = None
    text_color: Any = None
    no_wrap: bool | None = None
    resolution: float | None = None
    resolution_x: float | None = None
    resolution_y: float | None = None
    dimension_x: float | None = None
    text_space: float | None = None
    units: Any = None
    size_mode: Any = None
    bar_height: float | None = None
    image_height: float | None = None
    image_width: float | None = None
    rotation_angle: float | None = None
    back_color: Any = None
    bar_color: Any = None
    border_color: Any = None
    border_width: float | None = None
    border_dash_style: Any = None
    border_visible: bool | None = None
    enable_checksum: Any = None
    enable_escape: bool | None = None
    filled_bars: bool | None = None
    always_show_checksum: bool | None = None
    wide_narrow_ratio: float | None = None
    validate_text: bool | None = None
    supplement_data: Any = None
    supplement_space: float | None = None
    bar_width_reduction: float | None = None
    use_anti_alias: bool | None = None

    def to_query(self) -> list[tuple[str, str]]:
        """Return the set options as ordered query pairs."""
        return [
            (_QUERY_NAMES[field.name], parameter_to_string(value))
            for field in dataclasses.fields(self)
            if (value := getattr(self, field.name)) is not None
        ]