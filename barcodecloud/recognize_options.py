"""Optional recognition settings shared by the barcode recognition calls."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from barcodecloud.client import parameter_to_string

# Field name -> query parameter name, in the order the service documents them.
_QUERY_NAMES: dict[str, str] = {
    "type_": "Type",
    "types": "Types",
    "checksum_validation": "ChecksumValidation",
    "detect_encoding": "DetectEncoding",
    "preset": "Preset",
    "rect_x": "RectX",
    "rect_y": "RectY",
    "rect_width": "RectWidth",
    "rect_height": "RectHeight",
    "strip_fnc": "StripFNC",
    "timeout": "Timeout",
    "median_smoothing_window_size": "MedianSmoothingWindowSize",
    "allow_median_smoothing": "AllowMedianSmoothing",
    "allow_complex_background": "AllowComplexBackground",
    "allow_datamatrix_industrial_barcodes": "AllowDatamatrixIndustrialBarcodes",
    "allow_decreased_image": "AllowDecreasedImage",
    "allow_detect_scan_gap": "AllowDetectScanGap",
    "allow_incorrect_barcodes": "AllowIncorrectBarcodes",
    "allow_invert_image": "AllowInvertImage",
    "allow_micro_white_spots_removing": "AllowMicroWhiteSpotsRemoving",
    "allow_one_d_fast_barcodes_detector": "AllowOneDFastBarcodesDetector",
    "allow_one_d_wiped_bars_restoration": "AllowOneDWipedBarsRestoration",
    "allow_qr_micro_qr_restoration": "AllowQRMicroQrRestoration",
    "allow_regular_image": "AllowRegularImage",
    "allow_salt_and_pepper_filtering": "AllowSaltAndPepperFiltering",
    "allow_white_spots_removing": "AllowWhiteSpotsRemoving",
    "check_more_1d_variants": "CheckMore1DVariants",
    "fast_scan_only": "FastScanOnly",
    "allow_additional_restorations": "AllowAdditionalRestorations",
    "region_likelihood_threshold_percent": "RegionLikelihoodThresholdPercent",
    "scan_window_sizes": "ScanWindowSizes",
    "similarity": "Similarity",
    "skip_diagonal_search": "SkipDiagonalSearch",
    "read_tiny_barcodes": "ReadTinyBarcodes",
    "australian_post_encoding_table": "AustralianPostEncodingTable",
    "ignore_ending_filling_patterns_for_c_table": "IgnoreEndingFillingPatternsForCTable",
}

# Parameters sent once per element of a list value.
_REPEATED = frozenset({"types", "scan_window_sizes"})


@dataclass
class RecognizeOptions:
    """Recognition settings; None leaves the server default."""

    type_: Any = None
    types: Iterable[Any] | None = None
    checksum_validation: Any = None
    detect_encoding: bool | None = None
    preset: Any = None
    rect_x: int | None = None
    rect_y: int | None = None
    rect_width: int | None = None
    rect_height: int | None = None
    strip_fnc: bool | None = None
    timeout: int | None = None
    median_smoothing_window_size: int | None = None
    allow_median_smoothing: bool | None = None
    allow_complex_background: bool | None = None
    allow_datamatrix_industrial_barcodes: bool | None = None
    allow_decreased_image: bool | None = None
    allow_detect_scan_gap: bool | None = None
    allow_incorrect_barcodes: bool | None = None
    allow_invert_image: bool | None = None
    allow_micro_white_spots_removing: bool | None = None
    allow_one_d_fast_barcodes_detector: bool | None = None
    allow_one_d_wiped_bars_restoration: bool | None = None
    allow_qr_micro_qr_restoration: bool | None = None
    allow_regular_image: bool | None = None
    allow_salt_and_pepper_filtering: bool | None = None
    allow_white_spots_removing: bool | None = None
    check_more_1d_variants: bool | None = None
    fast_scan_only: bool | None = None
    allow_additional_restorations: bool | None = None
    region_likelihood_threshold_percent: float | None = None
    scan_window_sizes: Iterable[int] | None = None
    similarity: float | None = None
    skip_diagonal_search: bool | None = None
    read_tiny_barcodes: bool | None = None
    australian_post_encoding_table: Any = None
    ignore_ending_filling_patterns_for_c_table: bool | None = None

    def to_query(self) -> list[tuple[str, str]]:
        """Return the set options as ordered query pairs; lists repeat their key."""
        pairs: list[tuple[str, str]] = []
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if value is None:
                continue
            key = _QUERY_NAMES[field.name]
            if field.name in _REPEATED:
                pairs.extend((key, parameter_to_string(item)) for item in value)
            else:
                pairs.append((key, parameter_to_string(value)))
        return pairs