import enum

from barcodecloud.client import parameter_to_string
from barcodecloud.recognize_options import RecognizeOptions


class Kind(enum.Enum):
    QR = "QR"
    CODE128 = "Code128"


def test_empty_options_produce_no_query():
    assert RecognizeOptions().to_query() == []


def test_type_is_sent_as_capitalised_key():
    assert RecognizeOptions(type_="QR").to_query() == [("Type", "QR")]


def test_types_repeat_key_per_element():
    query = RecognizeOptions(types=[Kind.QR, Kind.CODE128]).to_query()
    assert query == [("Types", "QR"), ("Types", "Code128")]


def test_scan_window_sizes_repeat_key_per_element():
    sizes = [10, 15, 20]
    query = RecognizeOptions(scan_window_sizes=sizes).to_query()
    assert [key for key, _ in query] == ["ScanWindowSizes"] * len(sizes)
    assert [value for _, value in query] == [str(size) for size in sizes]


def test_empty_list_produces_nothing():
    assert RecognizeOptions(types=[]).to_query() == []


def test_boolean_values_rendered_lowercase():
    query = RecognizeOptions(strip_fnc=True, fast_scan_only=False).to_query()
    assert query == [("StripFNC", "true"), ("FastScanOnly", "false")]


def test_values_match_parameter_to_string():
    options = RecognizeOptions(similarity=0.5, timeout=15000, region_likelihood_threshold_percent=0.7)
    query = dict(options.to_query())
    assert query["Similarity"] == parameter_to_string(0.5)
    assert query["Timeout"] == "15000"
    assert query["RegionLikelihoodThresholdPercent"] == parameter_to_string(0.7)


def test_query_order_follows_documented_order():
    options = RecognizeOptions(
        ignore_ending_filling_patterns_for_c_table=True,
        check_more_1d_variants=True,
        rect_x=1,
        type_="QR",
        allow_qr_micro_qr_restoration=True,
    )
    keys = [key for key, _ in options.to_query()]
    assert keys == [
        "Type",
        "RectX",
        "AllowQRMicroQrRestoration",
        "CheckMore1DVariants",
        "IgnoreEndingFillingPatternsForCTable",
    ]


def test_every_field_has_a_distinct_query_key():
    options = RecognizeOptions(
        **{name: True for name in RecognizeOptions.__dataclass_fields__ if name not in ("types", "scan_window_sizes")},
        types=["QR"],
        scan_window_sizes=[10],
    )
    keys = [key for key, _ in options.to_query()]
    assert len(keys) == len(RecognizeOptions.__dataclass_fields__)
    assert len(set(keys)) == len(keys)


def test_enum_value_is_used():
    assert RecognizeOptions(preset=Kind.CODE128).to_query() == [("Preset", "Code128")]


def test_rectangle_integers():
    query = RecognizeOptions(rect_x=0, rect_y=5, rect_width=100, rect_height=50).to_query()
    assert query == [("RectX", "0"), ("RectY", "5"), ("RectWidth", "100"), ("RectHeight", "50")]