# barcodecloud

Building blocks for talking to a cloud barcode REST service: an HTTP client that
encodes requests and turns answers into values or errors, and option sets for the
service's barcode generation and recognition parameters.

## Installation

```
pip install barcodecloud
```

To run the test suite:

```
pip install "barcodecloud[test]"
pytest
```

## Modules

- `barcodecloud.client`: `ApiClient`, `ApiError` and the helpers
  `parameter_to_string`, `select_header_content_type` and `select_header_accept`.
- `barcodecloud.generate_options`: `GenerateOptions`, the optional appearance
  settings of a generated barcode.
- `barcodecloud.recognize_options`: `RecognizeOptions`, the optional recognition
  settings.

## Usage

```python
from barcodecloud.client import ApiClient, ApiError
from barcodecloud.generate_options import GenerateOptions
from barcodecloud.recognize_options import RecognizeOptions

client = ApiClient("https://api.example.com/v4.0", None, "token")

# Generate a barcode image and get its bytes back.
options = GenerateOptions(text_color="red", resolution=300.0, no_wrap=True)
png = client.call_bytes(
    "GET",
    "/barcode/generate",
    query=[("Type", "QR"), ("Text", "Hello"), *options.to_query(), ("format", "png")],
    content_types=["application/json"],
    accepts=["image/png"],
)

# Recognize barcodes from a public URL.
recognize = RecognizeOptions(types=["QR", "Code128"], timeout=10000)
result = client.call_json(
    "POST",
    "/barcode/recognize",
    query=[*recognize.to_query(), ("url", "https://www.example.com/qr.png")],
    accepts=["application/json"],
)
```

### ApiClient

`ApiClient(base_path, session=None, access_token=None)` sends each request to
`base_path + path` through the given `requests.Session`, or a new one. When an access
token is set, every request carries `Authorization: Bearer <token>`.

- `call(...)` sends a request and returns the `requests.Response`.
- `call_json(...)` returns the decoded JSON body.
- `call_bytes(...)` returns the raw body bytes. It takes no form fields or file.

Query and form values may be a mapping or a sequence of pairs. `None` values are
dropped, and list values repeat their key once per item.

The request body follows the Content-Type picked from `content_types`:

- `multipart/form-data`: form fields plus the file given by `file_name`, `file_field`
  and `file_bytes`.
- `application/x-www-form-urlencoded` with form fields: the fields, URL-encoded.
- otherwise a `body` is sent as JSON. Objects with `to_dict()`, dataclasses, enums,
  lists and mappings are converted first. Without a body, `file_bytes` are sent as
  `application/octet-stream`.

`select_header_content_type` picks `application/json` if it is offered, else the first
choice. `select_header_accept` picks `application/json` if it is offered, else all
choices joined with commas. `parameter_to_string` writes booleans as `true`/`false`,
whole floats without a decimal part, enums by their value, and lists comma-joined.

### Options

`GenerateOptions` and `RecognizeOptions` are dataclasses whose fields all default to
`None`. Fields left as `None` are not sent. `to_query()` returns the set fields as
ordered `(name, value)` pairs using the service's parameter names, for example
`TextColor` or `AllowInvertImage`. In `RecognizeOptions`, `types` and
`scan_window_sizes` produce one pair per item.

### Errors

Any answer with a status of 300 or higher raises `ApiError`, with `status` (the status
line), `status_code` and `text` (the raw body). `call_json` and `call_bytes` take
`error_models`, a mapping from status code to a callable. The callable is applied to
the decoded JSON error body and its result is stored in `model`. If decoding fails,
`status` holds the decoding error message instead. `call_json` also raises `ApiError`
when a successful answer is not valid JSON.

## What this package does not do

There are no ready-made methods for the individual service endpoints, such as
generate, recognize, scan, or storage files and folders. You give the paths and
parameters to `ApiClient` yourself, as in the example above. The package also does not
obtain access tokens, and it has no models for the service's response bodies: answers
come back as plain decoded JSON.