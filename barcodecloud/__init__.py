"""HTTP client and option sets for a cloud barcode generation and recognition service."""

__version__ = "0.1.0"
__all__ = ["client", "generate_options", "recognize_options"]