from __future__ import annotations


class HiveError(Exception):
    """Base class for every failure raised by the detection pipeline."""

    kind = "hive"


class StoreOpenError(HiveError):
    kind = "store_open"


class SchemaError(HiveError):
    kind = "schema"


class ImageLoadError(HiveError):
    kind = "image_load"


class ColorConversionError(HiveError):
    kind = "color_conversion"


class PreparedStatementError(HiveError):
    kind = "prepared_statement"


class InsertError(HiveError):
    kind = "insert"

    def __init__(self, index: int, message: str, row_ids=()):
        super().__init__(f"insert failed for region #{index}: {message}")
        self.index = index
        self.row_ids = list(row_ids)  # committed before the failing row


class LogOpenError(HiveError):
    kind = "log_open"


class DisplayError(HiveError):
    kind = "display"
