"""Conversion error hierarchy; each error names the stage that failed"""


class ConvertError(ValueError):
    """Base class for all conversion failures."""
    stage = "convert"


class ScanError(ConvertError):
    """Front matter delimiters missing or unterminated."""
    stage = "scan"


class DecodeError(ConvertError):
    """Front matter block is not valid YAML or has a field of the wrong shape."""
    stage = "decode"


class DateParseError(ConvertError):
    """A date field matched none of the accepted formats."""
    stage = "date"

    def __init__(self, field: str, raw):
        self.field = field
        self.raw = raw
        if raw is None:
            super().__init__(f"{field}: required date is missing")
        else:
            super().__init__(f"{field}: unrecognized date {raw!r}")


class EncodeError(ConvertError):
    """Target record could not be serialized to TOML."""
    stage = "encode"
