class TelemetryFormatError(ValueError):
    """Raised when telemetry text has no usable header row."""
