"""Error taxonomy. Every ViennaFlowError is rendered as {"error": message} by main.py."""


class ViennaFlowError(Exception):
    status_code = 500


class ConfigurationError(ViennaFlowError):
    """Store location/credentials missing. Raised before any query is attempted."""


class DataAccessError(ViennaFlowError):
    """Any failure from the database while resolving or fetching. Never retried."""


class GeometryDecodeError(ViennaFlowError):
    """Malformed or unsupported WKB. Aborts the whole response."""

    def __init__(self, detail: str):
        super().__init__(f"Error processing geometry data: {detail}")
        self.detail = detail


class MissingParameterError(ViennaFlowError):
    status_code = 400
