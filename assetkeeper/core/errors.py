"""
Domain errors raised by the store handlers and the AI adapter
"""

from typing import Any


class AssetKeeperError(Exception):
    """Base class for all domain errors"""


class NotFoundError(AssetKeeperError):
    """A referenced entity does not exist"""

    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with ID {entity_id} not found")


class PreconditionFailedError(AssetKeeperError):
    """The entity exists but is in the wrong state for the operation"""


class InvalidCredentialsError(AssetKeeperError):
    """Login rejected"""

    def __init__(self):
        super().__init__("Invalid email or password")


class UpstreamError(AssetKeeperError):
    """The external text-generation endpoint failed"""


class GeminiAPIError(UpstreamError):
    """Non-success HTTP status from the Gemini endpoint"""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Gemini API error: {status_code} - {body}")


class EmptyResponseError(UpstreamError):
    """The Gemini endpoint answered without any candidate text"""

    def __init__(self):
        super().__init__("No response generated from Gemini API")
