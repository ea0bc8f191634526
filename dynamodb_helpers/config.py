import os
from typing import Any, Dict, Optional

from botocore.config import Config
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file if it exists
load_dotenv()


class DynamoDBConfig(BaseModel):
    """Parameters used to construct the DynamoDB client."""

    aws_access_key_id: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_ACCESS_KEY_ID"),
        description="AWS access key ID"
    )

    aws_secret_access_key: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SECRET_ACCESS_KEY"),
        description="AWS secret access key"
    )

    aws_session_token: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SESSION_TOKEN"),
        description="AWS session token for temporary credentials"
    )

    profile_name: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_PROFILE"),
        description="Shared config/credentials profile"
    )

    region_name: str = Field(
        default_factory=lambda: os.getenv("AWS_REGION", "us-east-1"),
        description="AWS region name"
    )

    # DynamoDB specific settings
    endpoint_url: Optional[str] = Field(
        default_factory=lambda: os.getenv("DYNAMODB_ENDPOINT_URL"),
        description="DynamoDB endpoint URL (for local development)"
    )

    # Connection settings, enforced by botocore
    max_pool_connections: int = Field(
        default=50,
        description="Maximum number of connections in the connection pool"
    )

    retries: int = Field(
        default=3,
        description="Number of retry attempts for failed requests"
    )

    timeout_seconds: float = Field(
        default=30.0,
        description="Per-request connect/read timeout in seconds"
    )

    # Logging settings
    enable_debug_logging: bool = Field(
        default_factory=lambda: os.getenv("DYNAMODB_DEBUG_LOGGING", "false").lower() == "true",
        description="Enable debug logging for DynamoDB operations"
    )

    @field_validator('region_name')
    @classmethod
    def validate_region(cls, v):
        """Validate AWS region name."""
        if not v:
            raise ValueError("AWS region name is required")
        return v

    @field_validator('max_pool_connections', 'retries')
    @classmethod
    def validate_non_negative(cls, v):
        if v < 0:
            raise ValueError("must be non-negative")
        return v

    @field_validator('timeout_seconds')
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("timeout_seconds must be positive")
        return v

    def session_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``boto3.Session``.

        Unset values are omitted so boto3 falls back to its default
        credential chain.
        """
        kwargs = {
            'aws_access_key_id': self.aws_access_key_id,
            'aws_secret_access_key': self.aws_secret_access_key,
            'aws_session_token': self.aws_session_token,
            'profile_name': self.profile_name,
            'region_name': self.region_name,
        }
        return {k: v for k, v in kwargs.items() if v is not None}

    def client_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``session.client('dynamodb', ...)``."""
        kwargs: Dict[str, Any] = {
            'region_name': self.region_name,
            'config': Config(
                retries={'max_attempts': self.retries},
                max_pool_connections=self.max_pool_connections,
                read_timeout=self.timeout_seconds,
                connect_timeout=self.timeout_seconds
            )
        }
        if self.endpoint_url:
            kwargs['endpoint_url'] = self.endpoint_url
        return kwargs

    @classmethod
    def from_env(cls) -> 'DynamoDBConfig':
        """Create configuration from environment variables.

        Returns:
            DynamoDBConfig instance
        """
        return cls()

    @classmethod
    def for_local_development(cls) -> 'DynamoDBConfig':
        """Create configuration for DynamoDB Local on port 8000.

        Returns:
            DynamoDBConfig instance configured for local development
        """
        return cls(
            aws_access_key_id="local",
            aws_secret_access_key="local",
            profile_name=None,
            region_name="us-east-1",
            endpoint_url="http://localhost:8000",
            enable_debug_logging=True
        )

    model_config = ConfigDict(
        validate_assignment=True
    )
