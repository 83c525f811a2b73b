"""Backing service settings: cache, persistence and machine translation."""

from typing import Optional

from pydantic import Field

from translation_resolver.configuration.base import InfrastructureSettings


class CacheSettings(InfrastructureSettings):
    """Translation cache backend configuration.

    Environment Variables:
        CACHE_BACKEND: 'memory' (single process) or 'redis' (shared)
        REDIS_HOST: Redis/ElastiCache endpoint (default: localhost)
        REDIS_PORT: Redis port (default: 6379)
        REDIS_DB: Redis logical database (default: 0)
        REDIS_SOCKET_TIMEOUT: Socket and connect timeout in seconds (default: 5)
        REDIS_KEY_PREFIX: Prefix prepended to every cache key
            (default: translation_resolver:)
    """

    backend: str = Field(
        default="memory",
        alias="CACHE_BACKEND",
        description="Cache backend: 'memory' or 'redis'",
    )
    redis_host: str = Field(default="localhost", alias="REDIS_HOST")
    redis_port: int = Field(default=6379, alias="REDIS_PORT")
    redis_db: int = Field(default=0, alias="REDIS_DB")
    redis_socket_timeout: int = Field(default=5, alias="REDIS_SOCKET_TIMEOUT")
    redis_key_prefix: str = Field(
        default="translation_resolver:", alias="REDIS_KEY_PREFIX"
    )


class PersistenceSettings(InfrastructureSettings):
    """Locale and translation store configuration.

    Environment Variables:
        STORE_BACKEND: 'memory' (development, testing) or 'dynamodb' (production)
        LOCALES_TABLE: DynamoDB table holding locales (partition key: code)
        TRANSLATIONS_TABLE: DynamoDB table holding translations (partition key: translation_key)
        AWS_REGION: AWS region of the tables (default: ca-central-1)
        DYNAMODB_ENDPOINT_URL: Optional endpoint override (e.g. DynamoDB Local)
    """

    backend: str = Field(
        default="memory",
        alias="STORE_BACKEND",
        description="Store backend: 'memory' or 'dynamodb'",
    )
    locales_table: str = Field(default="translation_locales", alias="LOCALES_TABLE")
    translations_table: str = Field(
        default="translation_translations", alias="TRANSLATIONS_TABLE"
    )
    aws_region: str = Field(default="ca-central-1", alias="AWS_REGION")
    dynamodb_endpoint_url: Optional[str] = Field(
        default=None, alias="DYNAMODB_ENDPOINT_URL"
    )


class MachineTranslationSettings(InfrastructureSettings):
    """Google Cloud Translation API configuration.

    Environment Variables:
        GOOGLE_TRANSLATE_API_KEY: API key sent with every request
        GOOGLE_TRANSLATE_ENDPOINT: REST endpoint (default: Cloud Translation v2)
        MACHINE_TRANSLATION_TIMEOUT_SECONDS: Per-request timeout (default: 10)
    """

    api_key: str = Field(default="", alias="GOOGLE_TRANSLATE_API_KEY")
    endpoint: str = Field(
        default="https://translation.googleapis.com/language/translate/v2",
        alias="GOOGLE_TRANSLATE_ENDPOINT",
    )
    timeout_seconds: int = Field(
        default=10,
        alias="MACHINE_TRANSLATION_TIMEOUT_SECONDS",
        description="Timeout for a single machine translation request (seconds)",
    )
