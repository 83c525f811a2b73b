"""DynamoDB locale and translation stores.

Tables:
    - locales (PK: ``code``): attributes id, name, created_at
    - translations (PK: ``translation_key``): attributes id, locale_id,
      locale_code, text, parent_id (derived only), created_at

Get-or-create is a conditional ``put_item`` guarded by
``attribute_not_exists`` on the partition key. When the condition fails
another writer won the race, and the stored item is read back with a
consistent ``get_item``. Translation partition keys encode the uniqueness
rules, so finding a derived translation is a single ``get_item``:

    - root:    ``root#<locale_id>#<sha256(text)>``
    - derived: ``derived#<locale_id>#<parent_id>``
"""

import hashlib
import time
import uuid
from typing import Any, Dict, Optional

from botocore.exceptions import BotoCoreError, ClientError  # type: ignore

from translation_resolver.i18n.exceptions import TranslationStoreError
from translation_resolver.i18n.models import Locale, Translation
from translation_resolver.logging import get_module_logger
from translation_resolver.operations import classify_aws_error
from translation_resolver.persistence.base import LocaleStore, TranslationStore

logger = get_module_logger()

LOCALE_PARTITION_KEY = "code"
TRANSLATION_PARTITION_KEY = "translation_key"


def _is_conditional_check_failure(error: ClientError) -> bool:
    return (
        error.response.get("Error", {}).get("Code")
        == "ConditionalCheckFailedException"
    )


def _store_error(
    operation: str, table_name: str, error: Exception
) -> TranslationStoreError:
    result = classify_aws_error(error)
    logger.error(
        "dynamodb_store_error",
        operation=operation,
        table_name=table_name,
        error_code=result.error_code,
        error=result.message,
    )
    return TranslationStoreError(result.message, error_code=result.error_code or "")


class _DynamoDBTable:
    """Conditional put / consistent get helpers for one table."""

    def __init__(self, client: Any, table_name: str, partition_key: str):
        self.client = client
        self.table_name = table_name
        self.partition_key = partition_key

    def get(self, key_value: str) -> Optional[Dict[str, Any]]:
        try:
            response = self.client.get_item(
                TableName=self.table_name,
                Key={self.partition_key: {"S": key_value}},
                ConsistentRead=True,
            )
        except (ClientError, BotoCoreError) as e:
            raise _store_error("get_item", self.table_name, e) from e
        return response.get("Item")

    def put_if_absent(self, item: Dict[str, Any]) -> bool:
        try:
            self.client.put_item(
                TableName=self.table_name,
                Item=item,
                ConditionExpression="attribute_not_exists(#pk)",
                ExpressionAttributeNames={"#pk": self.partition_key},
            )
        except ClientError as e:
            if _is_conditional_check_failure(e):
                return False
            raise _store_error("put_item", self.table_name, e) from e
        except BotoCoreError as e:
            raise _store_error("put_item", self.table_name, e) from e
        return True

    def get_or_put(self, key_value: str, item: Dict[str, Any]) -> Dict[str, Any]:
        existing = self.get(key_value)
        if existing is not None:
            return existing

        if self.put_if_absent(item):
            return item

        # Lost the race; the winner's item is now readable
        existing = self.get(key_value)
        if existing is None:
            raise TranslationStoreError(
                f"Item {key_value} missing from {self.table_name} after conditional put",
                error_code="INCONSISTENT_READ",
            )
        return existing


def _locale_from_item(item: Dict[str, Any]) -> Locale:
    return Locale(
        id=item["id"]["S"],
        code=item[LOCALE_PARTITION_KEY]["S"],
        name=item["name"]["S"],
    )


def _translation_from_item(item: Dict[str, Any]) -> Translation:
    parent = item.get("parent_id")
    return Translation(
        id=item["id"]["S"],
        locale_id=item["locale_id"]["S"],
        locale_code=item["locale_code"]["S"],
        text=item["text"]["S"],
        parent_id=parent["S"] if parent else None,
    )


def translation_key(locale_id: str, text: str, parent_id: Optional[str]) -> str:
    """Build the partition key encoding a translation's uniqueness rule.

    Args:
        locale_id: Locale identifier
        text: Translation text (only used for roots)
        parent_id: Parent translation id, or None for a root

    Returns:
        Partition key string
    """
    if parent_id is None:
        digest = hashlib.sha256(text.encode("utf-8")).hexdigest()
        return f"root#{locale_id}#{digest}"
    return f"derived#{locale_id}#{parent_id}"


class DynamoDBLocaleStore(LocaleStore):
    """DynamoDB-backed locale store."""

    def __init__(self, client: Any, table_name: str):
        """Initialize the store.

        Args:
            client: boto3 DynamoDB client.
            table_name: Locales table name.
        """
        self._table = _DynamoDBTable(client, table_name, LOCALE_PARTITION_KEY)
        logger.info("initialized_dynamodb_locale_store", table_name=table_name)

    def get_or_create(self, code: str, name: str) -> Locale:
        item = {
            LOCALE_PARTITION_KEY: {"S": code},
            "id": {"S": uuid.uuid4().hex},
            "name": {"S": name},
            "created_at": {"N": str(int(time.time()))},
        }
        stored = self._table.get_or_put(code, item)
        if stored is item:
            logger.info("locale_created", code=code, locale_id=item["id"]["S"])
        return _locale_from_item(stored)


class DynamoDBTranslationStore(TranslationStore):
    """DynamoDB-backed translation store."""

    def __init__(self, client: Any, table_name: str):
        """Initialize the store.

        Args:
            client: boto3 DynamoDB client.
            table_name: Translations table name.
        """
        self._table = _DynamoDBTable(client, table_name, TRANSLATION_PARTITION_KEY)
        logger.info("initialized_dynamodb_translation_store", table_name=table_name)

    def get_or_create(
        self, locale: Locale, text: str, parent_id: Optional[str] = None
    ) -> Translation:
        key = translation_key(locale.id, text, parent_id)
        item = {
            TRANSLATION_PARTITION_KEY: {"S": key},
            "id": {"S": uuid.uuid4().hex},
            "locale_id": {"S": locale.id},
            "locale_code": {"S": locale.code},
            "text": {"S": text},
            "created_at": {"N": str(int(time.time()))},
        }
        if parent_id is not None:
            item["parent_id"] = {"S": parent_id}

        stored = self._table.get_or_put(key, item)
        if stored is item:
            logger.info(
                "translation_created",
                locale=locale.code,
                translation_id=item["id"]["S"],
                parent_id=parent_id,
            )
        return _translation_from_item(stored)

    def find_by_locale_and_parent(
        self, locale_id: str, parent_id: str
    ) -> Optional[Translation]:
        item = self._table.get(translation_key(locale_id, "", parent_id))
        return _translation_from_item(item) if item else None
