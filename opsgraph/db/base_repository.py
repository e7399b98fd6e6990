"""
Base repository pattern implementation for MongoDB collections.
"""
import logging
from typing import Any, Dict, List, Optional

from pymongo.errors import PyMongoError

from opsgraph.core.exceptions import PersistenceFailure
from opsgraph.utils.id_handler import IdHandler

logger = logging.getLogger(__name__)


class BaseRepository:
    """
    Base repository class that implements standard CRUD operations for MongoDB collections.
    Handles ID conversions, formatting, and standard error patterns.

    Every id argument is a string (or ObjectId). Malformed ids raise
    InvalidIdentifier and driver errors are re-raised as PersistenceFailure.
    """

    entity_name = "Document"

    def __init__(self, collection):
        """
        Initialize repository with MongoDB collection.

        Args:
            collection: Motor AsyncIOMotorCollection instance
        """
        self.collection = collection

    def _failure(self, action: str, error: Exception) -> PersistenceFailure:
        logger.error(f"Error while {action} {self.entity_name.lower()}: {str(error)}")
        return PersistenceFailure(f"Error while {action} {self.entity_name.lower()}: {str(error)}")

    async def find_by_id(self, id_value: Any) -> Optional[Dict[str, Any]]:
        """
        Find a document by ID.

        Args:
            id_value: ID to look for (string or ObjectId)

        Returns:
            Document dict with formatted IDs or None if not found

        Raises:
            InvalidIdentifier: If the ID is malformed
            PersistenceFailure: If the lookup fails
        """
        obj_id = IdHandler.parse_object_id(id_value)
        try:
            document = await self.collection.find_one({"_id": obj_id})
        except PyMongoError as e:
            raise self._failure("fetching", e) from e

        if document:
            return IdHandler.format_object_ids(document)
        return None

    async def find_all(self) -> List[Dict[str, Any]]:
        """
        Fetch every document of the collection.

        Returns:
            List of documents with formatted IDs
        """
        try:
            documents = await self.collection.find({}).to_list(length=None)
        except PyMongoError as e:
            raise self._failure("fetching list of", e) from e
        return IdHandler.format_object_ids(documents)

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a new document and return it as stored.

        Args:
            data: Document data

        Returns:
            Created document with formatted IDs

        Raises:
            PersistenceFailure: If creation fails
        """
        document = {k: v for k, v in data.items() if k != "_id"}
        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as e:
            raise self._failure("creating new", e) from e

        created_doc = await self.find_by_id(result.inserted_id)
        if not created_doc:
            raise PersistenceFailure(
                f"{self.entity_name} was created but could not be retrieved"
            )
        return created_doc

    async def replace_fields(self, id_value: Any, fields: Dict[str, Any]) -> bool:
        """
        Overwrite the given fields of a document in a single write.

        Args:
            id_value: ID of document to update
            fields: New field values

        Returns:
            True if a document matched the ID

        Raises:
            InvalidIdentifier: If the ID is malformed
            PersistenceFailure: If the update fails
        """
        obj_id = IdHandler.parse_object_id(id_value)
        update_data = {k: v for k, v in fields.items() if k != "_id"}
        try:
            result = await self.collection.update_one(
                {"_id": obj_id},
                {"$set": update_data}
            )
        except PyMongoError as e:
            raise self._failure("updating", e) from e
        return result.matched_count > 0

    async def delete(self, id_value: Any) -> bool:
        """
        Delete a document by ID.

        Args:
            id_value: ID of document to delete

        Returns:
            True if document was deleted, False if not found

        Raises:
            InvalidIdentifier: If the ID is malformed
            PersistenceFailure: If the delete fails
        """
        obj_id = IdHandler.parse_object_id(id_value)
        try:
            result = await self.collection.delete_one({"_id": obj_id})
        except PyMongoError as e:
            raise self._failure("deleting", e) from e
        return result.deleted_count > 0
