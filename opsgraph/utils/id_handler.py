"""
ID Handler module for consistent MongoDB ObjectId handling throughout the application.
"""
from typing import Any, Dict, List, Optional, Union

from bson import ObjectId

from opsgraph.core.exceptions import InvalidIdentifier, NotFound


class IdHandler:
    """
    Centralized service for handling MongoDB ObjectIds consistently throughout the application.
    Provides methods for conversion, validation and document formatting.
    """

    @staticmethod
    def ensure_object_id(id_value: Any) -> Optional[ObjectId]:
        """
        Safely convert a string or ObjectId to an ObjectId.
        Returns None if conversion is not possible.

        Args:
            id_value: Value to convert to ObjectId (string or ObjectId)

        Returns:
            ObjectId or None if conversion failed
        """
        if id_value is None:
            return None

        if isinstance(id_value, ObjectId):
            return id_value

        if isinstance(id_value, str) and ObjectId.is_valid(id_value):
            return ObjectId(id_value)

        return None

    @staticmethod
    def parse_object_id(id_value: Any) -> ObjectId:
        """
        Convert an ID to an ObjectId, rejecting malformed input.

        Args:
            id_value: Value to convert (string or ObjectId)

        Returns:
            ObjectId

        Raises:
            InvalidIdentifier: If the value is not a valid ObjectId
        """
        obj_id = IdHandler.ensure_object_id(id_value)
        if obj_id is None:
            raise InvalidIdentifier(id_value)
        return obj_id

    @staticmethod
    def format_object_ids(data: Union[Dict[str, Any], List[Dict[str, Any]], None]) -> Union[
        Dict[str, Any], List[Dict[str, Any]], None]:
        """
        Convert ObjectId to strings in a document or list of documents.
        Works recursively for nested dictionaries and lists.

        Args:
            data: MongoDB document or list of documents

        Returns:
            Document(s) with ObjectIds converted to strings
        """
        if data is None:
            return None

        if isinstance(data, list):
            return [IdHandler.format_object_ids(item) for item in data]
        elif isinstance(data, dict):
            result = {}
            for key, value in data.items():
                if isinstance(value, ObjectId):
                    result[key] = str(value)
                elif isinstance(value, (dict, list)):
                    result[key] = IdHandler.format_object_ids(value)
                else:
                    result[key] = value
            return result
        else:
            return data

    @staticmethod
    def raise_if_not_found(document: Optional[Dict[str, Any]], entity: str, id_value: Any) -> Dict[str, Any]:
        """
        Helper method to raise NotFound if document is missing

        Args:
            document: Document to check
            entity: Entity name used in the error message
            id_value: ID that was looked up

        Returns:
            The document if found

        Raises:
            NotFound if document is None
        """
        if not document:
            raise NotFound(entity, id_value)
        return document
