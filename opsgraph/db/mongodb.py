"""
MongoDB connection management.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

logger = logging.getLogger(__name__)

# Collection names
EMPLOYEES = "employee"
STORES = "store"
LOCATIONS = "location"
RANKS = "rank"
OWNERS = "owner"
PROJECTS = "project"


class MongoDB:
    """
    MongoDB connection manager.
    Provides access to database and collections with connection management.

    One instance is created per application and handed to the repositories
    that need it.
    """

    def __init__(self, url: str, database_name: str, client: Optional[AsyncIOMotorClient] = None):
        """
        Initialize the connection manager.

        Args:
            url: MongoDB connection string
            database_name: Name of the database to use
            client: Optional pre-built client (used by tests)
        """
        self.url = url
        self.database_name = database_name
        self.client = client
        self.db: Optional[AsyncIOMotorDatabase] = client[database_name] if client is not None else None

    def connect_to_mongodb(self) -> None:
        """
        Connect to MongoDB if not already connected.
        """
        if self.client is None:
            logger.info(f"Connecting to MongoDB at {self.url} (database: {self.database_name})")

            self.client = AsyncIOMotorClient(self.url)
            self.db = self.client[self.database_name]

            logger.info("Connected to MongoDB")

    def close_mongodb_connection(self) -> None:
        """
        Close MongoDB connection if open.
        """
        if self.client is not None:
            self.client.close()
            self.client = None
            self.db = None
            logger.info("Closed MongoDB connection")

    def get_database(self) -> AsyncIOMotorDatabase:
        """
        Get database instance.

        Returns:
            AsyncIOMotorDatabase instance
        """
        if self.db is None:
            self.connect_to_mongodb()
        return self.db

    def get_collection(self, collection_name: str) -> AsyncIOMotorCollection:
        """
        Get collection by name.

        Args:
            collection_name: Name of collection

        Returns:
            AsyncIOMotorCollection instance
        """
        return self.get_database()[collection_name]

    async def ping(self) -> bool:
        """
        Check that the server answers.

        Returns:
            True if the ping command succeeded
        """
        try:
            await self.get_database().command("ping")
            return True
        except Exception as e:
            logger.warning(f"MongoDB ping failed: {str(e)}")
            return False
