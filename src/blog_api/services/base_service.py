"""
Base service layer for unified document store operations
"""

import logging
from typing import Dict, Any, List, Optional
from dataclasses import dataclass

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from blog_api.database.connection import get_collection
from blog_api.utils.helpers import to_utc, utc_now

logger = logging.getLogger(__name__)

@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Dict[str, Any]]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None

def not_found(resource_name: str, record_id: str) -> ServiceResult:
    return ServiceResult(
        success=False,
        error=f"Record not found in {resource_name} with ID: {record_id}",
        error_type="RESOURCE_NOT_FOUND"
    )

def parse_object_id(record_id: str) -> Optional[ObjectId]:
    """Convert a string id into an ObjectId, or None when it cannot be one"""
    if not ObjectId.is_valid(record_id):
        return None
    return ObjectId(record_id)

class BaseService:
    """Base service that wraps a single collection for unified data access"""

    def __init__(self, collection_name: str):
        self.collection_name = collection_name
        logger.info(f"BaseService initialized for collection: {collection_name}")

    @property
    def collection(self):
        return get_collection(self.collection_name)

    async def create(self, data: Dict[str, Any]) -> ServiceResult:
        """
        Create a new record

        Args:
            data: Document fields to insert; ``created`` defaults to now

        Returns:
            ServiceResult with the stored document, including its ``_id``
        """
        document = dict(data)
        document["created"] = to_utc(document.get("created") or utc_now())

        try:
            result = await self.collection.insert_one(document)
            document["_id"] = result.inserted_id
            return ServiceResult(success=True, data=[document], count=1)

        except PyMongoError as e:
            logger.error(f"Create operation failed for {self.collection_name}: {e}", exc_info=True)
            return ServiceResult(
                success=False,
                error=f"Database operation failed: {e}",
                error_type="DATABASE_ERROR"
            )

    async def create_many(self, documents: List[Dict[str, Any]]) -> ServiceResult:
        """Bulk insert records, filling in ``created`` where absent"""
        now = utc_now()
        prepared = []
        for data in documents:
            document = dict(data)
            document["created"] = to_utc(document.get("created") or now)
            prepared.append(document)

        if not prepared:
            return ServiceResult(success=True, data=[], count=0)

        try:
            result = await self.collection.insert_many(prepared)
            for document, inserted_id in zip(prepared, result.inserted_ids):
                document["_id"] = inserted_id
            return ServiceResult(success=True, data=prepared, count=len(prepared))

        except PyMongoError as e:
            logger.error(f"Bulk create failed for {self.collection_name}: {e}", exc_info=True)
            return ServiceResult(
                success=False,
                error=f"Database operation failed: {e}",
                error_type="DATABASE_ERROR"
            )

    async def read(
        self,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[List[Dict[str, str]]] = None
    ) -> ServiceResult:
        """
        Read records

        Args:
            filters: Mongo filter document
            order_by: List of ordering specs [{"field": "created", "dir": "desc"}]

        Returns:
            ServiceResult with matched records
        """
        sort = None
        if order_by:
            sort = [
                (spec["field"], DESCENDING if spec.get("dir", "asc") == "desc" else ASCENDING)
                for spec in order_by
            ]

        try:
            cursor = self.collection.find(filters or {}, sort=sort)
            data = await cursor.to_list(length=None)
            return ServiceResult(success=True, data=data, count=len(data))

        except PyMongoError as e:
            logger.error(f"Read operation failed for {self.collection_name}: {e}")
            return ServiceResult(
                success=False,
                error=str(e),
                error_type="DATABASE_ERROR"
            )

    async def get_by_id(self, record_id: str) -> ServiceResult:
        """
        Get a single record by id

        Args:
            record_id: String form of the document ObjectId

        Returns:
            ServiceResult with the record, or RESOURCE_NOT_FOUND
        """
        object_id = parse_object_id(record_id)
        if object_id is None:
            return not_found(self.collection_name, record_id)

        try:
            document = await self.collection.find_one({"_id": object_id})
        except PyMongoError as e:
            logger.error(f"Get by id failed for {self.collection_name}: {e}")
            return ServiceResult(success=False, error=str(e), error_type="DATABASE_ERROR")

        if document is None:
            return not_found(self.collection_name, record_id)
        return ServiceResult(success=True, data=[document], count=1)

    async def update(self, record_id: str, data: Dict[str, Any]) -> ServiceResult:
        """
        Update a record, setting only the supplied fields

        Args:
            record_id: String form of the document ObjectId
            data: Dictionary of field values to update

        Returns:
            ServiceResult with updated record data
        """
        object_id = parse_object_id(record_id)
        if object_id is None:
            return not_found(self.collection_name, record_id)

        try:
            result = await self.collection.update_one({"_id": object_id}, {"$set": data})
            if result.matched_count == 0:
                return not_found(self.collection_name, record_id)

            document = await self.collection.find_one({"_id": object_id})

        except PyMongoError as e:
            logger.error(f"Update operation failed for {self.collection_name}: {e}", exc_info=True)
            return ServiceResult(
                success=False,
                error=str(e),
                error_type="DATABASE_ERROR"
            )

        # Deleted between the update and the re-read
        if document is None:
            return not_found(self.collection_name, record_id)
        return ServiceResult(success=True, data=[document], count=1)

    async def delete(self, record_id: str) -> ServiceResult:
        """
        Delete a record by id

        Returns:
            ServiceResult indicating success/failure
        """
        object_id = parse_object_id(record_id)
        if object_id is None:
            return not_found(self.collection_name, record_id)

        try:
            result = await self.collection.delete_one({"_id": object_id})
        except PyMongoError as e:
            logger.error(f"Delete operation failed for {self.collection_name}: {e}")
            return ServiceResult(success=False, error=str(e), error_type="DATABASE_ERROR")

        if result.deleted_count == 0:
            return not_found(self.collection_name, record_id)
        return ServiceResult(success=True, count=result.deleted_count)
