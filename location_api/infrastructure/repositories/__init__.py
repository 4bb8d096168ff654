"""Repository Implementations"""
from .dynamodb_location_repository import DynamoDBLocationRepository

__all__ = ["DynamoDBLocationRepository"]
