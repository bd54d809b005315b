"""
API v1 router aggregation.
"""
from fastapi import APIRouter
from flashcards.api.v1.endpoints import flashcards

api_router = APIRouter()

# Each router already defines its own prefix
api_router.include_router(flashcards.router)
