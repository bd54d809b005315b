"""
Flashcard CRUD endpoints.
"""
from fastapi import APIRouter, Depends, Response, status
from flashcards.api.dependencies import get_flashcard_service
from flashcards.schemas.flashcard import (
    CreateFlashcardRequest,
    CreateFlashcardResponse,
    FlashcardResponse,
    FlashcardsResponse,
    RandomFlashcardResponse,
    UpdateFlashcardRequest,
)
from flashcards.services.flashcard_service import FlashcardService

router = APIRouter(prefix="/flashcards", tags=["flashcards"])


@router.post("", response_model=CreateFlashcardResponse, status_code=status.HTTP_201_CREATED,
             response_model_exclude_none=True)
def create_flashcard(
    request: CreateFlashcardRequest,
    service: FlashcardService = Depends(get_flashcard_service)
):
    """
    Create a flashcard.

    If exactly one of question/answer is empty, it is filled with an AI
    translation of the other side using question_lang and answer_lang.
    """
    result = service.create_flashcard(request)
    return CreateFlashcardResponse(
        flashcard=FlashcardResponse.model_validate(result.flashcard),
        ai_translation_used=result.ai_translation_used,
        translated_field=result.translated_field,
    )


@router.get("", response_model=FlashcardsResponse)
def get_flashcards(
    service: FlashcardService = Depends(get_flashcard_service)
):
    """Get all flashcards, most recent first."""
    flashcards = service.get_all_flashcards()
    return FlashcardsResponse(
        flashcards=[FlashcardResponse.model_validate(flashcard) for flashcard in flashcards]
    )


@router.get("/random", response_model=RandomFlashcardResponse, response_model_exclude_none=True)
def get_random_flashcard(
    lang: str = "",
    service: FlashcardService = Depends(get_flashcard_service)
):
    """Get a random flashcard with an optional AI hint in `lang`."""
    flashcard = service.get_random_flashcard()
    hint = service.generate_hint(flashcard, lang)
    return RandomFlashcardResponse(
        flashcard=FlashcardResponse.model_validate(flashcard),
        ai_hint=hint,
    )


@router.get("/{flashcard_id}", response_model=FlashcardResponse)
def get_flashcard(
    flashcard_id: int,
    service: FlashcardService = Depends(get_flashcard_service)
):
    """Get a flashcard by ID."""
    return FlashcardResponse.model_validate(service.get_flashcard(flashcard_id))


@router.put("/{flashcard_id}", response_model=FlashcardResponse)
def update_flashcard(
    flashcard_id: int,
    request: UpdateFlashcardRequest,
    service: FlashcardService = Depends(get_flashcard_service)
):
    """Update a flashcard by ID. Fields left out keep their current value."""
    return FlashcardResponse.model_validate(service.update_flashcard(flashcard_id, request))


@router.delete("/{flashcard_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_flashcard(
    flashcard_id: int,
    service: FlashcardService = Depends(get_flashcard_service)
):
    """Delete a flashcard by ID."""
    service.delete_flashcard(flashcard_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
