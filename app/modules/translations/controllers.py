from typing import List

from fastapi import APIRouter, Response, status

from infrastructure.logging import get_module_logger
from infrastructure.services import TranslationServiceDep
from modules.translations import schemas

logger = get_module_logger()

# Translation management works with or without a cache backend.
router = APIRouter(prefix="/configs/{config_id}/translations", tags=["translations"])


@router.post(
    "",
    response_model=schemas.TranslationResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_translation_endpoint(
    config_id: int,
    request: schemas.TranslationCreateRequest,
    service: TranslationServiceDep,
):
    """Create a translation for a configuration.

    **Errors:**
    - 400 for unsupported languages or invalid content
    - 404 if the configuration does not exist
    - 409 if the language already has a translation
    """
    translation = service.create_translation(
        config_id=config_id,
        language_code=request.language_code,
        title=request.title,
        author=request.author,
        description=request.description,
        keywords=request.keywords,
    )
    return translation.to_dict()


@router.get("", response_model=List[schemas.TranslationResponse])
def list_translations_endpoint(config_id: int, service: TranslationServiceDep):
    """List every translation of a configuration ordered by language code."""
    return [t.to_dict() for t in service.get_all_translations(config_id)]


@router.get("/{language_code}", response_model=schemas.TranslationResponse)
def get_translation_endpoint(
    config_id: int,
    language_code: str,
    response: Response,
    service: TranslationServiceDep,
):
    """Get one translation, falling back to the default language.

    The `X-Content-Language` response header names the language served.
    """
    content = service.get_translation_with_fallback(config_id, language_code)
    response.headers["X-Content-Language"] = content.actual_language
    return content.translation.to_dict()


@router.put("/{language_code}", response_model=schemas.TranslationResponse)
def update_translation_endpoint(
    config_id: int,
    language_code: str,
    request: schemas.TranslationUpdateRequest,
    service: TranslationServiceDep,
):
    translation = service.update_translation(
        config_id, language_code, request.model_dump(exclude_none=True)
    )
    return translation.to_dict()


@router.delete("/{language_code}", status_code=status.HTTP_204_NO_CONTENT)
def delete_translation_endpoint(
    config_id: int, language_code: str, service: TranslationServiceDep
):
    """Delete one translation.

    The default-language translation is protected while other translations
    of the configuration exist (400).
    """
    service.delete_translation(config_id, language_code)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
