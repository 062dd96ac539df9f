from fastapi import APIRouter

from infrastructure.services import LanguageResolverDep

router = APIRouter(prefix="/languages", tags=["languages"])


@router.get("")
def list_languages(resolver: LanguageResolverDep):
    """List the default language and every supported language code."""
    return {
        "default": resolver.get_default_language(),
        "supported": resolver.get_supported_languages(),
    }
