from dataclasses import asdict
from typing import Annotated, List, Optional

from fastapi import APIRouter, Header, Query, Response, status

from infrastructure.errors import MultilingualUnavailableError
from infrastructure.i18n import LanguageResolver
from infrastructure.logging import get_module_logger
from infrastructure.services import ConfigServiceDep, LanguageResolverDep
from modules.configs import schemas

logger = get_module_logger()

LangQuery = Annotated[
    Optional[str], Query(description="Explicit language code, e.g. en-us")
]
AcceptLanguageHeader = Annotated[Optional[str], Header()]

# Localized reads negotiate the language from ?lang= and Accept-Language.
# Without the multilingual capability they serve the language-free view,
# unless the caller explicitly asked for a language (503).
router = APIRouter(prefix="/configs", tags=["configs"])
domains_router = APIRouter(prefix="/domains", tags=["domains"])


def _resolve(
    resolver: LanguageResolver, lang: Optional[str], accept_language: Optional[str]
) -> str:
    return resolver.resolve(explicit=lang, preference_header=accept_language)


def _set_content_language(response: Response, language: Optional[str]) -> None:
    if language:
        response.headers["X-Content-Language"] = language


@router.get("", response_model=List[schemas.LocalizedConfigResponse])
def list_configs_endpoint(
    response: Response,
    service: ConfigServiceDep,
    resolver: LanguageResolverDep,
    lang: LangQuery = None,
    accept_language: AcceptLanguageHeader = None,
):
    """List configurations localized to the negotiated language.

    Configurations without a translation in the requested or default
    language are omitted.
    """
    language = _resolve(resolver, lang, accept_language)
    try:
        configs = service.list_configs(language)
    except MultilingualUnavailableError:
        if lang:
            raise
        return [c.to_dict() for c in service.list_config_views()]

    _set_content_language(response, language)
    return [c.to_dict() for c in configs]


@router.get("/{config_id}", response_model=schemas.LocalizedConfigResponse)
def get_config_endpoint(
    config_id: int,
    response: Response,
    service: ConfigServiceDep,
    resolver: LanguageResolverDep,
    lang: LangQuery = None,
    accept_language: AcceptLanguageHeader = None,
):
    """Get one configuration localized to the negotiated language.

    The `X-Content-Language` response header names the language actually
    served, which is the default language when fallback occurred.
    """
    language = _resolve(resolver, lang, accept_language)
    try:
        localized = service.get_config_by_id(config_id, language)
    except MultilingualUnavailableError:
        if lang:
            raise
        localized = service.get_config_view(config_id)

    _set_content_language(response, localized.language)
    return localized.to_dict()


@router.post(
    "", response_model=schemas.ConfigResponse, status_code=status.HTTP_201_CREATED
)
def create_config_endpoint(
    request: schemas.ConfigCreateRequest, service: ConfigServiceDep
):
    config = service.create_config(links=request.links, permissions=request.permissions)
    return asdict(config)


@router.put("/{config_id}", response_model=schemas.ConfigResponse)
def update_config_endpoint(
    config_id: int, request: schemas.ConfigUpdateRequest, service: ConfigServiceDep
):
    config = service.update_config(
        config_id, links=request.links, permissions=request.permissions
    )
    return asdict(config)


@router.delete("/{config_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_config_endpoint(config_id: int, service: ConfigServiceDep):
    """Delete a configuration with its translations and cached languages.

    Fails with 409 `CONFIG_IN_USE` while domains reference the configuration.
    """
    service.delete_config(config_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@domains_router.get("/{domain}", response_model=schemas.DomainConfigResponse)
def get_domain_config_endpoint(
    domain: str,
    response: Response,
    service: ConfigServiceDep,
    resolver: LanguageResolverDep,
    lang: LangQuery = None,
    accept_language: AcceptLanguageHeader = None,
):
    """Look up the configuration bound to a domain.

    `www.example.com` matches a registered `example.com` when no exact
    match exists.
    """
    language = _resolve(resolver, lang, accept_language)
    try:
        result = service.get_config_by_domain(domain, language)
    except MultilingualUnavailableError:
        if lang:
            raise
        result = service.get_domain_view(domain)

    _set_content_language(response, result.config.language)
    return result.to_dict()


@domains_router.post(
    "", response_model=schemas.DomainResponse, status_code=status.HTTP_201_CREATED
)
def create_domain_endpoint(
    request: schemas.DomainCreateRequest, service: ConfigServiceDep
):
    domain = service.create_domain(
        domain=request.domain, config_id=request.config_id, homepage=request.homepage
    )
    return asdict(domain)
