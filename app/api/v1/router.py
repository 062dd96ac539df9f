from fastapi import APIRouter

from api.v1.routes.languages import router as languages_router
from modules.configs.controllers import domains_router
from modules.configs.controllers import router as configs_router
from modules.translations.controllers import router as translations_router

# Main v1 router (includes all endpoints)
router = APIRouter()
router.include_router(languages_router)
router.include_router(configs_router)
router.include_router(translations_router)
router.include_router(domains_router)
