from fastapi import APIRouter
from modules.i18n.api.routes import router as locales_router


router = APIRouter()
router.include_router(locales_router)
