from zoo_service.routes.zoos import router as zoo_router
from zoo_service.routes.animals import router as animal_router

__all__ = [
    "zoo_router",
    "animal_router",
]
