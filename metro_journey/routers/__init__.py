from .journey import router as journey_router

__all__ = ["journey_router"]
