from src.families.api.routes import router

__all__ = ["router"]
