from faq_search.api.routes import router

__all__ = ["router"]
