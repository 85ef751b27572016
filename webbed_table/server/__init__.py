"""View context, helper loading and the FastAPI host."""
